"""User lookup service."""

from django.db.models import QuerySet

from apps.users.models import User
from .exceptions import UserNotFoundError


def list_users() -> QuerySet[User]:
    """Return every user ordered by username."""
    return User.objects.order_by('username')


def get_user_by_username(*, username: str) -> User:
    """
    Retrieve a user by username.

    Raises:
        UserNotFoundError: If no user has this username
    """
    try:
        return User.objects.get(username=username)
    except User.DoesNotExist:
        raise UserNotFoundError(f"No user found with username {username}")
