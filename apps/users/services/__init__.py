"""
Users services - Business logic layer.
"""

from .user_lookup import (
    list_users,
    get_user_by_username,
)

from .exceptions import (
    UsersServiceError,
    UserNotFoundError,
)

__all__ = [
    'list_users',
    'get_user_by_username',
    'UsersServiceError',
    'UserNotFoundError',
]
