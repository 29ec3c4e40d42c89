"""Domain exceptions for users app."""


class UsersServiceError(Exception):
    """Base exception for all users service errors."""
    pass


class UserNotFoundError(UsersServiceError):
    """No user with this username."""
    pass
