"""Domain errors raised by the user service and its stores."""
from typing import Optional


class UserServiceError(Exception):
    """Base exception for user management."""
    pass


class UserNotFoundError(UserServiceError, ValueError):
    """Raised when no user exists for the requested id."""

    def __init__(self, user_id: Optional[int] = None):
        self.user_id = user_id
        if user_id is None:
            message = "User not found"
        else:
            message = f"User {user_id} not found"
        super().__init__(message)


class UserAlreadyExistsError(UserServiceError, ValueError):
    """Raised when another user already holds a unique field value."""

    def __init__(self, field: str, value: Optional[str] = None):
        self.field = field
        self.value = value
        super().__init__(f"User with this {field} already exists")
