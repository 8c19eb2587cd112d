"""Exceptions raised by the user validation helpers."""
from __future__ import annotations

from typing import Optional


class UserValidationError(Exception):
    """Base class for every error raised while validating user records."""

    message = "Invalid user data"

    def __init__(self, message: Optional[str] = None) -> None:
        super().__init__(message or self.message)


class InvalidUsersArgument(UserValidationError, TypeError):
    message = "Users must be an array"


class InvalidMinAgeArgument(UserValidationError, TypeError):
    message = "MinAge must be a positive number"


class InvalidNameArgument(UserValidationError, TypeError):
    message = "Name must be a non-empty string"


class InvalidEmail(UserValidationError, ValueError):
    message = "Invalid email"


class InvalidPassword(UserValidationError, ValueError):
    message = "Invalid password"


class InvalidAge(UserValidationError, ValueError):
    message = "Invalid age"


class InvalidUserList(UserValidationError, TypeError):
    message = "Users must be a non-empty array"


class InvalidUserEntry(UserValidationError, TypeError):
    """Raised when an element of a user list has no usable ``age``."""

    message = "Each user must have a numeric age"


class InvalidUserData(UserValidationError, TypeError):
    message = "User data must be a mapping"


class PolicyError(UserValidationError, ValueError):
    """Raised when a validation policy file is malformed."""

    message = "Invalid validation policy"


__all__ = [
    "UserValidationError",
    "InvalidUsersArgument",
    "InvalidMinAgeArgument",
    "InvalidNameArgument",
    "InvalidEmail",
    "InvalidPassword",
    "InvalidAge",
    "InvalidUserList",
    "InvalidUserEntry",
    "InvalidUserData",
    "PolicyError",
]
