"""Validation and formatting helpers for user records."""

from __future__ import annotations

from .config import DEFAULT_POLICY, ValidationPolicy, load_policy
from .errors import (
    InvalidAge,
    InvalidEmail,
    InvalidMinAgeArgument,
    InvalidNameArgument,
    InvalidPassword,
    InvalidUserData,
    InvalidUserEntry,
    InvalidUserList,
    InvalidUsersArgument,
    PolicyError,
    UserValidationError,
)
from .models import User
from .users import build_user, calculate_average_age, create_user, filter_users_by_age
from .validators import format_user_name, validate_email, validate_password

__all__ = [
    "DEFAULT_POLICY",
    "ValidationPolicy",
    "load_policy",
    "User",
    "UserValidationError",
    "InvalidAge",
    "InvalidEmail",
    "InvalidMinAgeArgument",
    "InvalidNameArgument",
    "InvalidPassword",
    "InvalidUserData",
    "InvalidUserEntry",
    "InvalidUserList",
    "InvalidUsersArgument",
    "PolicyError",
    "build_user",
    "calculate_average_age",
    "create_user",
    "filter_users_by_age",
    "format_user_name",
    "validate_email",
    "validate_password",
]
