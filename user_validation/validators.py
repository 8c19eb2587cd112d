"""Shape checks for individual user fields."""
from __future__ import annotations

import re

from .config import DEFAULT_POLICY, ValidationPolicy
from .errors import InvalidNameArgument

# ECMAScript's whitespace set. Python's \s also covers \x1c-\x1f and \x85 but not \ufeff.
_WHITESPACE = r"\t\n\v\f\r \u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff"
_EMAIL_PATTERN = re.compile(rf"[^{_WHITESPACE}@]+@[^{_WHITESPACE}@]+\.[^{_WHITESPACE}@]+")
_DIGIT_PATTERN = re.compile(r"[0-9]")
_UPPERCASE_PATTERN = re.compile(r"[A-Z]")


def validate_email(email: object) -> bool:
    """Return ``True`` when ``email`` looks like ``local@domain.tld``.

    Only the shape is checked; deliverability is not.
    """

    if not isinstance(email, str):
        return False
    return _EMAIL_PATTERN.fullmatch(email) is not None


def validate_password(password: object, *, policy: ValidationPolicy = DEFAULT_POLICY) -> bool:
    """Return ``True`` for passwords that are long enough and mix digits with capitals."""

    if not isinstance(password, str):
        return False

    if len(password) < policy.password_min_length:
        return False

    has_digit = _DIGIT_PATTERN.search(password) is not None
    has_uppercase = _UPPERCASE_PATTERN.search(password) is not None
    return has_digit and has_uppercase


def format_user_name(name: object) -> str:
    if not isinstance(name, str) or len(name) == 0:
        raise InvalidNameArgument()

    return name[0].upper() + name[1:].lower()


__all__ = ["format_user_name", "validate_email", "validate_password"]
