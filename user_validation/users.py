"""Operations over user records and lists of users."""
from __future__ import annotations

import logging
import math
import numbers
from collections.abc import Mapping, Sequence
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, Callable, List, Optional

from .config import DEFAULT_POLICY, ValidationPolicy
from .errors import (
    InvalidAge,
    InvalidEmail,
    InvalidMinAgeArgument,
    InvalidPassword,
    InvalidUserData,
    InvalidUserEntry,
    InvalidUserList,
    InvalidUsersArgument,
)
from .models import Age, User
from .validators import format_user_name, validate_email, validate_password

logger = logging.getLogger("uservalidation.users")

Clock = Callable[[], datetime]


def _current_timestamp() -> datetime:
    return datetime.now(timezone.utc)


def _is_number(value: object) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, Decimal):
        return not value.is_nan()
    if not isinstance(value, numbers.Real):
        return False
    return not math.isnan(value)


def _is_user_list(value: object) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


def _user_age(user: Any) -> Age:
    if isinstance(user, Mapping):
        age = user.get("age")
    else:
        age = getattr(user, "age", None)
    if not _is_number(age):
        raise InvalidUserEntry()
    return age


def _round_half_away_from_zero(value: float, digits: int) -> float:
    factor = 10 ** digits
    magnified = abs(value) * factor
    # Infinite averages and values too large to scale pass through unrounded.
    if not math.isfinite(magnified):
        return value
    return math.copysign(math.floor(magnified + 0.5), value) / factor


def filter_users_by_age(users: Sequence[Any], min_age: Age) -> List[Any]:
    """Return the users whose ``age`` is at least ``min_age``, preserving order."""

    if not _is_user_list(users):
        raise InvalidUsersArgument()

    if not _is_number(min_age) or min_age < 0:
        raise InvalidMinAgeArgument()

    return [user for user in users if _user_age(user) >= min_age]


def build_user(
    user_data: Mapping[str, Any],
    *,
    policy: ValidationPolicy = DEFAULT_POLICY,
    clock: Optional[Clock] = None,
) -> User:
    """Validate ``user_data`` and return a :class:`User`.

    Checks run in a fixed order (email, password, age) and stop at the first
    failure. The name is formatted last, so an empty or non-string name
    surfaces as :class:`InvalidNameArgument`.
    """

    if not isinstance(user_data, Mapping):
        raise InvalidUserData()

    email = user_data.get("email")
    password = user_data.get("password")
    name = user_data.get("name")
    age = user_data.get("age")

    if not validate_email(email):
        logger.debug("Rejected user record: invalid email %r", email)
        raise InvalidEmail()

    if not validate_password(password, policy=policy):
        logger.debug("Rejected user record for %s: invalid password", email)
        raise InvalidPassword()

    if not _is_number(age) or age < policy.min_age or age > policy.max_age:
        logger.debug("Rejected user record for %s: invalid age %r", email, age)
        raise InvalidAge()

    created_at = (clock or _current_timestamp)()
    user = User(email=email, name=format_user_name(name), age=age, created_at=created_at)
    logger.debug("Built user record for %s", email)
    return user


def create_user(
    user_data: Mapping[str, Any],
    *,
    policy: ValidationPolicy = DEFAULT_POLICY,
    clock: Optional[Clock] = None,
) -> dict:
    """Validate ``user_data`` and return the public record as a dictionary."""

    return build_user(user_data, policy=policy, clock=clock).to_dict()


def calculate_average_age(users: Sequence[Any], *, policy: ValidationPolicy = DEFAULT_POLICY) -> float:
    if not _is_user_list(users) or len(users) == 0:
        raise InvalidUserList()

    total_age = sum(float(_user_age(user)) for user in users)
    return _round_half_away_from_zero(total_age / len(users), policy.average_precision)


__all__ = [
    "build_user",
    "calculate_average_age",
    "create_user",
    "filter_users_by_age",
]
