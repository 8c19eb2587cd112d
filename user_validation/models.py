"""Domain models produced by the user validation helpers."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Dict, Union

Age = Union[int, float]


def format_timestamp(value: datetime) -> str:
    """Render ``value`` as an ISO-8601 UTC string with millisecond precision."""

    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return value.isoformat(timespec="milliseconds").replace("+00:00", "Z")


@dataclass(frozen=True)
class User:
    """A validated user record. The password is never kept."""

    email: str
    name: str
    age: Age
    created_at: datetime

    def to_dict(self) -> Dict[str, object]:
        return {
            "email": self.email,
            "name": self.name,
            "age": self.age,
            "createdAt": format_timestamp(self.created_at),
        }


__all__ = ["Age", "User", "format_timestamp"]
