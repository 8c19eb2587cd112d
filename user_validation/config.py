"""Configuration for the user validation rules."""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Dict, Optional

import yaml

from .errors import PolicyError

logger = logging.getLogger("uservalidation.config")

POLICY_ENV_VAR = "USER_VALIDATION_POLICY"

# Decimal places a float average can meaningfully carry.
MAX_AVERAGE_PRECISION = 15


@dataclass(frozen=True)
class ValidationPolicy:
    """Tunable limits applied by the validators."""

    password_min_length: int = 8
    min_age: int = 0
    max_age: int = 150
    average_precision: int = 2

    @staticmethod
    def from_dict(data: Dict[str, object]) -> "ValidationPolicy":
        """Create a :class:`ValidationPolicy` from raw dictionary data."""
        known = {field.name for field in fields(ValidationPolicy)}
        unknown = set(data.keys()) - known
        if unknown:
            raise PolicyError(f"Unknown validation settings: {', '.join(sorted(unknown))}")

        values: Dict[str, int] = {}
        for name, raw in data.items():
            if isinstance(raw, bool) or not isinstance(raw, int):
                raise PolicyError(f"Validation setting '{name}' must be an integer")
            if raw < 0:
                raise PolicyError(f"Validation setting '{name}' must not be negative")
            values[name] = raw

        policy = ValidationPolicy(**values)
        if policy.min_age > policy.max_age:
            raise PolicyError("min_age must not exceed max_age")
        if policy.average_precision > MAX_AVERAGE_PRECISION:
            raise PolicyError(f"average_precision must not exceed {MAX_AVERAGE_PRECISION}")
        return policy


DEFAULT_POLICY = ValidationPolicy()


def load_policy(config_path: Path) -> ValidationPolicy:
    """Load a validation policy from a YAML file."""
    with config_path.open("r", encoding="utf-8") as handle:
        raw = yaml.safe_load(handle) or {}

    if not isinstance(raw, dict):
        raise PolicyError("Policy file must contain a mapping")

    settings = raw.get("validation") or {}
    if not isinstance(settings, dict):
        raise PolicyError("The 'validation' key must contain a mapping")

    policy = ValidationPolicy.from_dict(settings)
    logger.info("Loaded validation policy from %s", config_path)
    return policy


def resolve_policy_path(env_value: Optional[str]) -> Path:
    """Resolve the path to the policy file."""
    if env_value:
        return Path(env_value).expanduser().resolve(strict=False)
    return (Path(__file__).resolve().parent.parent / "config" / "validation.yaml").resolve(strict=False)


def load_policy_from_env() -> ValidationPolicy:
    path = resolve_policy_path(os.getenv(POLICY_ENV_VAR))
    if not path.is_file():
        return DEFAULT_POLICY
    return load_policy(path)


__all__ = [
    "DEFAULT_POLICY",
    "MAX_AVERAGE_PRECISION",
    "POLICY_ENV_VAR",
    "ValidationPolicy",
    "load_policy",
    "load_policy_from_env",
    "resolve_policy_path",
]
