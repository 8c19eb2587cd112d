"""Command-line interface for the user validation helpers."""

from __future__ import annotations
import argparse
import json
import logging
import sys
from getpass import getpass
from pathlib import Path
from typing import Any, List, Sequence

import yaml

from user_validation.config import (
    POLICY_ENV_VAR,
    ValidationPolicy,
    load_policy,
    load_policy_from_env,
)
from user_validation.errors import UserValidationError
from user_validation.users import calculate_average_age, create_user, filter_users_by_age
from user_validation.validators import validate_email, validate_password

logger = logging.getLogger("uservalidation.main")

_DEFAULT_MIN_AGE = 18.0


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="User record validation utilities")
    parser.add_argument(
        "--policy",
        default=None,
        help=f"Path to a YAML validation policy (defaults to {POLICY_ENV_VAR} or config/validation.yaml)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    create_parser = subparsers.add_parser("create-user", help="Validate and build a user record")
    create_parser.add_argument("name", help="Display name for the user")
    create_parser.add_argument("email", help="Email address for the user")
    create_parser.add_argument("--age", type=float, required=True, help="Age in years")

    email_parser = subparsers.add_parser("check-email", help="Check the shape of email addresses")
    email_parser.add_argument("emails", nargs="+", help="Addresses to check")

    stats_parser = subparsers.add_parser("stats", help="Summarise ages in a YAML or JSON user list")
    stats_parser.add_argument("path", type=Path, help="File holding the users")
    stats_parser.add_argument(
        "--min-age",
        type=float,
        default=_DEFAULT_MIN_AGE,
        help="Minimum age to count as eligible (default: 18)",
    )

    args_list = list(argv) if argv is not None else sys.argv[1:]
    return parser.parse_args(args_list)


def _resolve_policy(path: str | None) -> ValidationPolicy:
    if path:
        return load_policy(Path(path).expanduser())
    return load_policy_from_env()


def _prompt_for_password(policy: ValidationPolicy) -> str | None:
    for _ in range(3):
        password = getpass(f"Password (min {policy.password_min_length} characters, a digit and a capital): ")
        if not validate_password(password, policy=policy):
            print("Password is too weak. Please try again.", file=sys.stderr)
            continue
        confirmation = getpass("Confirm password: ")
        if password != confirmation:
            print("Passwords do not match. Please try again.", file=sys.stderr)
            continue
        return password
    return None


def _normalise_age(value: float) -> int | float:
    return int(value) if value.is_integer() else value


def _create_user(args: argparse.Namespace, policy: ValidationPolicy) -> int:
    password = _prompt_for_password(policy)
    if password is None:
        print("Failed to set password after three attempts.", file=sys.stderr)
        return 1

    record = create_user(
        {
            "email": args.email.strip(),
            "password": password,
            "name": args.name.strip(),
            "age": _normalise_age(args.age),
        },
        policy=policy,
    )
    print(json.dumps(record, indent=2))
    return 0


def _check_emails(emails: Sequence[str]) -> int:
    status = 0
    for email in emails:
        if validate_email(email):
            print(f"{email}: valid")
        else:
            print(f"{email}: invalid")
            status = 1
    return status


def _load_users(path: Path) -> List[Any]:
    """Read a user list from ``path``. JSON documents are parsed as YAML."""

    with path.open("r", encoding="utf-8") as handle:
        raw = yaml.safe_load(handle)

    if isinstance(raw, dict):
        raw = raw.get("users")
    if raw is None:
        return []
    return raw


def _show_stats(path: Path, min_age: float, policy: ValidationPolicy) -> int:
    users = _load_users(path)
    eligible = filter_users_by_age(users, _normalise_age(min_age))
    average = calculate_average_age(users, policy=policy)
    logger.info("Summarised %d user(s) from %s", len(users), path)

    print(f"Users: {len(users)}")
    print(f"Aged {_normalise_age(min_age)} or over: {len(eligible)}")
    print(f"Average age: {average}")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for CLI usage."""

    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )

    try:
        policy = _resolve_policy(args.policy)
        if args.command == "create-user":
            return _create_user(args, policy)
        if args.command == "check-email":
            return _check_emails(args.emails)
        if args.command == "stats":
            return _show_stats(args.path, args.min_age, policy)
    except UserValidationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    except (OSError, yaml.YAMLError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    return 2


if __name__ == "__main__":
    raise SystemExit(main())
