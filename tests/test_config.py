from __future__ import annotations

import logging
from pathlib import Path

import pytest

from user_validation.config import (
    DEFAULT_POLICY,
    MAX_AVERAGE_PRECISION,
    POLICY_ENV_VAR,
    ValidationPolicy,
    load_policy,
    load_policy_from_env,
    resolve_policy_path,
)
from user_validation.errors import PolicyError


def _write(path: Path, text: str) -> Path:
    path.write_text(text, encoding="utf-8")
    return path


def test_defaults() -> None:
    assert DEFAULT_POLICY == ValidationPolicy(password_min_length=8, min_age=0, max_age=150, average_precision=2)


def test_load_policy_reads_validation_section(tmp_path: Path) -> None:
    policy_path = _write(
        tmp_path / "policy.yaml",
        "validation:\n  password_min_length: 12\n  max_age: 120\n",
    )

    policy = load_policy(policy_path)

    assert policy.password_min_length == 12
    assert policy.max_age == 120
    assert policy.min_age == 0


def test_empty_file_yields_defaults(tmp_path: Path) -> None:
    assert load_policy(_write(tmp_path / "empty.yaml", "")) == DEFAULT_POLICY


@pytest.mark.parametrize(
    "body",
    [
        "validation:\n  colour: blue\n",
        "validation:\n  min_age: -1\n",
        "validation:\n  max_age: old\n",
        "validation:\n  max_age: true\n",
        "validation:\n  min_age: 90\n  max_age: 80\n",
        "validation: [1, 2]\n",
        "- just\n- a list\n",
        "validation:\n  average_precision: 400\n",
    ],
)
def test_rejects_malformed_policies(tmp_path: Path, body: str) -> None:
    with pytest.raises(PolicyError):
        load_policy(_write(tmp_path / "bad.yaml", body))


def test_resolve_policy_path_prefers_env_value(tmp_path: Path) -> None:
    target = tmp_path / "custom.yaml"
    assert resolve_policy_path(str(target)) == target.resolve()
    assert resolve_policy_path(None).name == "validation.yaml"


def test_load_policy_from_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    policy_path = _write(tmp_path / "policy.yaml", "validation:\n  average_precision: 1\n")
    monkeypatch.setenv(POLICY_ENV_VAR, str(policy_path))

    assert load_policy_from_env().average_precision == 1


def test_missing_env_file_falls_back_to_defaults(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(POLICY_ENV_VAR, str(tmp_path / "missing.yaml"))

    assert load_policy_from_env() == DEFAULT_POLICY


def test_precision_limit_is_inclusive() -> None:
    assert ValidationPolicy.from_dict({"average_precision": MAX_AVERAGE_PRECISION}).average_precision == 15
    with pytest.raises(PolicyError, match="average_precision"):
        ValidationPolicy.from_dict({"average_precision": MAX_AVERAGE_PRECISION + 1})


def test_rejected_policy_is_not_logged_as_loaded(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    bad = _write(tmp_path / "bad.yaml", "validation:\n  min_age: -1\n")
    good = _write(tmp_path / "good.yaml", "validation:\n  min_age: 1\n")

    with caplog.at_level(logging.INFO, logger="uservalidation.config"):
        with pytest.raises(PolicyError):
            load_policy(bad)
        load_policy(good)

    loaded = [record.getMessage() for record in caplog.records if "Loaded validation policy" in record.getMessage()]
    assert loaded == [f"Loaded validation policy from {good}"]
