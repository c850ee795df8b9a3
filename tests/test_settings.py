from __future__ import annotations

import logging
from pathlib import Path

import pytest
from pydantic import ValidationError

from role_acl.settings import Settings


@pytest.fixture(autouse=True)
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run each test in an empty directory without ROLE_ACL_* overrides."""

    for var in ("ROLE_ACL_LOG_LEVEL", "ROLE_ACL_LOG_FORMAT", "ROLE_ACL_AUDIT_EVENTS"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)


def test_settings_defaults() -> None:
    settings = Settings()

    assert settings.log_format == "text"
    assert settings.log_level == logging.INFO
    assert settings.audit_events is True


def test_log_level_accepts_names_and_numbers(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ROLE_ACL_LOG_LEVEL", "debug")
    assert Settings().log_level == logging.DEBUG

    monkeypatch.setenv("ROLE_ACL_LOG_LEVEL", "30")
    assert Settings().log_level == logging.WARNING

    monkeypatch.setenv("ROLE_ACL_LOG_LEVEL", "loud")
    with pytest.raises(ValidationError):
        Settings()


def test_json_is_an_alias_for_ndjson() -> None:
    assert Settings(log_format="json").log_format == "ndjson"

    with pytest.raises(ValidationError):
        Settings(log_format="xml")


def test_sources_precedence(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    (tmp_path / "settings.toml").write_text(
        'log_format = "ndjson"\nlog_level = "ERROR"\naudit_events = false\n',
        encoding="utf-8",
    )
    settings = Settings.load(cwd=tmp_path)
    assert settings.log_format == "ndjson"
    assert settings.log_level == logging.ERROR
    assert settings.audit_events is False

    (tmp_path / ".env").write_text("ROLE_ACL_LOG_LEVEL=WARNING\n", encoding="utf-8")
    assert Settings.load(cwd=tmp_path).log_level == logging.WARNING

    monkeypatch.setenv("ROLE_ACL_LOG_LEVEL", "DEBUG")
    assert Settings.load(cwd=tmp_path).log_level == logging.DEBUG

    assert Settings.load(cwd=tmp_path, log_level=logging.CRITICAL).log_level == logging.CRITICAL
