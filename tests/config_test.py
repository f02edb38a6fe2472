"""Tests for configuration parsing."""

from __future__ import annotations

import pytest
from pydantic import ValidationError
from safir.logging import LogLevel, Profile

from friendlytoken.config import Config


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for setting in ("NAME", "PROFILE", "LOG_LEVEL", "PATH_PREFIX"):
        monkeypatch.delenv(f"FRIENDLYTOKEN_{setting}", raising=False)
    config = Config()
    assert config.name == "friendlytoken"
    assert config.profile == Profile.development
    assert config.log_level == LogLevel.INFO
    assert config.path_prefix == ""


def test_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FRIENDLYTOKEN_PROFILE", "production")
    monkeypatch.setenv("FRIENDLYTOKEN_LOG_LEVEL", "WARNING")
    monkeypatch.setenv("FRIENDLYTOKEN_PATH_PREFIX", "/api")
    config = Config()
    assert config.profile == Profile.production
    assert config.log_level == LogLevel.WARNING
    assert config.path_prefix == "/api"

    monkeypatch.setenv("FRIENDLYTOKEN_LOG_LEVEL", "LOUD")
    with pytest.raises(ValidationError):
        Config()
