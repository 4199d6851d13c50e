"""Tests for WorkspaceSettings defaults and environment overrides."""

import pytest
from pydantic import ValidationError

from core.config import WorkspaceSettings
from core.models import ReplyPolicy


def test_defaults_match_reference_behaviour(monkeypatch):
    for key in ("FLUX_REPLY_DELAY_MS", "FLUX_REPLY_POLICY", "FLUX_LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)
    settings = WorkspaceSettings(_env_file=None)
    assert settings.reply_delay_seconds == pytest.approx(0.7)
    assert settings.recovery_reply_delay_seconds == pytest.approx(0.8)
    assert settings.notification_ttl_seconds == 3.0
    assert settings.recovered_preview_chars == 40
    assert settings.reply_policy is ReplyPolicy.ACTIVE


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("FLUX_REPLY_DELAY_MS", "50")
    monkeypatch.setenv("FLUX_REPLY_POLICY", "origin")
    monkeypatch.setenv("FLUX_LOG_LEVEL", "debug")
    settings = WorkspaceSettings(_env_file=None)
    assert settings.reply_delay_ms == 50
    assert settings.reply_policy is ReplyPolicy.ORIGIN
    assert settings.log_level == "DEBUG"


def test_unknown_policy_is_rejected():
    with pytest.raises(ValidationError):
        WorkspaceSettings(_env_file=None, reply_policy="queue")


def test_negative_delay_is_rejected():
    with pytest.raises(ValidationError):
        WorkspaceSettings(_env_file=None, reply_delay_ms=-1)
