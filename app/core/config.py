"""
Workspace settings loaded from environment variables (prefix FLUX_) or a
local .env file.

Usage:
    from core.config import get_settings

    settings = get_settings()
    settings.reply_delay_ms
"""

from __future__ import annotations
from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .models import ReplyPolicy

DEFAULT_SESSIONS_PATH = Path(__file__).resolve().parent / "data" / "sessions.json"


class WorkspaceSettings(BaseSettings):
    """Tunables for the workspace. Defaults reproduce the reference behaviour."""

    model_config = SettingsConfigDict(
        env_prefix="FLUX_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ---------------------------
    # Simulated latency
    # ---------------------------
    reply_delay_ms: int = Field(default=700, ge=0)
    recovery_reply_delay_ms: int = Field(default=800, ge=0)
    reply_policy: ReplyPolicy = Field(
        default=ReplyPolicy.ACTIVE,
        description="Where a deferred reply lands if the session changed: "
        "active, origin or cancel",
    )

    # ---------------------------
    # Notifications
    # ---------------------------
    notification_ttl_seconds: float = Field(default=3.0, gt=0)
    recovered_preview_chars: int = Field(default=40, ge=0)

    # ---------------------------
    # Content
    # ---------------------------
    sessions_path: Path = DEFAULT_SESSIONS_PATH
    default_session_id: str = "blockchain"

    # ---------------------------
    # Logging
    # ---------------------------
    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def _upper_log_level(cls, v: str) -> str:
        return v.upper()

    @property
    def reply_delay_seconds(self) -> float:
        return self.reply_delay_ms / 1000.0

    @property
    def recovery_reply_delay_seconds(self) -> float:
        return self.recovery_reply_delay_ms / 1000.0


@lru_cache
def get_settings() -> WorkspaceSettings:
    return WorkspaceSettings()
