"""
Purpose: Headless collaborators for notices and the clipboard.
The UI swaps in Streamlit-backed versions; tests and scripts use these.
"""

from __future__ import annotations
import logging
import time
from typing import Optional

from ..interfaces import Clock
from ..models import Notification, NotificationKind

logger = logging.getLogger(__name__)

NOTIFICATION_TTL_SECONDS = 3.0


class InMemoryNotifier:
    """Keeps every notice; a notice is visible for `ttl` seconds after it is raised."""

    def __init__(
        self, *, clock: Clock = time.monotonic, ttl: float = NOTIFICATION_TTL_SECONDS
    ):
        self.clock = clock
        self.ttl = ttl
        self.history: list[Notification] = []

    def notify(self, kind: NotificationKind, text: str) -> None:
        self.history.append(Notification(kind=kind, text=text, created_at=self.clock()))
        logger.debug("Notice [%s] %s", kind.value, text)

    def active(self) -> list[Notification]:
        now = self.clock()
        return [n for n in self.history if now - n.created_at < self.ttl]

    def latest(self) -> Optional[Notification]:
        visible = self.active()
        return visible[-1] if visible else None

    def of_kind(self, kind: NotificationKind) -> list[Notification]:
        return [n for n in self.history if n.kind is kind]


class InMemoryClipboard:
    def __init__(self) -> None:
        self.text: Optional[str] = None

    def copy(self, text: str) -> None:
        self.text = text
