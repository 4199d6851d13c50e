"""
Abstractions for pluggable collaborators. Inversion of control: the core
depends on interfaces, not on Streamlit, the OS clipboard or a data file.
Protocols define what a collaborator can do, without saying how.

Common protocols:
- SessionRegistry.get(session_id) -> Session | None & list_sessions()
- NotificationService.notify(kind, text), fire-and-forget
- Clipboard.copy(text)
- ReplyFactory.checkpoint_ack() / recovery_ack(text)
- Clock: callable returning monotonic seconds

Testing: Use simple fake implementations (recording notifier, manual clock)
to drive the controller without a browser or real timers.
"""

from __future__ import annotations
from typing import Callable, Optional, Protocol
from .models import NotificationKind, Session

Clock = Callable[[], float]


class SessionRegistry(Protocol):
    def get(self, session_id: str) -> Optional[Session]: ...

    def list_sessions(self) -> list[Session]: ...


class NotificationService(Protocol):
    def notify(self, kind: NotificationKind, text: str) -> None: ...


class Clipboard(Protocol):
    def copy(self, text: str) -> None: ...


class ReplyFactory(Protocol):
    def checkpoint_ack(self) -> str: ...

    def recovery_ack(self, text: str) -> str: ...

    def draft_cached_notice(self) -> str: ...

    def draft_synced_notice(self) -> str: ...

    def summary_copied_notice(self) -> str: ...
