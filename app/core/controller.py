"""
Purpose: The single orchestration point for a workspace. Owns the explicit
WorkspaceState (via the state store), the message stream and the reply
scheduler, and exposes the user command surface.
Prevents UI from knowing how drafts, chapters or deferred replies work.

Key responsibilities:
- Activate sessions from the registry and keep their histories alive.
- Route submissions through the connectivity controller (stream or draft).
- Recover drafts, move the viewport between chapters, copy summaries.
- Pump due replies; the UI calls pump() on each rerun.

Every command is total: unknown ids, blank text, empty drafts and
out-of-range offsets degrade to no-ops or an empty viewport.

Testing: Pure unit tests with fakes: manual clock, InMemoryNotifier,
InMemoryClipboard, InMemorySessionRegistry.
"""

from __future__ import annotations
import logging
import time
from typing import Optional

from .config import WorkspaceSettings
from .interfaces import (
    Clipboard,
    Clock,
    NotificationService,
    ReplyFactory,
    SessionRegistry,
)
from .models import (
    Chapter,
    ConnectivityMode,
    Message,
    NotificationKind,
    Session,
    WorkspaceState,
    switch_session,
)
from .persistence.session_store import InMemoryStateStore
from .prompts import DefaultReplyFactory
from .services.checkpoints import CheckpointIndex
from .services.connectivity import ConnectivityModeController
from .services.draft_cache import DraftCache
from .services.message_stream import MessageStream
from .services.notifications import InMemoryClipboard
from .services.scheduler import ReplyScheduler

logger = logging.getLogger(__name__)


def _clean(text: Optional[str]) -> str:
    return (text or "").replace("\x00", "")


class WorkspaceController:
    def __init__(
        self,
        registry: SessionRegistry,
        notifier: NotificationService,
        *,
        settings: Optional[WorkspaceSettings] = None,
        clipboard: Optional[Clipboard] = None,
        clock: Clock = time.monotonic,
        replies: Optional[ReplyFactory] = None,
        session_id: Optional[str] = None,
    ):
        self.settings = settings or WorkspaceSettings()
        self.registry: SessionRegistry = registry
        self.notifier: NotificationService = notifier
        self.clipboard: Clipboard = clipboard or InMemoryClipboard()
        self.replies: ReplyFactory = replies or DefaultReplyFactory(
            preview_chars=self.settings.recovered_preview_chars
        )

        first = self._initial_session(session_id or self.settings.default_session_id)
        self.state_store = InMemoryStateStore(
            WorkspaceState(active_session_id=first.id if first else "")
        )
        self.stream = MessageStream()
        self.scheduler = ReplyScheduler(
            self.stream, clock=clock, policy=self.settings.reply_policy
        )
        self.drafts = DraftCache(
            self.state_store,
            self.stream,
            self.scheduler,
            self.notifier,
            self.replies,
            reply_delay=self.settings.recovery_reply_delay_seconds,
        )
        self.connectivity = ConnectivityModeController(
            self.state_store,
            self.stream,
            self.drafts,
            self.scheduler,
            self.replies,
            reply_delay=self.settings.reply_delay_seconds,
        )
        self.checkpoints = CheckpointIndex(self.state_store)

        if first is not None:
            self.stream.activate(first)

    def _initial_session(self, session_id: str) -> Optional[Session]:
        session = self.registry.get(session_id)
        if session is not None:
            return session
        sessions = self.registry.list_sessions()
        if sessions:
            logger.warning(
                "Unknown start session %r, falling back to %r", session_id, sessions[0].id
            )
            return sessions[0]
        logger.warning("Registry is empty; workspace starts without a session")
        return None

    # ---------------------------
    # Reads
    # ---------------------------
    @property
    def state(self) -> WorkspaceState:
        return self.state_store.get()

    def snapshot(self) -> dict:
        """Serializable view of the explicit workspace state."""
        return self.state.to_dict()

    def is_offline(self) -> bool:
        return self.state.is_offline

    def active_session(self) -> Optional[Session]:
        return self.registry.get(self.state.active_session_id)

    def list_sessions(self) -> list[Session]:
        return self.registry.list_sessions()

    def list_chapters(self) -> list[Chapter]:
        return self.checkpoints.list_chapters(self.active_session())

    def get_history(self) -> list[Message]:
        return self.stream.messages

    def visible_messages(self) -> list[Message]:
        return self.stream.slice(self.state.start_index)

    def has_recovery_point(self) -> bool:
        """Online with a draft left over from an offline period."""
        return self.state.phase == "online-pending-recovery"

    # ---------------------------
    # Commands
    # ---------------------------
    def submit(self, text: str) -> Optional[Message]:
        """Send typed text. Blank input is ignored."""
        text = _clean(text)
        if not text.strip():
            return None
        return self.connectivity.route(text)

    def toggle_offline_mode(self) -> ConnectivityMode:
        return self.connectivity.toggle()

    def set_mode(self, mode: ConnectivityMode) -> None:
        self.connectivity.set_mode(mode)

    def sync_draft(self) -> Optional[Message]:
        return self.drafts.sync()

    def open_timeline(self) -> None:
        self.checkpoints.open_timeline()

    def close_timeline(self) -> None:
        self.checkpoints.close_timeline()

    def jump_to_chapter(self, chapter_id: int) -> Optional[Chapter]:
        chapter = self.checkpoints.find(self.active_session(), chapter_id)
        if chapter is None:
            logger.warning(
                "No chapter %r in session %r", chapter_id, self.state.active_session_id
            )
            return None
        self.checkpoints.jump(chapter.start_index)
        return chapter

    def restore_full_history(self) -> None:
        self.checkpoints.restore_full_history()

    def switch_session(self, session_id: str) -> Optional[Session]:
        """Activate another session; its viewport always starts at 0."""
        session = self.registry.get(session_id)
        if session is None:
            logger.warning(
                "Unknown session %r; staying on %r",
                session_id,
                self.state.active_session_id,
            )
            return None
        left = self.state.active_session_id
        self.state_store.set(switch_session(self.state, session.id))
        self.stream.activate(session)
        if left != session.id:
            self.scheduler.on_session_switch(left)
        logger.info("Switched session %s -> %s", left, session.id)
        return session

    def copy_summary(self, chapter_id: int) -> Optional[str]:
        chapter = self.checkpoints.find(self.active_session(), chapter_id)
        if chapter is None:
            return None
        self.clipboard.copy(chapter.summary)
        self.notifier.notify(NotificationKind.SUCCESS, self.replies.summary_copied_notice())
        return chapter.summary

    def pump(self) -> list[Message]:
        """Deliver every deferred reply that is due."""
        return self.scheduler.run_due()

    def has_pending_replies(self) -> bool:
        return self.scheduler.has_pending()
