"""
Purpose: Single-slot holding area for text typed while offline.
Overwritten, never queued: a second offline submission silently replaces
the first. sync() pushes the slot back into the stream once online.
"""

from __future__ import annotations
import logging
from typing import Optional

from ..interfaces import NotificationService, ReplyFactory
from ..models import Message, NotificationKind, Role, clear_draft, store_draft
from ..persistence.session_store import InMemoryStateStore
from .message_stream import MessageStream
from .scheduler import ReplyScheduler

logger = logging.getLogger(__name__)


class DraftCache:
    def __init__(
        self,
        state_store: InMemoryStateStore,
        stream: MessageStream,
        scheduler: ReplyScheduler,
        notifier: NotificationService,
        replies: ReplyFactory,
        *,
        reply_delay: float = 0.8,
    ):
        self.state_store = state_store
        self.stream = stream
        self.scheduler = scheduler
        self.notifier = notifier
        self.replies = replies
        self.reply_delay = reply_delay

    @property
    def text(self) -> Optional[str]:
        return self.state_store.get().draft

    def is_empty(self) -> bool:
        return self.text is None

    def store(self, text: str) -> None:
        """Last write wins; any earlier draft is lost without warning."""
        if self.text is not None:
            logger.info("Overwriting cached draft (%d chars)", len(self.text))
        self.state_store.set(store_draft(self.state_store.get(), text))
        self.notifier.notify(NotificationKind.ERROR, self.replies.draft_cached_notice())

    def clear(self) -> None:
        self.state_store.set(clear_draft(self.state_store.get()))

    def sync(self) -> Optional[Message]:
        """Replay the draft as a user message. No-op offline or when empty."""
        state = self.state_store.get()
        if state.is_offline or state.draft is None:
            return None

        text = state.draft
        msg = self.stream.append(Role.USER, text)
        self.clear()
        self.notifier.notify(NotificationKind.SUCCESS, self.replies.draft_synced_notice())
        self.scheduler.schedule(self.replies.recovery_ack(text), self.reply_delay)
        logger.info("Recovered draft into %s", self.stream.active_session_id)
        return msg
