"""
Purpose: Simulated connectivity flag and the routing of submitted text.
Online input goes straight into the stream with a deferred acknowledgement;
offline input is diverted into the draft cache.
"""

from __future__ import annotations
import logging
from typing import Optional

from ..interfaces import ReplyFactory
from ..models import ConnectivityMode, Message, Role, set_mode
from ..persistence.session_store import InMemoryStateStore
from .draft_cache import DraftCache
from .message_stream import MessageStream
from .scheduler import ReplyScheduler

logger = logging.getLogger(__name__)


class ConnectivityModeController:
    def __init__(
        self,
        state_store: InMemoryStateStore,
        stream: MessageStream,
        drafts: DraftCache,
        scheduler: ReplyScheduler,
        replies: ReplyFactory,
        *,
        reply_delay: float = 0.7,
    ):
        self.state_store = state_store
        self.stream = stream
        self.drafts = drafts
        self.scheduler = scheduler
        self.replies = replies
        self.reply_delay = reply_delay

    @property
    def mode(self) -> ConnectivityMode:
        return self.state_store.get().mode

    def set_mode(self, mode: ConnectivityMode) -> None:
        """Entering Online does not flush a pending draft; see DraftCache.sync."""
        self.state_store.set(set_mode(self.state_store.get(), mode))
        logger.info("Connectivity mode: %s", mode.value)

    def toggle(self) -> ConnectivityMode:
        if self.mode is ConnectivityMode.OFFLINE:
            new_mode = ConnectivityMode.ONLINE
        else:
            new_mode = ConnectivityMode.OFFLINE
        self.set_mode(new_mode)
        return new_mode

    def route(self, text: str) -> Optional[Message]:
        """Returns the appended user message, or None when the text was cached."""
        if self.mode is ConnectivityMode.OFFLINE:
            self.drafts.store(text)
            return None
        msg = self.stream.append(Role.USER, text)
        self.scheduler.schedule(self.replies.checkpoint_ack(), self.reply_delay)
        return msg
