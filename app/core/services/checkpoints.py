"""
Purpose: Chapter bookmarks and the viewport start they drive.
The underlying sequence is never truncated; the viewport is only an offset
handed to MessageStream.slice, so restoring full history is just offset 0.
"""

from __future__ import annotations
import logging
from typing import Optional

from ..models import (
    Chapter,
    Session,
    close_timeline,
    jump,
    open_timeline,
    restore_full_history,
)
from ..persistence.session_store import InMemoryStateStore

logger = logging.getLogger(__name__)


class CheckpointIndex:
    def __init__(self, state_store: InMemoryStateStore):
        self.state_store = state_store

    @property
    def start_index(self) -> int:
        return self.state_store.get().start_index

    @property
    def timeline_open(self) -> bool:
        return self.state_store.get().timeline_open

    def list_chapters(self, session: Optional[Session]) -> list[Chapter]:
        if session is None:
            return []
        return list(session.chapters)

    def find(self, session: Optional[Session], chapter_id: int) -> Optional[Chapter]:
        return next(
            (c for c in self.list_chapters(session) if c.id == chapter_id), None
        )

    def jump(self, start_index: int) -> None:
        """Move the viewport and close the timeline overlay.

        Out-of-range offsets are kept as-is; the stream renders them as an
        empty slice (jump to end).
        """
        self.state_store.set(jump(self.state_store.get(), start_index))
        logger.info("Viewport start -> %d", start_index)

    def restore_full_history(self) -> None:
        self.state_store.set(restore_full_history(self.state_store.get()))

    def open_timeline(self) -> None:
        self.state_store.set(open_timeline(self.state_store.get()))

    def close_timeline(self) -> None:
        self.state_store.set(close_timeline(self.state_store.get()))
