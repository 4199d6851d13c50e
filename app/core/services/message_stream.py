"""
Purpose: Ordered message history of the active session.
Append-only; switching sessions swaps which stored sequence is active and
never drops entries from the one being left.
"""

from __future__ import annotations
import logging
from typing import Optional

from ..models import Message, Role, Session

logger = logging.getLogger(__name__)


def _next_id(messages: list[Message]) -> int:
    return max((m.id for m in messages), default=0) + 1


class MessageStream:
    def __init__(self) -> None:
        self._histories: dict[str, list[Message]] = {}
        self._active_id: Optional[str] = None
        self._active: list[Message] = []

    @property
    def active_session_id(self) -> Optional[str]:
        return self._active_id

    @property
    def messages(self) -> list[Message]:
        return list(self._active)

    def __len__(self) -> int:
        return len(self._active)

    def history_of(self, session_id: str) -> list[Message]:
        """Stored sequence for any session seen so far (empty if never activated)."""
        return list(self._histories.get(session_id, []))

    def activate(self, session: Session) -> None:
        """Make `session` active, reusing its stored history when there is one."""
        messages = self._histories.get(session.id)
        if messages is None:
            messages = list(session.messages)
        self.replace(session.id, messages)

    def replace(self, session_id: str, messages: list[Message]) -> None:
        self._histories[session_id] = messages
        self._active_id = session_id
        self._active = messages
        logger.debug("Active stream %s (%d messages)", session_id, len(messages))

    def append(self, role: Role, content: str) -> Message:
        msg = Message(id=_next_id(self._active), role=role, content=content)
        self._active.append(msg)
        return msg

    def append_to(self, session_id: str, role: Role, content: str) -> Message:
        """Append to a stored sequence, active or not."""
        if session_id == self._active_id:
            return self.append(role, content)
        messages = self._histories.setdefault(session_id, [])
        msg = Message(id=_next_id(messages), role=role, content=content)
        messages.append(msg)
        return msg

    def slice(self, from_index: int) -> list[Message]:
        """Messages at or after `from_index`; empty when the offset is out of range."""
        if from_index < 0 or from_index >= len(self._active):
            return []
        return self._active[from_index:]
