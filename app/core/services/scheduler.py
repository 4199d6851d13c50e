"""
Purpose: Deferred assistant replies as explicit scheduled tasks.
Replaces fire-and-forget timers: each reply remembers the session it was
issued against and a due time on an injectable clock. Nothing runs in the
background; the owner calls run_due() (on every UI rerun, or from a
periodic fragment while work is pending) and every task whose time has come
is applied in (due time, scheduling order).

Where a reply lands when the active session changed in the meantime is
decided by ReplyPolicy:
- ACTIVE: whatever session is active when the task fires (reference
  behaviour; likely a defect, kept selectable).
- ORIGIN: the session the reply was issued against.
- CANCEL: tasks for a session are dropped when the user leaves it.

Testing: Drive with a manual clock; no sleeping.
"""

from __future__ import annotations
import heapq
import itertools
import logging
import time
from typing import Optional

from ..interfaces import Clock
from ..models import Message, ReplyPolicy, Role, ScheduledReply
from .message_stream import MessageStream

logger = logging.getLogger(__name__)


class ReplyScheduler:
    def __init__(
        self,
        stream: MessageStream,
        *,
        clock: Clock = time.monotonic,
        policy: ReplyPolicy = ReplyPolicy.ACTIVE,
    ):
        self.stream = stream
        self.clock = clock
        self.policy = policy
        self._queue: list[tuple[float, int, ScheduledReply]] = []
        self._ids = itertools.count(1)

    def schedule(
        self, content: str, delay: float, *, session_id: Optional[str] = None
    ) -> ScheduledReply:
        """Queue an assistant reply `delay` seconds from now. Never blocks."""
        task = ScheduledReply(
            task_id=next(self._ids),
            session_id=session_id or self.stream.active_session_id or "",
            content=content,
            due_at=self.clock() + max(0.0, delay),
        )
        heapq.heappush(self._queue, (task.due_at, task.task_id, task))
        logger.debug(
            "Scheduled reply #%d for %s in %.3fs", task.task_id, task.session_id, delay
        )
        return task

    def pending(self) -> list[ScheduledReply]:
        return [t for _, _, t in sorted(self._queue)]

    def has_pending(self) -> bool:
        return bool(self._queue)

    def next_due_in(self) -> Optional[float]:
        """Seconds until the earliest task is due (0 if overdue), None if idle."""
        if not self._queue:
            return None
        return max(0.0, self._queue[0][0] - self.clock())

    def run_due(self) -> list[Message]:
        """Apply every task that is due now. Returns the appended messages."""
        now = self.clock()
        delivered = []
        while self._queue and self._queue[0][0] <= now:
            _, _, task = heapq.heappop(self._queue)
            delivered.append(self._deliver(task))
        return delivered

    def cancel_session(self, session_id: str) -> int:
        kept = [entry for entry in self._queue if entry[2].session_id != session_id]
        dropped = len(self._queue) - len(kept)
        if dropped:
            heapq.heapify(kept)
            self._queue = kept
            logger.info("Cancelled %d pending replies for %s", dropped, session_id)
        return dropped

    def on_session_switch(self, left_session_id: Optional[str]) -> None:
        if self.policy is ReplyPolicy.CANCEL and left_session_id:
            self.cancel_session(left_session_id)

    def _deliver(self, task: ScheduledReply) -> Message:
        if self.policy is ReplyPolicy.ORIGIN and task.session_id:
            msg = self.stream.append_to(task.session_id, Role.ASSISTANT, task.content)
            target = task.session_id
        else:
            msg = self.stream.append(Role.ASSISTANT, task.content)
            target = self.stream.active_session_id
        if target != task.session_id:
            logger.warning(
                "Reply #%d issued for %s landed in %s",
                task.task_id,
                task.session_id,
                target,
            )
        return msg
