"""
Canonical data shapes, shared truth for typing between layers.

Typical contents:
- Session (title, messages, chapters) as supplied by the registry.
- Message (id, role, content) and Chapter (start_index, summary).
- WorkspaceState: the one explicit state value per workspace, plus the
  pure transition functions the controller applies to it.

Testing: Transitions are pure; assert on returned values.
"""

from __future__ import annotations
from dataclasses import dataclass, replace
from typing import Optional
from enum import Enum


class Role(str, Enum):
    USER = "user"
    ASSISTANT = "assistant"


class ConnectivityMode(str, Enum):
    ONLINE = "online"
    OFFLINE = "offline"


class NotificationKind(str, Enum):
    SUCCESS = "success"
    ERROR = "error"


class ReplyPolicy(str, Enum):
    ACTIVE = "active"
    ORIGIN = "origin"
    CANCEL = "cancel"


@dataclass(frozen=True)
class Message:
    id: int
    role: Role
    content: str


@dataclass(frozen=True)
class Chapter:
    id: int
    title: str
    start_index: int
    summary: str


@dataclass(frozen=True)
class Session:
    id: str
    title: str
    messages: tuple[Message, ...] = ()
    chapters: tuple[Chapter, ...] = ()


@dataclass(frozen=True)
class Notification:
    kind: NotificationKind
    text: str
    created_at: float = 0.0


@dataclass(frozen=True)
class ScheduledReply:
    task_id: int
    session_id: str
    content: str
    due_at: float


@dataclass(frozen=True)
class WorkspaceState:
    active_session_id: str
    mode: ConnectivityMode = ConnectivityMode.ONLINE
    draft: Optional[str] = None
    start_index: int = 0
    timeline_open: bool = False

    @property
    def is_offline(self) -> bool:
        return self.mode is ConnectivityMode.OFFLINE

    @property
    def phase(self) -> str:
        """Name of the (mode, draft occupancy) node this state sits in."""
        if self.is_offline:
            return "offline-occupied" if self.draft is not None else "offline-empty"
        if self.draft is not None:
            return "online-pending-recovery"
        return "online-empty"

    def to_dict(self) -> dict:
        return {
            "active_session_id": self.active_session_id,
            "mode": self.mode.value,
            "draft": self.draft,
            "start_index": self.start_index,
            "timeline_open": self.timeline_open,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "WorkspaceState":
        return cls(
            active_session_id=data["active_session_id"],
            mode=ConnectivityMode(data.get("mode", ConnectivityMode.ONLINE.value)),
            draft=data.get("draft"),
            start_index=int(data.get("start_index", 0)),
            timeline_open=bool(data.get("timeline_open", False)),
        )


# ---------------------------
# Transitions
# ---------------------------
def set_mode(state: WorkspaceState, mode: ConnectivityMode) -> WorkspaceState:
    """Plain assignment; a pending draft is left where it is."""
    return replace(state, mode=mode)


def toggle_mode(state: WorkspaceState) -> WorkspaceState:
    if state.is_offline:
        return set_mode(state, ConnectivityMode.ONLINE)
    return set_mode(state, ConnectivityMode.OFFLINE)


def store_draft(state: WorkspaceState, text: str) -> WorkspaceState:
    """Last write wins. Whatever was cached before is dropped."""
    return replace(state, draft=text)


def clear_draft(state: WorkspaceState) -> WorkspaceState:
    if state.draft is None:
        return state
    return replace(state, draft=None)


def jump(state: WorkspaceState, start_index: int) -> WorkspaceState:
    return replace(state, start_index=start_index, timeline_open=False)


def restore_full_history(state: WorkspaceState) -> WorkspaceState:
    return replace(state, start_index=0)


def switch_session(state: WorkspaceState, session_id: str) -> WorkspaceState:
    return replace(state, active_session_id=session_id, start_index=0)


def open_timeline(state: WorkspaceState) -> WorkspaceState:
    return replace(state, timeline_open=True)


def close_timeline(state: WorkspaceState) -> WorkspaceState:
    return replace(state, timeline_open=False)
