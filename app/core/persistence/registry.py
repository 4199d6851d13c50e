"""
Purpose: Read-only source of sessions (title, messages, chapters).
Why: Conversation and chapter content is authored outside the core; the
workspace only reads it when a session is activated.

What is inside:
InMemorySessionRegistry (ordered dict of Session) and load_registry(path)
for the bundled JSON seed file.

Seed format:
{
  "<session id>": {
    "title": str,
    "messages": [{"id": int, "role": "user" | "ai" | "assistant", "content": str}],
    "chapters": [{"id": int, "title": str, "startIndex": int, "superPrompt": str}]
  }
}

Testing: tmp_path fixture with hand-written JSON; malformed files raise.
"""

from __future__ import annotations
import logging
from pathlib import Path
from typing import Iterable, Optional

from ..models import Chapter, Message, Role, Session
from ..utils.seed_json import read_json, require_array, require_object

logger = logging.getLogger(__name__)

_ROLE_ALIASES = {"ai": Role.ASSISTANT, "assistant": Role.ASSISTANT, "user": Role.USER}


class RegistryLoadError(ValueError):
    """Seed content could not be turned into sessions."""


class InMemorySessionRegistry:
    def __init__(self, sessions: Iterable[Session] = ()) -> None:
        self._sessions: dict[str, Session] = {}
        for s in sessions:
            self._sessions[s.id] = s

    def get(self, session_id: str) -> Optional[Session]:
        return self._sessions.get(session_id)

    def list_sessions(self) -> list[Session]:
        return list(self._sessions.values())

    def __contains__(self, session_id: object) -> bool:
        return session_id in self._sessions

    def __len__(self) -> int:
        return len(self._sessions)


def _parse_message(raw: dict) -> Message:
    role = _ROLE_ALIASES.get(str(raw.get("role", "")).lower())
    if role is None:
        raise RegistryLoadError(f"Unknown message role: {raw.get('role')!r}")
    return Message(id=int(raw["id"]), role=role, content=str(raw.get("content", "")))


def _parse_chapter(raw: dict) -> Chapter:
    start = raw.get("startIndex", raw.get("start_index", 0))
    summary = raw.get("superPrompt", raw.get("summary", ""))
    return Chapter(
        id=int(raw["id"]),
        title=str(raw.get("title", "")),
        start_index=int(start),
        summary=str(summary),
    )


def parse_sessions(data: dict) -> list[Session]:
    """Turn the seed mapping into Session objects, keeping file order."""
    try:
        root = require_object(data, "Seed root must be an object.")
    except ValueError as e:
        raise RegistryLoadError(str(e)) from e

    sessions = []
    for session_id, body in root.items():
        try:
            body = require_object(body, f"Session {session_id!r} must be an object.")
            messages = tuple(
                _parse_message(require_object(m, "Message must be an object."))
                for m in require_array(body.get("messages", []), "messages must be a list.")
            )
            chapters = tuple(
                _parse_chapter(require_object(c, "Chapter must be an object."))
                for c in require_array(body.get("chapters", []), "chapters must be a list.")
            )
        except (KeyError, TypeError, ValueError) as e:
            raise RegistryLoadError(f"Session {session_id!r}: {e}") from e
        sessions.append(
            Session(
                id=str(session_id),
                title=str(body.get("title", session_id)),
                messages=messages,
                chapters=chapters,
            )
        )
    return sessions


def load_registry(path: Path | str) -> InMemorySessionRegistry:
    try:
        data = read_json(path)
    except (OSError, ValueError) as e:
        raise RegistryLoadError(str(e)) from e
    sessions = parse_sessions(data)
    logger.info("Loaded %d sessions from %s", len(sessions), path)
    return InMemorySessionRegistry(sessions)
