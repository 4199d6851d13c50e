"""Shared test fixtures for the workspace.

Provides a manual clock, a recording notifier, an in-memory clipboard and a
registry with two sessions: "alpha" (12 messages, chapters at 4 and 8 plus
one out of range) and "beta" (3 messages, no chapters).
"""

import pytest

from core.config import WorkspaceSettings
from core.controller import WorkspaceController
from core.models import Chapter, Message, Role, Session
from core.persistence.registry import InMemorySessionRegistry
from core.services.notifications import InMemoryClipboard, InMemoryNotifier


class ManualClock:
    """Monotonic clock that only moves when told to."""

    def __init__(self, start: float = 100.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


def make_messages(count: int, start_id: int = 1) -> tuple[Message, ...]:
    roles = (Role.USER, Role.ASSISTANT)
    return tuple(
        Message(id=start_id + i, role=roles[i % 2], content=f"message {i}")
        for i in range(count)
    )


def make_settings(**overrides) -> WorkspaceSettings:
    values = {"default_session_id": "alpha"}
    values.update(overrides)
    return WorkspaceSettings(**values)


@pytest.fixture
def clock():
    return ManualClock()


@pytest.fixture
def notifier(clock):
    return InMemoryNotifier(clock=clock, ttl=3.0)


@pytest.fixture
def clipboard():
    return InMemoryClipboard()


@pytest.fixture
def alpha_session() -> Session:
    return Session(
        id="alpha",
        title="Alpha",
        messages=make_messages(12),
        chapters=(
            Chapter(id=1, title="1. Storage", start_index=4, summary="Storage summary"),
            Chapter(id=2, title="2. Security", start_index=8, summary="Security summary"),
            Chapter(id=9, title="9. Beyond", start_index=40, summary="Out of range"),
        ),
    )


@pytest.fixture
def beta_session() -> Session:
    return Session(id="beta", title="Beta", messages=make_messages(3, start_id=100))


@pytest.fixture
def registry(alpha_session, beta_session):
    return InMemorySessionRegistry([alpha_session, beta_session])


@pytest.fixture
def make_workspace(registry, notifier, clipboard, clock):
    def _make(**overrides) -> WorkspaceController:
        return WorkspaceController(
            registry,
            notifier,
            settings=make_settings(**overrides),
            clipboard=clipboard,
            clock=clock,
        )

    return _make


@pytest.fixture
def workspace(make_workspace) -> WorkspaceController:
    return make_workspace()
