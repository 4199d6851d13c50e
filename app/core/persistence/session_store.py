"""
Purpose: Holder for the workspace's single WorkspaceState value.
Why: Components share one explicit state instead of ambient variables;
every change goes through a pure transition and lands here.

What is inside (now):
InMemoryStateStore with get/set/reset. Memory only; nothing survives a
restart.

Testing:
In-memory: simple state tests.
"""

from core.models import WorkspaceState


class InMemoryStateStore:
    def __init__(self, initial: WorkspaceState) -> None:
        self._initial = initial
        self._state = initial

    @property
    def state(self) -> WorkspaceState:
        return self._state

    def get(self) -> WorkspaceState:
        return self._state

    def set(self, state: WorkspaceState) -> None:
        self._state = state

    def reset(self) -> None:
        self._state = self._initial
