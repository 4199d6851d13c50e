"""Tests for WorkspaceState and its pure transition functions."""

from core.models import (
    ConnectivityMode,
    WorkspaceState,
    clear_draft,
    close_timeline,
    jump,
    open_timeline,
    restore_full_history,
    set_mode,
    store_draft,
    switch_session,
    toggle_mode,
)


class TestPhase:
    def test_initial_state_is_online_empty(self):
        assert WorkspaceState(active_session_id="a").phase == "online-empty"

    def test_offline_then_draft_is_offline_occupied(self):
        s = set_mode(WorkspaceState(active_session_id="a"), ConnectivityMode.OFFLINE)
        assert s.phase == "offline-empty"
        assert store_draft(s, "x").phase == "offline-occupied"

    def test_toggle_back_online_keeps_draft(self):
        s = WorkspaceState(active_session_id="a", mode=ConnectivityMode.OFFLINE)
        s = toggle_mode(store_draft(s, "x"))
        assert s.mode is ConnectivityMode.ONLINE
        assert s.draft == "x"
        assert s.phase == "online-pending-recovery"


class TestTransitions:
    def test_transitions_do_not_mutate_input(self):
        s = WorkspaceState(active_session_id="a")
        store_draft(s, "x")
        jump(s, 5)
        assert s.draft is None
        assert s.start_index == 0

    def test_store_draft_overwrites(self):
        s = store_draft(store_draft(WorkspaceState(active_session_id="a"), "a"), "b")
        assert s.draft == "b"

    def test_clear_draft_on_empty_returns_same_state(self):
        s = WorkspaceState(active_session_id="a")
        assert clear_draft(s) is s

    def test_jump_closes_timeline(self):
        s = open_timeline(WorkspaceState(active_session_id="a"))
        s = jump(s, 4)
        assert s.start_index == 4
        assert s.timeline_open is False

    def test_restore_and_switch_reset_start_index(self):
        s = jump(WorkspaceState(active_session_id="a"), 6)
        assert restore_full_history(s).start_index == 0
        switched = switch_session(s, "b")
        assert switched.active_session_id == "b"
        assert switched.start_index == 0

    def test_close_timeline(self):
        s = open_timeline(WorkspaceState(active_session_id="a"))
        assert close_timeline(s).timeline_open is False


class TestSerialization:
    def test_round_trip(self):
        s = WorkspaceState(
            active_session_id="a",
            mode=ConnectivityMode.OFFLINE,
            draft="pending",
            start_index=3,
            timeline_open=True,
        )
        data = s.to_dict()
        assert data["mode"] == "offline"
        assert WorkspaceState.from_dict(data) == s

    def test_from_dict_defaults(self):
        s = WorkspaceState.from_dict({"active_session_id": "a"})
        assert s == WorkspaceState(active_session_id="a")
