"""Tests for ReplyScheduler timing and session-switch policies."""

import pytest

from core.models import ReplyPolicy, Role
from core.services.message_stream import MessageStream
from core.services.scheduler import ReplyScheduler


@pytest.fixture
def stream(alpha_session, beta_session):
    s = MessageStream()
    s.activate(beta_session)
    s.activate(alpha_session)
    return s


class TestTiming:
    def test_nothing_fires_before_delay(self, stream, clock):
        sched = ReplyScheduler(stream, clock=clock)
        sched.schedule("ack", 0.7)
        clock.advance(0.69)
        assert sched.run_due() == []
        assert sched.has_pending()
        assert sched.next_due_in() == pytest.approx(0.01)

    def test_fires_once_after_delay(self, stream, clock):
        sched = ReplyScheduler(stream, clock=clock)
        sched.schedule("ack", 0.7)
        clock.advance(0.7)
        delivered = sched.run_due()
        assert [m.content for m in delivered] == ["ack"]
        assert delivered[0].role is Role.ASSISTANT
        assert sched.run_due() == []
        assert sched.next_due_in() is None

    def test_fifo_for_equal_delays(self, stream, clock):
        sched = ReplyScheduler(stream, clock=clock)
        sched.schedule("first", 0.7)
        sched.schedule("second", 0.7)
        clock.advance(1)
        assert [m.content for m in sched.run_due()] == ["first", "second"]

    def test_due_time_orders_delivery(self, stream, clock):
        sched = ReplyScheduler(stream, clock=clock)
        sched.schedule("slow", 0.8)
        clock.advance(0.05)
        sched.schedule("fast", 0.7)
        clock.advance(1)
        assert [m.content for m in sched.run_due()] == ["fast", "slow"]

    def test_task_remembers_origin_session(self, stream, clock):
        sched = ReplyScheduler(stream, clock=clock)
        task = sched.schedule("ack", 0.7)
        assert task.session_id == "alpha"
        assert sched.pending() == [task]


class TestPolicies:
    def test_active_policy_lands_in_current_session(self, stream, clock, beta_session):
        sched = ReplyScheduler(stream, clock=clock, policy=ReplyPolicy.ACTIVE)
        sched.schedule("ack", 0.7)
        stream.activate(beta_session)
        sched.on_session_switch("alpha")
        clock.advance(1)
        sched.run_due()
        assert stream.messages[-1].content == "ack"
        assert len(stream.history_of("alpha")) == 12

    def test_origin_policy_lands_in_issuing_session(self, stream, clock, beta_session):
        sched = ReplyScheduler(stream, clock=clock, policy=ReplyPolicy.ORIGIN)
        sched.schedule("ack", 0.7)
        stream.activate(beta_session)
        sched.on_session_switch("alpha")
        clock.advance(1)
        sched.run_due()
        assert len(stream) == 3
        assert stream.history_of("alpha")[-1].content == "ack"

    def test_cancel_policy_drops_pending_on_switch(self, stream, clock, beta_session):
        sched = ReplyScheduler(stream, clock=clock, policy=ReplyPolicy.CANCEL)
        sched.schedule("ack", 0.7)
        stream.activate(beta_session)
        sched.on_session_switch("alpha")
        assert not sched.has_pending()
        clock.advance(1)
        assert sched.run_due() == []
        assert len(stream.history_of("alpha")) == 12
        assert len(stream) == 3

    def test_cancel_keeps_other_sessions_tasks(self, stream, clock, beta_session):
        sched = ReplyScheduler(stream, clock=clock, policy=ReplyPolicy.CANCEL)
        sched.schedule("alpha reply", 0.7)
        sched.schedule("beta reply", 0.7, session_id="beta")
        assert sched.cancel_session("alpha") == 1
        assert [t.content for t in sched.pending()] == ["beta reply"]
