"""
UI layer
Purpose: Streamlit-only glue. Renders the session list, transcript, recovery
banner and chapter timeline, collects user inputs, and delegates all work to
the controller. Keeps UI concerns (layout/widgets) separate from workspace
logic so that logic can be unit tested without Streamlit.
"""

import logging

import streamlit as st

from core.config import get_settings
from core.controller import WorkspaceController
from core.models import Chapter, NotificationKind, Role
from core.persistence.registry import RegistryLoadError, load_registry
from core.services.notifications import InMemoryClipboard, InMemoryNotifier

settings = get_settings()
logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


# ---------------------------
# Page config
# ---------------------------
st.set_page_config(
    page_title="Flux Workspace",
    page_icon="⚡",
    layout="wide",
    initial_sidebar_state="expanded",
)
# ---------------------------
# UI constants
# ---------------------------
TOAST_ICONS = {
    NotificationKind.SUCCESS: "✅",
    NotificationKind.ERROR: "📡",
}
ROLE_AVATARS = {
    Role.USER: "user",
    Role.ASSISTANT: "assistant",
}
REPLY_POLL_SECONDS = 0.25


class ToastNotifier(InMemoryNotifier):
    """Records notices like the headless notifier and shows each as a toast."""

    def notify(self, kind: NotificationKind, text: str) -> None:
        super().notify(kind, text)
        st.toast(text, icon=TOAST_ICONS.get(kind))


# ---------------------------
# Session state init
# ---------------------------
st_session = st.session_state
st_session.setdefault("controller", None)
st_session.setdefault("view", "landing")

if st_session.controller is None:
    try:
        registry = load_registry(settings.sessions_path)
    except RegistryLoadError as e:
        st.error(f"Could not load sessions: {e}")
        st.stop()
    st_session.controller = WorkspaceController(
        registry,
        ToastNotifier(ttl=settings.notification_ttl_seconds),
        settings=settings,
        clipboard=InMemoryClipboard(),
    )


# ---------------------------
# Helpers
# ---------------------------
def get_controller() -> WorkspaceController:
    """Return the controller object."""
    return st_session.controller


def run_command(fn, *args):
    """Call a controller command from a widget callback, toasting failures."""
    try:
        return fn(*args)
    except Exception as e:
        logger.exception("Command %s failed", getattr(fn, "__name__", fn))
        st.toast(f"Action failed: {e}", icon="⚠️")
        return None


def on_toggle_offline():
    run_command(get_controller().toggle_offline_mode)


def on_switch_session(session_id: str):
    run_command(get_controller().switch_session, session_id)


def on_jump(chapter_id: int):
    run_command(get_controller().jump_to_chapter, chapter_id)


def on_copy(chapter_id: int):
    run_command(get_controller().copy_summary, chapter_id)


def pump_replies():
    """Deliver due replies; a full rerun shows them in the transcript."""
    if get_controller().pump():
        st.rerun()


def render_chapter(chapter: Chapter) -> None:
    with st.container(border=True):
        head, badge = st.columns([5, 1])
        head.markdown(f"**{chapter.title.upper()}**")
        badge.caption("Verified")
        st.caption("Smart Prompt")
        st.code(chapter.summary, language=None, wrap_lines=True)
        c1, c2 = st.columns([1, 2])
        c1.button(
            "Copy",
            key=f"copy_{chapter.id}",
            on_click=on_copy,
            args=(chapter.id,),
        )
        c2.button(
            "Jump to Context ›",
            key=f"jump_{chapter.id}",
            type="primary",
            use_container_width=True,
            on_click=on_jump,
            args=(chapter.id,),
        )


controller = get_controller()
controller.pump()

# ---------------------------
# Landing
# ---------------------------
if st_session.view == "landing":
    st.title("FLUX WORKSPACE")
    st.markdown(
        "The resilient AI workspace that captures technical context in "
        "**Chapters**. Built for complex, multi-stage engineering workflows."
    )
    if st.button("Enter Workspace →", type="primary"):
        st_session.view = "app"
        st.rerun()

    cols = st.columns(3)
    features = [
        ("Logical Jump", "Return to any technical checkpoint without losing history."),
        ("Offline Resilience", "Input typed while the connection is down is cached."),
        ("Super Prompts", "Chapter summaries ready to paste into other tools."),
    ]
    for (title, desc), col in zip(features, cols):
        with col:
            st.markdown(f"#### {title}")
            st.caption(desc)
    st.stop()

# ---------------------------
# SIDEBAR: connectivity & sessions
# ---------------------------
with st.sidebar:
    st.markdown("# ⚡ FLUX")
    if st.button("Back to landing"):
        st_session.view = "landing"
        st.rerun()
    st.divider()

    st.markdown("## Offline Logic")
    st.toggle(
        "Simulate connection drop",
        value=controller.is_offline(),
        on_change=on_toggle_offline,
        key="offline_toggle",
    )
    st.divider()

    st.markdown("## Chat History")
    active_id = controller.state.active_session_id
    for session in controller.list_sessions():
        st.button(
            session.title,
            key=f"session_{session.id}",
            type="primary" if session.id == active_id else "secondary",
            use_container_width=True,
            on_click=on_switch_session,
            args=(session.id,),
        )

# ---------------------------
# Header
# ---------------------------
active = controller.active_session()
hcol, tcol = st.columns([4, 1])
with hcol:
    st.title(active.title.upper() if active else "No session")
with tcol:
    st.button(
        "Open Timeline",
        type="primary",
        on_click=lambda: run_command(controller.open_timeline),
        disabled=active is None,
    )

# ---------------------------
# Timeline overlay
# ---------------------------
if controller.state.timeline_open:
    with st.container(border=True):
        t1, t2 = st.columns([5, 1])
        with t1:
            st.subheader("Workflow Timeline")
            st.caption("Context checkpoints")
        with t2:
            st.button("✕ Close", on_click=lambda: run_command(controller.close_timeline))
        chapters = controller.list_chapters()
        if not chapters:
            st.info("This session has no chapters yet.")
        for chapter in chapters:
            render_chapter(chapter)

# ---------------------------
# Transcript
# ---------------------------
if controller.state.start_index > 0:
    st.button(
        "↺ Restore Full History",
        on_click=lambda: run_command(controller.restore_full_history),
    )

transcript = st.container(height=560, border=True)
with transcript:
    for msg in controller.visible_messages():
        with st.chat_message(ROLE_AVATARS.get(msg.role, "assistant")):
            st.markdown(msg.content)

# ---------------------------
# Action bar
# ---------------------------
if controller.has_recovery_point():
    with st.container(border=True):
        b1, b2 = st.columns([4, 1])
        b1.markdown("**RESILIENCE RECOVERY POINT FOUND**")
        b2.button(
            "🚀 Sync Draft",
            type="primary",
            on_click=lambda: run_command(controller.sync_draft),
        )

placeholder = (
    "⚠ CONNECTION DROPPED: Saved to Cache..."
    if controller.is_offline()
    else "Sync your technical thoughts to the timeline..."
)
raw = st.chat_input(placeholder, disabled=active is None)
if raw is not None and raw.strip():
    run_command(controller.submit, raw)
    st.rerun()

if controller.has_pending_replies():
    st.fragment(pump_replies, run_every=REPLY_POLL_SECONDS)()

st.divider()
st.caption(
    "Workspace state lives in this browser session only; nothing is written to disk."
)
