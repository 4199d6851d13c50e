"""Assistant replies appended after the simulated network latency."""

from __future__ import annotations

RECOVERED_PREVIEW_CHARS = 40


def checkpoint_ack() -> str:
    return "Context synchronized. New checkpoint created in your workflow timeline."


def recovery_ack(text: str, *, preview_chars: int = RECOVERED_PREVIEW_CHARS) -> str:
    """Acknowledge a recovered draft, quoting only its first characters."""
    preview = (text or "")[: max(0, preview_chars)]
    return (
        "✅ Resilience Engine: Context synchronized. "
        f'I\'ve processed your offline draft regarding: "{preview}...". '
        "Proceeding with technical analysis now."
    )
