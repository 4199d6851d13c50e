"""Facade over the canned reply and notice texts."""

from __future__ import annotations
from . import replies as _replies
from . import notices as _notices


class DefaultReplyFactory:
    def __init__(self, preview_chars: int = _replies.RECOVERED_PREVIEW_CHARS):
        self.preview_chars = preview_chars

    # ASSISTANT REPLIES
    def checkpoint_ack(self) -> str:
        return _replies.checkpoint_ack()

    def recovery_ack(self, text: str) -> str:
        return _replies.recovery_ack(text, preview_chars=self.preview_chars)

    # NOTICES
    def draft_cached_notice(self) -> str:
        return _notices.DRAFT_CACHED

    def draft_synced_notice(self) -> str:
        return _notices.DRAFT_SYNCED

    def summary_copied_notice(self) -> str:
        return _notices.SUMMARY_COPIED
