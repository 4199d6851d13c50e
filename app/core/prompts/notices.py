"""Short texts handed to the notification service."""

DRAFT_CACHED = "Network Interrupted: Message Cached."
DRAFT_SYNCED = "Context Re-synchronized"
SUMMARY_COPIED = "Prompt Copied"
