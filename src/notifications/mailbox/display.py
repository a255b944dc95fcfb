"""Display helpers for mailbox listings."""

from datetime import UTC, datetime


def format_relative_time(created_at: datetime, now: datetime | None = None) -> str:
    """Render ``created_at`` as a short age label relative to ``now``.

    Under an hour reads "Just now", under a day "{n}h ago", anything older
    falls back to the ISO date.
    """
    now = now or datetime.now(UTC)
    hours = (now - created_at).total_seconds() / 3600

    if hours < 1:
        return "Just now"
    if hours < 24:
        return f"{int(hours)}h ago"
    return created_at.date().isoformat()
