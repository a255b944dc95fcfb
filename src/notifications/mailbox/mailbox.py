"""Mailbox aggregator — per-recipient read model over the notification store.

Counts are computed from the store on every call, so they reflect writes
made by concurrent dispatches as soon as those writes land.
"""

import asyncio
from collections import Counter

import structlog
from notifications.notification.record import NotificationPriority, NotificationRecord
from notifications.store.store_port import NotificationStore

logger = structlog.get_logger(__name__)


class MailboxAggregator:
    def __init__(self, store: NotificationStore):
        self.store = store

    async def list_for_recipient(self, recipient_id: str, category=None) -> list[NotificationRecord]:
        """Records for ``recipient_id``, newest first."""
        records = await self.store.list(recipient_id=recipient_id)
        if category is not None:
            category = getattr(category, "value", category)
            records = [record for record in records if record.category == category]
        return sorted(records, key=lambda record: (record.created_at, record.sequence), reverse=True)

    async def unread_count(self, recipient_id: str) -> int:
        return len(await self.store.list(recipient_id=recipient_id, is_read=False))

    async def urgent_count(self, recipient_id: str) -> int:
        unread = await self.store.list(recipient_id=recipient_id, is_read=False)
        return sum(1 for record in unread if record.priority == NotificationPriority.URGENT.value)

    async def count_by_category(self, recipient_id: str) -> dict[str, int]:
        records = await self.store.list(recipient_id=recipient_id)
        return dict(Counter(record.category for record in records))

    async def mark_read(self, notification_id: str) -> NotificationRecord:
        """Mark one record read. Raises ``NotFoundError`` when it does not exist."""
        record = await self.store.get(notification_id)
        if record.is_read:
            return record
        return await self.store.update(notification_id, {"is_read": True})

    async def mark_all_read(self, recipient_id: str) -> int:
        """Mark every currently unread record read and return how many were marked.

        Works from a snapshot: records created while this runs may stay unread.
        """
        unread = await self.store.list(recipient_id=recipient_id, is_read=False)
        outcomes = await asyncio.gather(
            *(self.store.update(str(record.id), {"is_read": True}) for record in unread),
            return_exceptions=True,
        )

        marked = 0
        for record, outcome in zip(unread, outcomes):
            if isinstance(outcome, Exception):
                logger.error(
                    "Failed to mark notification read",
                    notification_id=str(record.id),
                    recipient_id=recipient_id,
                    error=str(outcome),
                )
            else:
                marked += 1

        logger.info("Marked notifications read", recipient_id=recipient_id, marked=marked, failed=len(unread) - marked)
        return marked

    async def delete(self, notification_id: str) -> None:
        await self.store.delete(notification_id)
        logger.info("Notification deleted", notification_id=notification_id)
