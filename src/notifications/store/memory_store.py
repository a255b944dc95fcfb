"""In-memory notification store with switchable failure modes for tests."""

import asyncio
import itertools

from notifications.errors import NotFoundError, StoreUnavailableError
from notifications.notification.record import NotificationRecord
from notifications.store.store_port import NotificationStore, check_changes


class InMemoryNotificationStore(NotificationStore):
    def __init__(self):
        self.records: dict[str, NotificationRecord] = {}
        self._sequence = itertools.count(1)
        self.available = True
        self.failing_recipients: set[str] = set()
        self.latency = 0.0

    def configure(self, available: bool = True, failing_recipients=(), latency: float = 0.0):
        """Simulate an outage, per-recipient write failures, or slow I/O."""
        self.available = available
        self.failing_recipients = set(failing_recipients)
        self.latency = latency

    def reset(self):
        self.records.clear()
        self._sequence = itertools.count(1)
        self.configure()

    async def _io(self):
        await asyncio.sleep(self.latency)
        if not self.available:
            raise StoreUnavailableError("Notification store is unavailable")

    async def create(self, record: NotificationRecord) -> NotificationRecord:
        await self._io()
        if str(record.recipient_id) in self.failing_recipients:
            raise StoreUnavailableError(f"Write failed for recipient {record.recipient_id}")

        record.sequence = next(self._sequence)
        self.records[str(record.id)] = record
        return record

    async def get(self, notification_id: str) -> NotificationRecord:
        await self._io()
        try:
            return self.records[str(notification_id)]
        except KeyError:
            raise NotFoundError("notification", notification_id) from None

    async def list(self, *, recipient_id: str, is_read: bool | None = None) -> list[NotificationRecord]:
        await self._io()
        return [
            record
            for record in self.records.values()
            if record.recipient_id == recipient_id and (is_read is None or record.is_read == is_read)
        ]

    async def update(self, notification_id: str, changes: dict) -> NotificationRecord:
        check_changes(changes)
        record = await self.get(notification_id)
        record.mark_read()
        return record

    async def delete(self, notification_id: str) -> None:
        await self._io()
        if self.records.pop(str(notification_id), None) is None:
            raise NotFoundError("notification", notification_id)
