"""Notification store backed by the Protean repository of the notifications domain.

Runs against whichever provider the domain is configured with (the memory
provider by default). Must be called inside a notifications domain context.

Sequences continue from the highest sequence already in the repository, so
separate store instances and restarts keep extending one ordering. Two
processes creating records at the same moment can still draw the same value.
"""

from notifications.domain import logger
from notifications.errors import NotFoundError, StoreUnavailableError
from notifications.notification.record import NotificationRecord
from notifications.store.store_port import NotificationStore, check_changes
from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

PAGE_SIZE = 100


class RepositoryNotificationStore(NotificationStore):
    @staticmethod
    def _repo():
        return current_domain.repository_for(NotificationRecord)

    def _next_sequence(self) -> int:
        latest = self._repo()._dao.query.order_by("-sequence").limit(1).all().first
        return (latest.sequence or 0) + 1 if latest else 1

    async def create(self, record: NotificationRecord) -> NotificationRecord:
        try:
            record.sequence = self._next_sequence()
            self._repo().add(record)
        except Exception as exc:
            logger.error("Failed to persist notification record", notification_id=str(record.id), error=str(exc))
            raise StoreUnavailableError(str(exc)) from exc
        return record

    def _load(self, notification_id: str) -> NotificationRecord:
        try:
            return self._repo().get(str(notification_id))
        except ObjectNotFoundError:
            raise NotFoundError("notification", notification_id) from None

    async def get(self, notification_id: str) -> NotificationRecord:
        return self._load(notification_id)

    async def list(self, *, recipient_id: str, is_read: bool | None = None) -> list[NotificationRecord]:
        """Every matching record, read page by page in sequence order."""
        filters = {"recipient_id": recipient_id}
        if is_read is not None:
            filters["is_read"] = is_read

        query = self._repo()._dao.query.filter(**filters).order_by("sequence")
        records = []
        while True:
            page = query.offset(len(records)).limit(PAGE_SIZE).all()
            records.extend(page.items)
            if not page.items or len(records) >= page.total:
                return records

    async def update(self, notification_id: str, changes: dict) -> NotificationRecord:
        check_changes(changes)
        record = self._load(notification_id)
        record.mark_read()
        self._repo().add(record)
        return record

    async def delete(self, notification_id: str) -> None:
        repo = self._repo()
        record = self._load(notification_id)
        repo._dao.delete(record)
