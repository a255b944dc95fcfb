"""Notification record store port — generic CRUD over NotificationRecord.

Adapters raise ``NotFoundError`` for a missing id and
``StoreUnavailableError`` when the backing store cannot be reached.
"""

from abc import ABC, abstractmethod

from notifications.notification.record import NotificationRecord
from protean.exceptions import ValidationError

MUTABLE_FIELDS = {"is_read"}


def check_changes(changes: dict) -> None:
    """Only ``is_read`` may change, and only to True."""
    illegal = set(changes) - MUTABLE_FIELDS
    if illegal:
        raise ValidationError({field: ["is immutable"] for field in sorted(illegal)})
    if changes.get("is_read") is not True:
        raise ValidationError({"is_read": ["can only be set to True"]})


class NotificationStore(ABC):
    @abstractmethod
    async def create(self, record: NotificationRecord) -> NotificationRecord:
        """Persist a new record, assigning its creation sequence."""

    @abstractmethod
    async def get(self, notification_id: str) -> NotificationRecord:
        ...

    @abstractmethod
    async def list(self, *, recipient_id: str, is_read: bool | None = None) -> list[NotificationRecord]:
        """Records addressed to ``recipient_id``, optionally filtered by read state."""

    @abstractmethod
    async def update(self, notification_id: str, changes: dict) -> NotificationRecord:
        """Apply ``changes`` (validated by :func:`check_changes`) and return the record."""

    @abstractmethod
    async def delete(self, notification_id: str) -> None:
        ...
