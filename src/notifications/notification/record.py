"""NotificationRecord aggregate — one rendered message in a recipient's mailbox.

A record is produced once by the builder and never edited afterwards. The
only mutable attribute is ``is_read``, and it only ever moves from False to
True through :meth:`NotificationRecord.mark_read`.
"""

import json
from datetime import UTC, datetime
from enum import Enum

from notifications.domain import notifications
from notifications.notification.events import NotificationRead, NotificationRecorded
from protean.fields import Boolean, DateTime, Identifier, Integer, String, Text


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------
class NotificationCategory(Enum):
    ORDER_UPDATE = "order_update"
    DELIVERY_ASSIGNED = "delivery_assigned"
    FLASH_SALE = "flash_sale"
    PRICE_DROP = "price_drop"
    REVIEW_REMINDER = "review_reminder"
    STOCK_ALERT = "stock_alert"
    PAYMENT_SUCCESS = "payment_success"
    PAYMENT_FAILED = "payment_failed"


class NotificationPriority(Enum):
    LOW = "low"
    NORMAL = "normal"
    HIGH = "high"
    URGENT = "urgent"


# ---------------------------------------------------------------------------
# Aggregate Root
# ---------------------------------------------------------------------------
@notifications.aggregate
class NotificationRecord:
    """A notification addressed to one customer, seller or courier."""

    recipient_id: Identifier(required=True)
    category: String(choices=NotificationCategory, required=True)

    # Content, rendered once at creation
    title: String(required=True, max_length=200)
    body: Text(required=True)
    payload: Text()  # JSON, category-specific structured data

    priority: String(choices=NotificationPriority, default=NotificationPriority.NORMAL.value)
    is_read: Boolean(default=False)

    created_at: DateTime(required=True)
    sequence: Integer(default=0)  # Assigned by the store; breaks created_at ties

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def create(cls, recipient_id, category, title, body, payload, priority, created_at):
        """Create an unread record and raise ``NotificationRecorded``."""
        record = cls(
            recipient_id=recipient_id,
            category=category,
            title=title,
            body=body,
            payload=json.dumps(payload, sort_keys=True),
            priority=priority,
            is_read=False,
            created_at=created_at,
        )

        record.raise_(
            NotificationRecorded(
                notification_id=str(record.id),
                recipient_id=str(recipient_id),
                category=category,
                priority=priority,
                created_at=created_at,
            )
        )

        return record

    def get_payload(self) -> dict:
        return json.loads(self.payload) if self.payload else {}

    def mark_read(self, read_at=None):
        """Mark the record read. Already-read records are left untouched."""
        if self.is_read:
            return

        self.is_read = True
        self.raise_(
            NotificationRead(
                notification_id=str(self.id),
                recipient_id=str(self.recipient_id),
                read_at=read_at or datetime.now(UTC),
            )
        )
