"""Notification builder — pure (category, payload) -> NotificationRecord.

The builder validates the payload against the category's payload type,
renders title and body through the category template and resolves the
priority. It performs no I/O; the creation timestamp is supplied by the
caller so the same inputs always produce the same content.
"""

from datetime import datetime

from notifications.errors import InvalidCategoryError, MissingFieldError
from notifications.notification.payloads import OrderUpdatePayload, StockAlertPayload, parse_payload
from notifications.notification.record import (
    NotificationCategory,
    NotificationPriority,
    NotificationRecord,
)
from notifications.templates import get_template
from protean.exceptions import ValidationError

DEFAULT_PRIORITIES: dict[NotificationCategory, NotificationPriority] = {
    NotificationCategory.ORDER_UPDATE: NotificationPriority.NORMAL,
    NotificationCategory.DELIVERY_ASSIGNED: NotificationPriority.URGENT,
    NotificationCategory.FLASH_SALE: NotificationPriority.URGENT,
    NotificationCategory.PRICE_DROP: NotificationPriority.NORMAL,
    NotificationCategory.REVIEW_REMINDER: NotificationPriority.LOW,
    NotificationCategory.STOCK_ALERT: NotificationPriority.HIGH,
    NotificationCategory.PAYMENT_SUCCESS: NotificationPriority.HIGH,
    NotificationCategory.PAYMENT_FAILED: NotificationPriority.URGENT,
}

CRITICAL_STOCK_LEVEL = 5


def coerce_category(category) -> NotificationCategory:
    if isinstance(category, NotificationCategory):
        return category
    try:
        return NotificationCategory(category)
    except ValueError:
        raise InvalidCategoryError(category) from None


def coerce_priority(priority) -> NotificationPriority:
    if isinstance(priority, NotificationPriority):
        return priority
    try:
        return NotificationPriority(priority)
    except ValueError:
        raise ValidationError({"priority": [f"Unknown notification priority: {priority}"]}) from None


def resolve_priority(category: NotificationCategory, payload) -> NotificationPriority:
    """Table priority for a category, with the two payload-dependent rules applied."""
    if isinstance(payload, StockAlertPayload):
        if payload.current_stock <= CRITICAL_STOCK_LEVEL:
            return NotificationPriority.URGENT
        return NotificationPriority.HIGH
    if isinstance(payload, OrderUpdatePayload):
        if payload.status == "delivered":
            return NotificationPriority.HIGH
        return NotificationPriority.NORMAL
    return DEFAULT_PRIORITIES[category]


def build(
    category,
    recipient_id: str,
    payload,
    *,
    created_at: datetime,
    priority_override=None,
) -> NotificationRecord:
    """Build an unread, unsaved record for ``recipient_id``.

    Raises ``InvalidCategoryError`` for an unknown category,
    ``MissingFieldError`` when a required payload field or the recipient is
    missing, and ``ValidationError`` for malformed numeric fields or an
    unknown priority override.
    """
    category = coerce_category(category)
    if not recipient_id:
        raise MissingFieldError("recipient_id")

    typed = parse_payload(category, payload)
    content = get_template(category).render(typed)

    if priority_override is not None:
        priority = coerce_priority(priority_override)
    else:
        priority = resolve_priority(category, typed)

    return NotificationRecord.create(
        recipient_id=str(recipient_id),
        category=category.value,
        title=content["title"],
        body=content["body"],
        payload=typed.to_dict(),
        priority=priority.value,
        created_at=created_at,
    )
