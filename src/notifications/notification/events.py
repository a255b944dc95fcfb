"""Domain events for the NotificationRecord aggregate."""

from notifications.domain import notifications
from protean.fields import DateTime, Identifier, String


@notifications.event(part_of="NotificationRecord")
class NotificationRecorded:
    """A notification record was created for a recipient."""

    __version__ = 1

    notification_id: Identifier(required=True)
    recipient_id: Identifier(required=True)
    category: String(required=True)
    priority: String(required=True)
    created_at: DateTime(required=True)


@notifications.event(part_of="NotificationRecord")
class NotificationRead:
    """A recipient read a notification for the first time."""

    __version__ = 1

    notification_id: Identifier(required=True)
    recipient_id: Identifier(required=True)
    read_at: DateTime(required=True)
