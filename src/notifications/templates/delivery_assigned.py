"""Delivery assignment template — sent to the courier picking up an order."""

from notifications.notification.payloads import DeliveryAssignedPayload
from notifications.notification.record import NotificationCategory
from notifications.templates.formatting import format_number


class DeliveryAssignedTemplate:
    category = NotificationCategory.DELIVERY_ASSIGNED
    payload_type = DeliveryAssignedPayload

    @staticmethod
    def render(payload: DeliveryAssignedPayload) -> dict:
        return {
            "title": "New Delivery Assigned 🛵",
            "body": (
                f"New delivery assigned! Pickup from {payload.pickup_address}. "
                f"Distance: {format_number(payload.distance)}km"
            ),
        }
