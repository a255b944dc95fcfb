"""Flash sale template — time-limited discount alert for customers."""

from notifications.notification.payloads import FlashSalePayload
from notifications.notification.record import NotificationCategory
from notifications.templates.formatting import format_number


class FlashSaleTemplate:
    category = NotificationCategory.FLASH_SALE
    payload_type = FlashSalePayload

    @staticmethod
    def render(payload: FlashSalePayload) -> dict:
        return {
            "title": "Flash Sale Alert! ⚡",
            "body": f"{payload.product_name} is now {format_number(payload.discount)}% off! Limited time offer.",
        }
