"""Price drop template — a watched product got cheaper."""

from notifications.notification.payloads import PriceDropPayload
from notifications.notification.record import NotificationCategory
from notifications.templates.formatting import format_amount


class PriceDropTemplate:
    category = NotificationCategory.PRICE_DROP
    payload_type = PriceDropPayload

    @staticmethod
    def render(payload: PriceDropPayload) -> dict:
        return {
            "title": "Price Drop Alert 📉",
            "body": (
                f"{payload.product_name} price dropped by ₹{format_amount(payload.savings)}! "
                f"Now available for ₹{format_amount(payload.new_price)}"
            ),
        }
