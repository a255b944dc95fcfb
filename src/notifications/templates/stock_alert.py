"""Low stock alert template — sent to the seller of a product."""

from notifications.notification.payloads import StockAlertPayload
from notifications.notification.record import NotificationCategory
from notifications.templates.formatting import format_number


class StockAlertTemplate:
    category = NotificationCategory.STOCK_ALERT
    payload_type = StockAlertPayload

    @staticmethod
    def render(payload: StockAlertPayload) -> dict:
        return {
            "title": "Low Stock Alert! ⚠️",
            "body": (
                f"{payload.product_name} is running low on stock. "
                f"Only {format_number(payload.current_stock)} units remaining."
            ),
        }
