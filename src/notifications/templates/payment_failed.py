"""Payment failure template."""

from notifications.notification.payloads import PaymentFailedPayload
from notifications.notification.record import NotificationCategory
from notifications.templates.formatting import format_amount


class PaymentFailedTemplate:
    category = NotificationCategory.PAYMENT_FAILED
    payload_type = PaymentFailedPayload

    @staticmethod
    def render(payload: PaymentFailedPayload) -> dict:
        return {
            "title": "Payment Failed ❌",
            "body": (
                f"Payment of ₹{format_amount(payload.amount)} for order #{payload.order_id} failed. "
                f"{payload.reason}"
            ),
        }
