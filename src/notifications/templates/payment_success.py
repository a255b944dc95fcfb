"""Payment success template."""

from notifications.notification.payloads import PaymentSuccessPayload
from notifications.notification.record import NotificationCategory
from notifications.templates.formatting import format_amount


class PaymentSuccessTemplate:
    category = NotificationCategory.PAYMENT_SUCCESS
    payload_type = PaymentSuccessPayload

    @staticmethod
    def render(payload: PaymentSuccessPayload) -> dict:
        return {
            "title": "Payment Successful! 💳",
            "body": (
                f"Payment of ₹{format_amount(payload.amount)} for order #{payload.order_id} "
                f"was successful via {payload.payment_method}."
            ),
        }
