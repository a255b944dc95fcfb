"""Order update template — lifecycle status changes for customers and sellers.

The ``pending`` status is the new-order alert sent to the seller when an
order is placed; ``confirmed`` has its own wording; every other status uses
the generic "Order <STATUS>" title with the payload message or a default.
"""

from notifications.notification.payloads import OrderUpdatePayload
from notifications.notification.record import NotificationCategory
from notifications.templates.formatting import format_amount

STATUS_EMOJIS = {
    "confirmed": "✅",
    "preparing": "👨‍🍳",
    "ready_for_pickup": "📦",
    "picked_up": "🚚",
    "out_for_delivery": "🛵",
    "delivered": "✅",
    "cancelled": "❌",
}

DEFAULT_MESSAGES = {
    "preparing": "Your order is being prepared by the seller.",
    "ready_for_pickup": "Your order is ready and will be picked up soon.",
    "picked_up": "Your order has been picked up and is on the way!",
    "out_for_delivery": "Your order is out for delivery!",
    "delivered": "Your order has been delivered successfully! 🎉",
}


class OrderUpdateTemplate:
    category = NotificationCategory.ORDER_UPDATE
    payload_type = OrderUpdatePayload

    @staticmethod
    def render(payload: OrderUpdatePayload) -> dict:
        if payload.status == "pending":
            return {
                "title": "New Order Received! 📦",
                "body": (
                    f"You have received a new order #{payload.order_id} worth "
                    f"₹{format_amount(payload.amount)} from {payload.customer_name}."
                ),
            }
        if payload.status == "confirmed":
            return {
                "title": "Order Confirmed! 🎉",
                "body": f"Your order #{payload.order_id} has been confirmed and is being prepared.",
            }

        label = payload.status.replace("_", " ").upper()
        emoji = STATUS_EMOJIS.get(payload.status, "")
        title = f"Order {label} {emoji}".rstrip()

        if payload.message:
            body = payload.message
        elif payload.status == "cancelled":
            body = f"Order #{payload.order_id} has been cancelled."
        else:
            body = DEFAULT_MESSAGES.get(payload.status, f"Order #{payload.order_id} is now {label.lower()}.")

        return {"title": title, "body": body}
