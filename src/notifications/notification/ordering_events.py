"""Order transition routing — which actors hear about which order state.

Every accepted order transition fans out to the actors listed for its target
state. The seller learns about a new order, the courier about a pickup, and
the customer about everything else; a cancellation reaches both customer and
seller.
"""

from notifications.domain import notifications
from notifications.notification.record import NotificationRecord
from notifications.recipient.directory_port import RecipientRole
from shared.events.ordering import OrderState, OrderTransitioned

notifications.register_external_event(OrderTransitioned, "Ordering.OrderTransitioned.v1")

ORDER_EVENT_ROUTES: dict[OrderState, tuple[RecipientRole, ...]] = {
    OrderState.PENDING: (RecipientRole.SELLER,),
    OrderState.CONFIRMED: (RecipientRole.CUSTOMER,),
    OrderState.PREPARING: (RecipientRole.CUSTOMER,),
    OrderState.READY_FOR_PICKUP: (RecipientRole.CUSTOMER, RecipientRole.COURIER),
    OrderState.PICKED_UP: (RecipientRole.CUSTOMER,),
    OrderState.OUT_FOR_DELIVERY: (RecipientRole.CUSTOMER,),
    OrderState.DELIVERED: (RecipientRole.CUSTOMER,),
    OrderState.CANCELLED: (RecipientRole.CUSTOMER, RecipientRole.SELLER),
}


def roles_for(event: OrderTransitioned) -> tuple[RecipientRole, ...]:
    return ORDER_EVENT_ROUTES.get(OrderState(event.to_state), ())


async def notify_role(engine, event: OrderTransitioned, role: RecipientRole) -> NotificationRecord:
    """Send the notification ``role`` receives for ``event`` through ``engine``."""
    order_id = str(event.order_id)
    state = OrderState(event.to_state)
    recipient_id = await engine.directory.resolve(order_id, role)

    if role == RecipientRole.SELLER and state == OrderState.PENDING:
        return await engine.send_new_order_to_seller(
            recipient_id,
            order_id=order_id,
            customer_name=event.customer_name,
            amount=event.order_total,
        )

    if role == RecipientRole.COURIER and state == OrderState.READY_FOR_PICKUP:
        return await engine.send_delivery_assignment(
            recipient_id,
            order_id=order_id,
            pickup_address=event.pickup_address,
            distance=event.distance_km,
        )

    return await engine.send_order_status_update(recipient_id, order_id=order_id, status=state.value)
