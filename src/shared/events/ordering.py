"""Cross-domain event contract for order lifecycle transitions.

The order workflow sequencer creates one ``OrderTransitioned`` per accepted
transition and hands it straight to the notifications dispatch engine. The
notifications domain registers it as an external event under
``Ordering.OrderTransitioned.v1`` so the type string matches the producer.
"""

from enum import Enum

from protean.core.event import BaseEvent
from protean.fields import DateTime, Float, Identifier, String


class OrderState(Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    PREPARING = "preparing"
    READY_FOR_PICKUP = "ready_for_pickup"
    PICKED_UP = "picked_up"
    OUT_FOR_DELIVERY = "out_for_delivery"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"


class OrderTransitioned(BaseEvent):
    """An order moved from one lifecycle state to the next.

    ``from_state`` is empty when the order was just placed.
    """

    __version__ = 1

    order_id = Identifier(required=True)
    from_state = String(max_length=50)
    to_state = String(required=True, max_length=50)

    # Order context used to render notifications
    customer_name = String(max_length=200)
    product_name = String(max_length=200)
    pickup_address = String(max_length=500)

    order_total = Float(default=0.0)
    delivery_fee = Float(default=0.0)
    distance_km = Float(default=0.0)

    occurred_at = DateTime(required=True)
