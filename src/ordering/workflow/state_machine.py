"""Order lifecycle state machine.

Orders follow the happy path one step at a time. Cancellation is reachable
from every state except ``cancelled`` itself, including ``delivered``.
"""

from notifications.errors import InvalidTransitionError
from shared.events.ordering import OrderState

HAPPY_PATH = (
    OrderState.PENDING,
    OrderState.CONFIRMED,
    OrderState.PREPARING,
    OrderState.READY_FOR_PICKUP,
    OrderState.PICKED_UP,
    OrderState.OUT_FOR_DELIVERY,
    OrderState.DELIVERED,
)

# State machine transition map
_VALID_TRANSITIONS = {
    OrderState.PENDING: {OrderState.CONFIRMED, OrderState.CANCELLED},
    OrderState.CONFIRMED: {OrderState.PREPARING, OrderState.CANCELLED},
    OrderState.PREPARING: {OrderState.READY_FOR_PICKUP, OrderState.CANCELLED},
    OrderState.READY_FOR_PICKUP: {OrderState.PICKED_UP, OrderState.CANCELLED},
    OrderState.PICKED_UP: {OrderState.OUT_FOR_DELIVERY, OrderState.CANCELLED},
    OrderState.OUT_FOR_DELIVERY: {OrderState.DELIVERED, OrderState.CANCELLED},
    OrderState.DELIVERED: {OrderState.CANCELLED},
    OrderState.CANCELLED: set(),  # Terminal
}


def can_transition(current: OrderState | None, target: OrderState) -> bool:
    """``None`` stands for an order that has not been placed yet."""
    if current is None:
        return target == OrderState.PENDING
    return target in _VALID_TRANSITIONS[current]


def assert_can_transition(order_id: str, current: OrderState | None, target: OrderState) -> None:
    if not can_transition(current, target):
        raise InvalidTransitionError(order_id, current.value if current else None, target.value)
