"""Order workflow sequencer — accepts order transitions and fans them out.

Each order gets its own lane: an ``asyncio.Lock`` that serializes its
transitions, so the state change is recorded and the notification fan-out
for one transition completes before the next transition of the same order
starts. Different orders never wait on each other.

Entering ``delivered`` schedules a single review reminder for the customer;
entering ``cancelled`` withdraws it if it has not fired yet.
"""

import asyncio
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, datetime

import structlog
from notifications.errors import NotFoundError
from notifications.notification.dispatch import DispatchEngine
from notifications.notification.record import NotificationRecord
from ordering.workflow.scheduler import DeferredTaskScheduler
from ordering.workflow.state_machine import assert_can_transition
from protean.exceptions import ValidationError
from shared.events.ordering import OrderState, OrderTransitioned

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class OrderDetails:
    customer_name: str
    product_name: str
    order_total: float = 0.0
    pickup_address: str = ""
    distance_km: float = 0.0
    delivery_fee: float = 0.0


@dataclass
class TransitionResult:
    event: OrderTransitioned
    records: list[NotificationRecord] = field(default_factory=list)
    failed: int = 0


@dataclass
class _OrderLane:
    details: OrderDetails
    state: OrderState | None = None
    history: list[OrderState] = field(default_factory=list)
    lock: asyncio.Lock = field(default_factory=asyncio.Lock)


def _utcnow() -> datetime:
    return datetime.now(UTC)


def _coerce_state(state) -> OrderState:
    if isinstance(state, OrderState):
        return state
    try:
        return OrderState(state)
    except ValueError:
        raise ValidationError({"status": [f"Unknown order state: {state}"]}) from None


class OrderWorkflowSequencer:
    def __init__(
        self,
        engine: DispatchEngine,
        *,
        review_reminder_delay: float,
        scheduler: DeferredTaskScheduler | None = None,
        clock: Callable[[], datetime] | None = None,
    ):
        self.engine = engine
        self.review_reminder_delay = review_reminder_delay
        self.scheduler = scheduler or DeferredTaskScheduler()
        self.clock = clock or _utcnow
        self._orders: dict[str, _OrderLane] = {}

    def register_order(self, order_id: str, details: OrderDetails) -> None:
        """Record the order's context. Re-registering replaces the details, not the state."""
        lane = self._orders.get(order_id)
        if lane is None:
            self._orders[order_id] = _OrderLane(details=details)
        else:
            lane.details = details

    async def place_order(self, order_id: str, details: OrderDetails) -> TransitionResult | None:
        self.register_order(order_id, details)
        return await self.advance_order(order_id, OrderState.PENDING)

    def state_of(self, order_id: str) -> OrderState | None:
        return self._lane(order_id).state

    def history_of(self, order_id: str) -> list[OrderState]:
        return list(self._lane(order_id).history)

    def has_pending_reminder(self, order_id: str) -> bool:
        return self.scheduler.is_scheduled(self._reminder_key(order_id))

    def _lane(self, order_id: str) -> _OrderLane:
        lane = self._orders.get(order_id)
        if lane is None:
            raise NotFoundError("order", order_id)
        return lane

    @staticmethod
    def _reminder_key(order_id: str) -> str:
        return f"review-reminder:{order_id}"

    async def advance_order(self, order_id: str, to_state) -> TransitionResult | None:
        """Move the order to ``to_state`` and notify the routed actors.

        Returns None when the order already reached ``to_state`` at some
        point. Raises ``NotFoundError`` for an unregistered order and
        ``InvalidTransitionError`` when the move skips or leaves a terminal state.
        """
        lane = self._lane(order_id)
        target = _coerce_state(to_state)

        async with lane.lock:
            with structlog.contextvars.bound_contextvars(order_id=order_id, to_state=target.value):
                if target in lane.history:
                    logger.info("Order already reached state, skipping")
                    return None

                assert_can_transition(order_id, lane.state, target)

                from_state = lane.state
                lane.state = target
                lane.history.append(target)
                logger.info("Order transitioned", from_state=from_state.value if from_state else None)

                details = lane.details
                event = OrderTransitioned(
                    order_id=order_id,
                    from_state=from_state.value if from_state else None,
                    to_state=target.value,
                    customer_name=details.customer_name,
                    product_name=details.product_name,
                    pickup_address=details.pickup_address,
                    order_total=details.order_total,
                    delivery_fee=details.delivery_fee,
                    distance_km=details.distance_km,
                    occurred_at=self.clock(),
                )

                if target == OrderState.DELIVERED:
                    self._schedule_review_reminder(order_id, details.product_name)
                elif target == OrderState.CANCELLED and self.scheduler.cancel(self._reminder_key(order_id)):
                    logger.info("Review reminder withdrawn")

                fan_out = await self.engine.dispatch_order_event(event)
                return TransitionResult(event=event, records=fan_out.records, failed=fan_out.failed)

    def _schedule_review_reminder(self, order_id: str, product_name: str) -> None:
        async def send_reminder():
            await self.engine.dispatch_review_reminder(order_id, product_name)

        self.scheduler.schedule(self._reminder_key(order_id), self.review_reminder_delay, send_reminder)
        logger.info("Review reminder scheduled", delay_seconds=self.review_reminder_delay)

    async def shutdown(self) -> None:
        """Cancel outstanding review reminders."""
        await self.scheduler.shutdown()
