"""Dispatch engine — builds, persists and pushes notifications.

``dispatch_single`` is the only path to the store: every role helper, bulk
send and order-event fan-out goes through it. Records are persisted before
the push transport sees them, and transport problems are logged and never
raised back into dispatch. Store failures surface to the immediate caller;
fan-outs isolate them per recipient and report counts.
"""

import asyncio
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from datetime import UTC, datetime

import structlog
from notifications.channel.push_port import PushPort
from notifications.notification.builder import build
from notifications.notification.ordering_events import notify_role, roles_for
from notifications.notification.record import (
    NotificationCategory,
    NotificationPriority,
    NotificationRecord,
)
from notifications.recipient.directory_port import RecipientDirectory, RecipientRole
from notifications.store.store_port import NotificationStore
from shared.events.ordering import OrderTransitioned

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class BulkDispatchResult:
    succeeded: int
    failed: int


@dataclass
class FanOutResult:
    records: list[NotificationRecord] = field(default_factory=list)
    failed: int = 0


def _utcnow() -> datetime:
    return datetime.now(UTC)


class DispatchEngine:
    def __init__(
        self,
        store: NotificationStore,
        directory: RecipientDirectory,
        transport: PushPort | None = None,
        clock: Callable[[], datetime] | None = None,
        max_concurrency: int = 50,
    ):
        self.store = store
        self.directory = directory
        self.transport = transport
        self.clock = clock or _utcnow
        self._slots = asyncio.Semaphore(max_concurrency)
        self._last_created_at: datetime | None = None

    def _now(self) -> datetime:
        # created_at never goes backwards, even if the clock does
        now = self.clock()
        if self._last_created_at is not None and now < self._last_created_at:
            now = self._last_created_at
        self._last_created_at = now
        return now

    # -------------------------------------------------------------------
    # Core paths
    # -------------------------------------------------------------------
    async def dispatch_single(
        self,
        category,
        recipient_id: str,
        payload,
        priority_override=None,
    ) -> NotificationRecord:
        """Build, store and push one notification. Returns the stored record."""
        async with self._slots:
            record = build(
                category,
                recipient_id,
                payload,
                created_at=self._now(),
                priority_override=priority_override,
            )
            record = await self.store.create(record)

        logger.info(
            "Notification dispatched",
            notification_id=str(record.id),
            recipient_id=record.recipient_id,
            category=record.category,
            priority=record.priority,
        )
        await self._push(record)
        return record

    async def dispatch_bulk(self, category, recipient_ids: Iterable[str], payload) -> BulkDispatchResult:
        """Send the same notification to every distinct recipient.

        Each recipient is an isolated submission; one failure never stops
        the others.
        """
        recipients = list(dict.fromkeys(recipient_ids))
        outcomes = await asyncio.gather(
            *(self.dispatch_single(category, recipient_id, payload) for recipient_id in recipients),
            return_exceptions=True,
        )

        failed = 0
        for recipient_id, outcome in zip(recipients, outcomes):
            if isinstance(outcome, Exception):
                failed += 1
                logger.error(
                    "Bulk dispatch failed for recipient",
                    recipient_id=recipient_id,
                    category=getattr(category, "value", category),
                    error=str(outcome),
                    error_type=type(outcome).__name__,
                )

        result = BulkDispatchResult(succeeded=len(recipients) - failed, failed=failed)
        logger.info("Bulk dispatch completed", succeeded=result.succeeded, failed=result.failed)
        return result

    async def dispatch_order_event(self, event: OrderTransitioned) -> FanOutResult:
        """Notify every actor routed for ``event.to_state`` concurrently."""
        roles = roles_for(event)
        outcomes = await asyncio.gather(
            *(notify_role(self, event, role) for role in roles),
            return_exceptions=True,
        )

        result = FanOutResult()
        for role, outcome in zip(roles, outcomes):
            if isinstance(outcome, Exception):
                result.failed += 1
                logger.error(
                    "Order notification failed",
                    order_id=str(event.order_id),
                    to_state=event.to_state,
                    role=role.value,
                    error=str(outcome),
                    error_type=type(outcome).__name__,
                )
            else:
                result.records.append(outcome)
        return result

    async def dispatch_review_reminder(self, order_id: str, product_name: str) -> NotificationRecord:
        customer_id = await self.directory.resolve(order_id, RecipientRole.CUSTOMER)
        return await self.send_review_reminder(customer_id, order_id=order_id, product_name=product_name)

    async def _push(self, record: NotificationRecord) -> None:
        if self.transport is None:
            return

        try:
            result = await self.transport.send(
                device_token=record.recipient_id,
                title=record.title,
                body=record.body,
                data={
                    "notification_id": str(record.id),
                    "category": record.category,
                    "priority": record.priority,
                },
            )
        except Exception as e:
            logger.error("Push transport raised", notification_id=str(record.id), error=str(e))
            return

        if result.get("status") != "sent":
            logger.warning(
                "Push delivery failed",
                notification_id=str(record.id),
                error=result.get("error", "Unknown push error"),
            )

    # -------------------------------------------------------------------
    # Role helpers
    # -------------------------------------------------------------------
    async def send_order_confirmation(self, customer_id, order_id, amount=None):
        return await self.dispatch_single(
            NotificationCategory.ORDER_UPDATE,
            customer_id,
            {"order_id": order_id, "status": "confirmed", "amount": amount},
            priority_override=NotificationPriority.HIGH,
        )

    async def send_order_status_update(self, recipient_id, order_id, status, message=None):
        return await self.dispatch_single(
            NotificationCategory.ORDER_UPDATE,
            recipient_id,
            {"order_id": order_id, "status": status, "message": message},
        )

    async def send_new_order_to_seller(self, seller_id, order_id, customer_name, amount):
        return await self.dispatch_single(
            NotificationCategory.ORDER_UPDATE,
            seller_id,
            {"order_id": order_id, "status": "pending", "customer_name": customer_name, "amount": amount},
            priority_override=NotificationPriority.URGENT,
        )

    async def send_delivery_assignment(self, courier_id, order_id, pickup_address, distance):
        return await self.dispatch_single(
            NotificationCategory.DELIVERY_ASSIGNED,
            courier_id,
            {"order_id": order_id, "pickup_address": pickup_address, "distance": distance},
        )

    async def send_low_stock_alert(self, seller_id, product_name, current_stock):
        return await self.dispatch_single(
            NotificationCategory.STOCK_ALERT,
            seller_id,
            {"product_name": product_name, "current_stock": current_stock},
        )

    async def send_flash_sale_alert(self, customer_id, product_name, discount, expires_at=None):
        return await self.dispatch_single(
            NotificationCategory.FLASH_SALE,
            customer_id,
            {"product_name": product_name, "discount": discount, "expires_at": expires_at},
        )

    async def send_price_drop_alert(self, customer_id, product_name, old_price, new_price):
        return await self.dispatch_single(
            NotificationCategory.PRICE_DROP,
            customer_id,
            {"product_name": product_name, "old_price": old_price, "new_price": new_price},
        )

    async def send_review_reminder(self, customer_id, order_id, product_name):
        return await self.dispatch_single(
            NotificationCategory.REVIEW_REMINDER,
            customer_id,
            {"order_id": order_id, "product_name": product_name},
        )

    async def send_payment_success(self, customer_id, order_id, amount, payment_method):
        return await self.dispatch_single(
            NotificationCategory.PAYMENT_SUCCESS,
            customer_id,
            {"order_id": order_id, "amount": amount, "payment_method": payment_method},
        )

    async def send_payment_failed(self, customer_id, order_id, amount, reason):
        return await self.dispatch_single(
            NotificationCategory.PAYMENT_FAILED,
            customer_id,
            {"order_id": order_id, "amount": amount, "reason": reason},
        )
