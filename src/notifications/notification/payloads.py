"""Typed payloads — one shape per notification category.

Incoming payloads arrive as plain mappings. ``parse_payload`` picks the
payload type for the category, checks that every required field is present
and coerces numeric fields, so templates can rely on the attributes they use.
"""

from collections.abc import Mapping
from dataclasses import MISSING, asdict, dataclass, fields
from typing import ClassVar

from notifications.errors import InvalidCategoryError, MissingFieldError
from notifications.notification.record import NotificationCategory
from protean.exceptions import ValidationError


class _Payload:
    category: ClassVar[NotificationCategory]
    numeric_fields: ClassVar[tuple[str, ...]] = ()

    @classmethod
    def from_mapping(cls, data: Mapping):
        values = {}
        for f in fields(cls):
            value = data.get(f.name)
            if value is None or value == "":
                if f.default is MISSING:
                    raise MissingFieldError(f.name)
                continue
            if f.name in cls.numeric_fields:
                value = _as_number(f.name, value)
            values[f.name] = value

        payload = cls(**values)
        payload.validate()
        return payload

    def validate(self) -> None:
        """Cross-field checks; the default has none."""

    def to_dict(self) -> dict:
        return {key: value for key, value in asdict(self).items() if value is not None}


def _as_number(name, value):
    if isinstance(value, bool):
        raise ValidationError({name: ["must be a number"]})
    if isinstance(value, int | float):
        return value
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ValidationError({name: ["must be a number"]}) from None
    return int(number) if number.is_integer() else number


@dataclass(frozen=True)
class OrderUpdatePayload(_Payload):
    category = NotificationCategory.ORDER_UPDATE
    numeric_fields = ("amount",)

    order_id: str
    status: str
    amount: float | None = None
    customer_name: str | None = None
    message: str | None = None

    def validate(self) -> None:
        # A "pending" update is the new-order alert sent to the seller
        if self.status == "pending":
            if self.amount is None:
                raise MissingFieldError("amount")
            if not self.customer_name:
                raise MissingFieldError("customer_name")


@dataclass(frozen=True)
class DeliveryAssignedPayload(_Payload):
    category = NotificationCategory.DELIVERY_ASSIGNED
    numeric_fields = ("distance",)

    order_id: str
    pickup_address: str
    distance: float


@dataclass(frozen=True)
class FlashSalePayload(_Payload):
    category = NotificationCategory.FLASH_SALE
    numeric_fields = ("discount",)

    product_name: str
    discount: float
    expires_at: str | None = None


@dataclass(frozen=True)
class PriceDropPayload(_Payload):
    category = NotificationCategory.PRICE_DROP
    numeric_fields = ("old_price", "new_price")

    product_name: str
    old_price: float
    new_price: float

    @property
    def savings(self):
        return self.old_price - self.new_price

    def to_dict(self) -> dict:
        return {**super().to_dict(), "savings": self.savings}


@dataclass(frozen=True)
class ReviewReminderPayload(_Payload):
    category = NotificationCategory.REVIEW_REMINDER

    order_id: str
    product_name: str


@dataclass(frozen=True)
class StockAlertPayload(_Payload):
    category = NotificationCategory.STOCK_ALERT
    numeric_fields = ("current_stock",)

    product_name: str
    current_stock: int

    @property
    def recommended_reorder(self):
        return max(20, self.current_stock * 5)

    def to_dict(self) -> dict:
        return {**super().to_dict(), "recommended_reorder": self.recommended_reorder}


@dataclass(frozen=True)
class PaymentSuccessPayload(_Payload):
    category = NotificationCategory.PAYMENT_SUCCESS
    numeric_fields = ("amount",)

    order_id: str
    amount: float
    payment_method: str


@dataclass(frozen=True)
class PaymentFailedPayload(_Payload):
    category = NotificationCategory.PAYMENT_FAILED
    numeric_fields = ("amount",)

    order_id: str
    amount: float
    reason: str


PAYLOAD_TYPES: dict[NotificationCategory, type[_Payload]] = {
    payload_type.category: payload_type
    for payload_type in (
        OrderUpdatePayload,
        DeliveryAssignedPayload,
        FlashSalePayload,
        PriceDropPayload,
        ReviewReminderPayload,
        StockAlertPayload,
        PaymentSuccessPayload,
        PaymentFailedPayload,
    )
}


def parse_payload(category: NotificationCategory, payload):
    """Return the typed payload for ``category``.

    Accepts either a mapping or an instance of the category's payload type.
    """
    payload_type = PAYLOAD_TYPES.get(category)
    if payload_type is None:
        raise InvalidCategoryError(category)

    if isinstance(payload, payload_type):
        payload.validate()
        return payload
    if isinstance(payload, _Payload):
        raise ValidationError(
            {"payload": [f"{type(payload).__name__} does not belong to category {category.value}"]}
        )
    if not isinstance(payload, Mapping):
        raise ValidationError({"payload": ["must be a mapping"]})

    return payload_type.from_mapping(payload)
