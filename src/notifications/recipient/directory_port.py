"""Recipient directory port — maps (order, role) to a recipient identity."""

from abc import ABC, abstractmethod
from enum import Enum


class RecipientRole(Enum):
    CUSTOMER = "customer"
    SELLER = "seller"
    COURIER = "courier"


class RecipientDirectory(ABC):
    @abstractmethod
    async def resolve(self, order_id: str, role: RecipientRole) -> str:
        """Return the recipient id for ``role`` on ``order_id``.

        Raises ``UnknownRecipientError`` when the order has no such actor.
        """
