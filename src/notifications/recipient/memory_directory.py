"""In-memory recipient directory."""

from notifications.errors import UnknownRecipientError
from notifications.recipient.directory_port import RecipientDirectory, RecipientRole


class InMemoryRecipientDirectory(RecipientDirectory):
    def __init__(self):
        self._actors: dict[str, dict[RecipientRole, str]] = {}

    def register(self, order_id: str, customer_id=None, seller_id=None, courier_id=None):
        """Map the actors of an order. Omitted roles keep any earlier mapping."""
        actors = self._actors.setdefault(str(order_id), {})
        for role, recipient_id in (
            (RecipientRole.CUSTOMER, customer_id),
            (RecipientRole.SELLER, seller_id),
            (RecipientRole.COURIER, courier_id),
        ):
            if recipient_id:
                actors[role] = str(recipient_id)

    async def resolve(self, order_id: str, role: RecipientRole) -> str:
        try:
            return self._actors[str(order_id)][RecipientRole(role)]
        except KeyError:
            raise UnknownRecipientError(order_id, RecipientRole(role).value) from None

    def reset(self):
        self._actors.clear()
