"""Application tests for the in-memory recipient directory."""

import pytest
from notifications.errors import UnknownRecipientError
from notifications.recipient.directory_port import RecipientRole
from notifications.recipient.memory_directory import InMemoryRecipientDirectory


class TestInMemoryRecipientDirectory:
    @pytest.mark.asyncio
    async def test_resolves_each_role(self, directory):
        assert await directory.resolve("ord-1", RecipientRole.CUSTOMER) == "cust-1"
        assert await directory.resolve("ord-1", RecipientRole.SELLER) == "seller-1"
        assert await directory.resolve("ord-1", RecipientRole.COURIER) == "courier-1"

    @pytest.mark.asyncio
    async def test_role_accepts_string(self, directory):
        assert await directory.resolve("ord-1", "seller") == "seller-1"

    @pytest.mark.asyncio
    async def test_unknown_order_raises(self, directory):
        with pytest.raises(UnknownRecipientError) as exc_info:
            await directory.resolve("ord-404", RecipientRole.CUSTOMER)
        assert exc_info.value.role == "customer"

    @pytest.mark.asyncio
    async def test_unmapped_role_raises(self):
        directory = InMemoryRecipientDirectory()
        directory.register("ord-2", customer_id="cust-2", seller_id="seller-2")
        with pytest.raises(UnknownRecipientError):
            await directory.resolve("ord-2", RecipientRole.COURIER)

    @pytest.mark.asyncio
    async def test_later_registration_adds_courier(self):
        directory = InMemoryRecipientDirectory()
        directory.register("ord-2", customer_id="cust-2", seller_id="seller-2")
        directory.register("ord-2", courier_id="courier-2")

        assert await directory.resolve("ord-2", RecipientRole.CUSTOMER) == "cust-2"
        assert await directory.resolve("ord-2", RecipientRole.COURIER) == "courier-2"
