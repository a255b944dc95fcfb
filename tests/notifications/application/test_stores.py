"""Application tests for the notification store adapters."""

from datetime import UTC, datetime

import pytest
from notifications.errors import NotFoundError, StoreUnavailableError
from notifications.mailbox.mailbox import MailboxAggregator
from notifications.notification.builder import build
from notifications.notification.dispatch import DispatchEngine
from notifications.notification.record import NotificationCategory, NotificationRecord
from notifications.store.memory_store import InMemoryNotificationStore
from notifications.store.repository_store import RepositoryNotificationStore
from notifications.store.store_port import check_changes
from protean import current_domain
from protean.exceptions import ValidationError

CREATED_AT = datetime(2024, 6, 1, 12, 0, tzinfo=UTC)


def _record(recipient_id="cust-1"):
    return build(
        NotificationCategory.FLASH_SALE,
        recipient_id,
        {"product_name": "Masala Chai", "discount": 30},
        created_at=CREATED_AT,
    )


class TestCheckChanges:
    def test_is_read_true_allowed(self):
        check_changes({"is_read": True})

    def test_is_read_false_rejected(self):
        with pytest.raises(ValidationError):
            check_changes({"is_read": False})

    def test_other_fields_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            check_changes({"is_read": True, "title": "Edited"})
        assert "title" in exc_info.value.messages


@pytest.fixture(params=["memory", "repository"])
def any_store(request):
    if request.param == "memory":
        return InMemoryNotificationStore()
    return RepositoryNotificationStore()


class TestStoreContract:
    @pytest.mark.asyncio
    async def test_create_assigns_increasing_sequence(self, any_store):
        first = await any_store.create(_record())
        second = await any_store.create(_record())
        assert 0 < first.sequence < second.sequence

    @pytest.mark.asyncio
    async def test_get_returns_record(self, any_store):
        record = await any_store.create(_record())
        loaded = await any_store.get(str(record.id))
        assert loaded.id == record.id
        assert loaded.title == "Flash Sale Alert! ⚡"

    @pytest.mark.asyncio
    async def test_get_missing_raises(self, any_store):
        with pytest.raises(NotFoundError):
            await any_store.get("does-not-exist")

    @pytest.mark.asyncio
    async def test_list_filters_by_recipient_and_read_state(self, any_store):
        mine = await any_store.create(_record("cust-1"))
        await any_store.create(_record("cust-1"))
        await any_store.create(_record("cust-2"))
        await any_store.update(str(mine.id), {"is_read": True})

        assert len(await any_store.list(recipient_id="cust-1")) == 2
        assert len(await any_store.list(recipient_id="cust-1", is_read=False)) == 1
        assert [r.id for r in await any_store.list(recipient_id="cust-1", is_read=True)] == [mine.id]

    @pytest.mark.asyncio
    async def test_update_marks_read(self, any_store):
        record = await any_store.create(_record())
        updated = await any_store.update(str(record.id), {"is_read": True})
        assert updated.is_read is True
        assert (await any_store.get(str(record.id))).is_read is True

    @pytest.mark.asyncio
    async def test_update_rejects_other_changes(self, any_store):
        record = await any_store.create(_record())
        with pytest.raises(ValidationError):
            await any_store.update(str(record.id), {"priority": "low"})

    @pytest.mark.asyncio
    async def test_update_missing_raises(self, any_store):
        with pytest.raises(NotFoundError):
            await any_store.update("does-not-exist", {"is_read": True})

    @pytest.mark.asyncio
    async def test_delete(self, any_store):
        record = await any_store.create(_record())
        await any_store.delete(str(record.id))
        with pytest.raises(NotFoundError):
            await any_store.get(str(record.id))

    @pytest.mark.asyncio
    async def test_delete_missing_raises(self, any_store):
        with pytest.raises(NotFoundError):
            await any_store.delete("does-not-exist")


class TestInMemoryFailureModes:
    @pytest.mark.asyncio
    async def test_unavailable_store_raises_on_every_call(self):
        store = InMemoryNotificationStore()
        store.configure(available=False)
        with pytest.raises(StoreUnavailableError):
            await store.create(_record())
        with pytest.raises(StoreUnavailableError):
            await store.list(recipient_id="cust-1")

    @pytest.mark.asyncio
    async def test_failing_recipient_only_affects_that_recipient(self):
        store = InMemoryNotificationStore()
        store.configure(failing_recipients={"cust-2"})
        await store.create(_record("cust-1"))
        with pytest.raises(StoreUnavailableError):
            await store.create(_record("cust-2"))

    @pytest.mark.asyncio
    async def test_reset_clears_records_and_failures(self):
        store = InMemoryNotificationStore()
        await store.create(_record())
        store.configure(available=False)
        store.reset()
        assert store.records == {}
        assert (await store.create(_record())).sequence == 1


class TestRepositoryStore:
    @pytest.mark.asyncio
    async def test_records_land_in_the_domain_repository(self):
        store = RepositoryNotificationStore()
        record = await store.create(_record())

        persisted = current_domain.repository_for(NotificationRecord).get(str(record.id))
        assert persisted.recipient_id == "cust-1"
        assert persisted.category == "flash_sale"

    @pytest.mark.asyncio
    async def test_list_returns_every_record_past_one_page(self):
        store = RepositoryNotificationStore()
        for _ in range(150):
            await store.create(_record())
        await store.create(_record("cust-2"))

        records = await store.list(recipient_id="cust-1")

        assert len(records) == 150
        assert len({record.id for record in records}) == 150
        assert [record.sequence for record in records] == sorted(record.sequence for record in records)

    @pytest.mark.asyncio
    async def test_unread_filter_spans_pages(self):
        store = RepositoryNotificationStore()
        records = [await store.create(_record()) for _ in range(130)]
        for record in records[:10]:
            await store.update(str(record.id), {"is_read": True})

        assert len(await store.list(recipient_id="cust-1", is_read=False)) == 120
        assert len(await store.list(recipient_id="cust-1", is_read=True)) == 10

    @pytest.mark.asyncio
    async def test_sequence_continues_across_store_instances(self):
        first = await RepositoryNotificationStore().create(_record())
        second = await RepositoryNotificationStore().create(_record("cust-2"))
        third = await RepositoryNotificationStore().create(_record())

        assert first.sequence < second.sequence < third.sequence


class TestMailboxOverRepositoryStore:
    @pytest.fixture
    def repo_engine(self, directory, transport, clock):
        return DispatchEngine(RepositoryNotificationStore(), directory, transport=transport, clock=clock)

    @pytest.fixture
    def repo_mailbox(self, repo_engine):
        return MailboxAggregator(repo_engine.store)

    @pytest.mark.asyncio
    async def test_mark_all_read_marks_only_unread(self, repo_engine, repo_mailbox):
        records = [await repo_engine.send_review_reminder("cust-1", "ord-1", "Masala Chai") for _ in range(7)]
        for record in records[:2]:
            await repo_mailbox.mark_read(str(record.id))

        assert await repo_mailbox.unread_count("cust-1") == 5
        assert await repo_mailbox.mark_all_read("cust-1") == 5
        assert await repo_mailbox.unread_count("cust-1") == 0

    @pytest.mark.asyncio
    async def test_large_mailbox_is_counted_and_cleared_in_full(self, repo_engine, repo_mailbox):
        for _ in range(150):
            await repo_engine.send_review_reminder("cust-1", "ord-1", "Masala Chai")

        assert await repo_mailbox.unread_count("cust-1") == 150
        assert len(await repo_mailbox.list_for_recipient("cust-1")) == 150
        assert await repo_mailbox.count_by_category("cust-1") == {"review_reminder": 150}

        assert await repo_mailbox.mark_all_read("cust-1") == 150
        assert await repo_mailbox.unread_count("cust-1") == 0
