import os
from datetime import UTC, datetime, timedelta
from pathlib import Path

import pytest
from protean.integrations.pytest import DomainFixture


def pytest_addoption(parser):
    parser.addoption(
        "--env",
        action="store",
        default="test",
        help="Config environment to run tests on",
    )


def pytest_sessionstart(session):
    """Select the Protean config overlay before any domain is initialized."""
    os.environ["PROTEAN_ENV"] = session.config.option.env


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their directory location."""
    for item in items:
        test_path = str(Path(item.fspath))

        if "/domain/" in test_path:
            item.add_marker(pytest.mark.domain)
        elif "/application/" in test_path:
            item.add_marker(pytest.mark.application)
        elif "/integration/" in test_path:
            item.add_marker(pytest.mark.integration)
            # Integration tests are often slower
            if not any(m.name == "fast" for m in item.iter_markers()):
                item.add_marker(pytest.mark.slow)
        elif "/bdd/" in test_path:
            item.add_marker(pytest.mark.bdd)


@pytest.fixture(scope="session")
def notifications_bed():
    from notifications.domain import notifications

    bed = DomainFixture(notifications)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(notifications_bed):
    """Run every test inside the notifications domain and clean up afterwards."""
    with notifications_bed.domain_context():
        yield

        from protean import current_domain

        for _, provider in current_domain.providers.items():
            provider._data_reset()

        current_domain.event_store.store._data_reset()


# ---------------------------------------------------------------------------
# Shared collaborators
# ---------------------------------------------------------------------------
class FakeClock:
    """Deterministic clock: returns ``now`` until advanced."""

    def __init__(self, start=None):
        self.now = start or datetime(2024, 6, 1, 12, 0, tzinfo=UTC)

    def __call__(self):
        return self.now

    def advance(self, **kwargs):
        self.now = self.now + timedelta(**kwargs)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def store():
    from notifications.store.memory_store import InMemoryNotificationStore

    return InMemoryNotificationStore()


@pytest.fixture
def directory():
    from notifications.recipient.memory_directory import InMemoryRecipientDirectory

    directory = InMemoryRecipientDirectory()
    directory.register("ord-1", customer_id="cust-1", seller_id="seller-1", courier_id="courier-1")
    return directory


@pytest.fixture
def transport():
    from notifications.channel.fake_push import FakePushAdapter

    return FakePushAdapter()


@pytest.fixture
def engine(store, directory, transport, clock):
    from notifications.notification.dispatch import DispatchEngine

    return DispatchEngine(store, directory, transport=transport, clock=clock)


@pytest.fixture
def mailbox(store):
    from notifications.mailbox.mailbox import MailboxAggregator

    return MailboxAggregator(store)
