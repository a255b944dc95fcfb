"""Wiring for the dispatch core — one set of collaborators per process."""

from dataclasses import dataclass

from fastapi import Request
from notifications.channel import get_transport
from notifications.channel.push_port import PushPort
from notifications.config import DispatchSettings
from notifications.mailbox.mailbox import MailboxAggregator
from notifications.notification.dispatch import DispatchEngine
from notifications.recipient.memory_directory import InMemoryRecipientDirectory
from notifications.store.repository_store import RepositoryNotificationStore
from notifications.store.store_port import NotificationStore


@dataclass
class NotificationServices:
    store: NotificationStore
    directory: InMemoryRecipientDirectory
    transport: PushPort | None
    engine: DispatchEngine
    mailbox: MailboxAggregator


def build_notification_services(
    settings: DispatchSettings,
    store: NotificationStore | None = None,
    directory: InMemoryRecipientDirectory | None = None,
    transport: PushPort | None = None,
) -> NotificationServices:
    """Assemble the engine and mailbox over a shared store.

    Defaults to the Protean repository store, an in-memory directory and the
    process-wide push transport.
    """
    store = store or RepositoryNotificationStore()
    directory = directory or InMemoryRecipientDirectory()
    transport = transport or get_transport()

    engine = DispatchEngine(
        store,
        directory,
        transport=transport,
        max_concurrency=settings.max_concurrent_dispatches,
    )
    return NotificationServices(
        store=store,
        directory=directory,
        transport=transport,
        engine=engine,
        mailbox=MailboxAggregator(store),
    )


def get_notification_services(request: Request) -> NotificationServices:
    """FastAPI dependency — the services attached to the running app."""
    return request.app.state.notification_services
