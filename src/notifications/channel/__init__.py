"""Transport sinks for dispatched notifications.

Dispatch hands every stored record to a push transport on a best-effort
basis. Only the in-memory fake ships here; a real APNs or FCM adapter would
implement the same ``PushPort``.
"""

from notifications.channel.fake_push import FakePushAdapter
from notifications.channel.push_port import PushPort

_transport: PushPort | None = None


def get_transport() -> PushPort:
    """Return the process-wide push transport, creating the fake on first use."""
    global _transport
    if _transport is None:
        _transport = FakePushAdapter()
    return _transport


def reset_transport():
    """Drop the process-wide transport (useful for testing)."""
    global _transport
    _transport = None
