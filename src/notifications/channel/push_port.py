"""Push transport port — the best-effort sink dispatch calls after persisting."""

from abc import ABC, abstractmethod


class PushPort(ABC):
    """Abstract interface for push transports.

    Implementations report delivery problems through the returned status.
    Dispatch also tolerates exceptions, but adapters should not rely on it.
    """

    @abstractmethod
    async def send(
        self,
        device_token: str,
        title: str,
        body: str,
        data: dict | None = None,
    ) -> dict:
        """Push one notification to a recipient's device.

        Returns:
            dict with keys: message_id, status ("sent" or "failed"), error (optional)
        """
        ...
