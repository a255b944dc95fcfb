"""Fake push transport — records pushes in memory for test assertions."""

from uuid import uuid4

from notifications.channel.push_port import PushPort


class FakePushAdapter(PushPort):
    def __init__(self):
        self.sent_pushes: list[dict] = []
        self.should_succeed = True
        self.failure_reason = "Push delivery failed"
        self.raise_on_send = False

    def configure(
        self,
        should_succeed: bool = True,
        failure_reason: str = "Push delivery failed",
        raise_on_send: bool = False,
    ):
        """Make later sends fail with a status, or raise outright."""
        self.should_succeed = should_succeed
        self.failure_reason = failure_reason
        self.raise_on_send = raise_on_send

    async def send(
        self,
        device_token: str,
        title: str,
        body: str,
        data: dict | None = None,
    ) -> dict:
        if self.raise_on_send:
            raise ConnectionError(self.failure_reason)
        if not self.should_succeed:
            return {"message_id": None, "status": "failed", "error": self.failure_reason}

        message_id = f"push-{uuid4().hex[:12]}"
        self.sent_pushes.append(
            {
                "message_id": message_id,
                "device_token": device_token,
                "title": title,
                "body": body,
                "data": data or {},
            }
        )
        return {"message_id": message_id, "status": "sent"}

    def pushes_for(self, device_token: str) -> list[dict]:
        return [push for push in self.sent_pushes if push["device_token"] == device_token]

    def reset(self):
        self.sent_pushes.clear()
        self.should_succeed = True
        self.failure_reason = "Push delivery failed"
        self.raise_on_send = False
