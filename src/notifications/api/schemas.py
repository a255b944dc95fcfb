"""Pydantic request/response models for the Notifications API.

API schemas are separate from the NotificationRecord aggregate and the
typed payloads (anti-corruption pattern). Payloads arrive as plain objects
and are validated by the builder.
"""

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Request Models
# ---------------------------------------------------------------------------
class DispatchRequest(BaseModel):
    category: str = Field(..., examples=["stock_alert"])
    recipient_id: str = Field(..., min_length=1, examples=["seller-001"])
    payload: dict = Field(default_factory=dict, examples=[{"product_name": "Masala Chai", "current_stock": 3}])
    priority: str | None = Field(None, description="Overrides the category's default priority")


class BulkDispatchRequest(BaseModel):
    category: str = Field(..., examples=["flash_sale"])
    recipient_ids: list[str] = Field(..., min_length=1)
    payload: dict = Field(default_factory=dict)


# ---------------------------------------------------------------------------
# Response Models
# ---------------------------------------------------------------------------
class StatusResponse(BaseModel):
    status: str = "ok"


class NotificationResponse(BaseModel):
    notification_id: str
    recipient_id: str
    category: str
    title: str
    body: str
    payload: dict = {}
    priority: str
    is_read: bool
    created_at: str
    display_time: str | None = None


class NotificationListResponse(BaseModel):
    notifications: list[NotificationResponse]
    unread_count: int


class MailboxCountsResponse(BaseModel):
    unread: int
    urgent: int
    by_category: dict[str, int] = {}


class MarkAllReadResponse(BaseModel):
    marked: int


class BulkDispatchResponse(BaseModel):
    succeeded: int
    failed: int
