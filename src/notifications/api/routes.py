"""FastAPI routes for the Notifications domain.

Thin adapters over the dispatch engine and the mailbox aggregator.
No business logic — just schema→call→response translation.
"""

from datetime import UTC, datetime

from fastapi import APIRouter, Depends
from notifications.api.errors import to_http_exception
from notifications.api.schemas import (
    BulkDispatchRequest,
    BulkDispatchResponse,
    DispatchRequest,
    MailboxCountsResponse,
    MarkAllReadResponse,
    NotificationListResponse,
    NotificationResponse,
    StatusResponse,
)
from notifications.errors import StoreUnavailableError
from notifications.mailbox.display import format_relative_time
from notifications.notification.builder import coerce_category
from notifications.notification.record import NotificationRecord
from notifications.services import NotificationServices, get_notification_services
from protean.exceptions import ObjectNotFoundError, ValidationError

router = APIRouter(prefix="/notifications", tags=["notifications"])

_CORE_ERRORS = (ValidationError, ObjectNotFoundError, StoreUnavailableError)


def _to_response(record: NotificationRecord, now: datetime | None = None) -> NotificationResponse:
    return NotificationResponse(
        notification_id=str(record.id),
        recipient_id=str(record.recipient_id),
        category=record.category,
        title=record.title,
        body=record.body,
        payload=record.get_payload(),
        priority=record.priority,
        is_read=record.is_read,
        created_at=record.created_at.isoformat(),
        display_time=format_relative_time(record.created_at, now) if now else None,
    )


# ---------------------------------------------------------------------------
# Dispatch
# ---------------------------------------------------------------------------
@router.post("/dispatch", status_code=201, response_model=NotificationResponse)
async def dispatch_notification(
    body: DispatchRequest,
    services: NotificationServices = Depends(get_notification_services),
) -> NotificationResponse:
    try:
        record = await services.engine.dispatch_single(
            body.category,
            body.recipient_id,
            body.payload,
            priority_override=body.priority,
        )
    except _CORE_ERRORS as e:
        raise to_http_exception(e) from e
    return _to_response(record)


@router.post("/dispatch/bulk", response_model=BulkDispatchResponse)
async def dispatch_bulk(
    body: BulkDispatchRequest,
    services: NotificationServices = Depends(get_notification_services),
) -> BulkDispatchResponse:
    try:
        category = coerce_category(body.category)
    except ValidationError as e:
        raise to_http_exception(e) from e

    result = await services.engine.dispatch_bulk(category, body.recipient_ids, body.payload)
    return BulkDispatchResponse(succeeded=result.succeeded, failed=result.failed)


# ---------------------------------------------------------------------------
# Single record
# ---------------------------------------------------------------------------
@router.post("/records/{notification_id}/read", response_model=StatusResponse)
async def mark_read(
    notification_id: str,
    services: NotificationServices = Depends(get_notification_services),
) -> StatusResponse:
    try:
        await services.mailbox.mark_read(notification_id)
    except _CORE_ERRORS as e:
        raise to_http_exception(e) from e
    return StatusResponse()


@router.delete("/records/{notification_id}", response_model=StatusResponse)
async def delete_notification(
    notification_id: str,
    services: NotificationServices = Depends(get_notification_services),
) -> StatusResponse:
    try:
        await services.mailbox.delete(notification_id)
    except _CORE_ERRORS as e:
        raise to_http_exception(e) from e
    return StatusResponse()


# ---------------------------------------------------------------------------
# Mailbox
# ---------------------------------------------------------------------------
@router.get("/{recipient_id}", response_model=NotificationListResponse)
async def list_notifications(
    recipient_id: str,
    category: str | None = None,
    services: NotificationServices = Depends(get_notification_services),
) -> NotificationListResponse:
    """List a recipient's notifications, newest first."""
    try:
        records = await services.mailbox.list_for_recipient(recipient_id, category=category)
        unread = await services.mailbox.unread_count(recipient_id)
    except _CORE_ERRORS as e:
        raise to_http_exception(e) from e

    now = datetime.now(UTC)
    return NotificationListResponse(
        notifications=[_to_response(record, now) for record in records],
        unread_count=unread,
    )


@router.get("/{recipient_id}/counts", response_model=MailboxCountsResponse)
async def mailbox_counts(
    recipient_id: str,
    services: NotificationServices = Depends(get_notification_services),
) -> MailboxCountsResponse:
    try:
        return MailboxCountsResponse(
            unread=await services.mailbox.unread_count(recipient_id),
            urgent=await services.mailbox.urgent_count(recipient_id),
            by_category=await services.mailbox.count_by_category(recipient_id),
        )
    except _CORE_ERRORS as e:
        raise to_http_exception(e) from e


@router.post("/{recipient_id}/read-all", response_model=MarkAllReadResponse)
async def mark_all_read(
    recipient_id: str,
    services: NotificationServices = Depends(get_notification_services),
) -> MarkAllReadResponse:
    try:
        marked = await services.mailbox.mark_all_read(recipient_id)
    except _CORE_ERRORS as e:
        raise to_http_exception(e) from e
    return MarkAllReadResponse(marked=marked)
