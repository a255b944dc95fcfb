"""FastAPI routes for the Ordering workflow — placing and advancing orders."""

from fastapi import APIRouter, Depends, Request
from notifications.api.errors import to_http_exception
from notifications.errors import NotFoundError
from notifications.recipient.memory_directory import InMemoryRecipientDirectory
from ordering.api.schemas import (
    AdvanceOrderRequest,
    OrderStateResponse,
    PlaceOrderRequest,
    TransitionResponse,
)
from ordering.workflow.sequencer import OrderDetails, OrderWorkflowSequencer, TransitionResult
from protean.exceptions import ValidationError

order_router = APIRouter(prefix="/orders", tags=["orders"])


def get_sequencer(request: Request) -> OrderWorkflowSequencer:
    return request.app.state.sequencer


def get_directory(request: Request) -> InMemoryRecipientDirectory:
    return request.app.state.notification_services.directory


def _transition_response(
    order_id: str,
    result: TransitionResult | None,
    sequencer: OrderWorkflowSequencer,
) -> TransitionResponse:
    state = sequencer.state_of(order_id)
    if result is None:
        return TransitionResponse(order_id=order_id, changed=False, state=state.value)
    return TransitionResponse(
        order_id=order_id,
        changed=True,
        state=state.value,
        notified=len(result.records),
        failed=result.failed,
    )


@order_router.post("/{order_id}/place", status_code=201, response_model=TransitionResponse)
async def place_order(
    order_id: str,
    body: PlaceOrderRequest,
    sequencer: OrderWorkflowSequencer = Depends(get_sequencer),
    directory: InMemoryRecipientDirectory = Depends(get_directory),
) -> TransitionResponse:
    directory.register(
        order_id,
        customer_id=body.customer_id,
        seller_id=body.seller_id,
        courier_id=body.courier_id,
    )
    details = OrderDetails(
        customer_name=body.customer_name,
        product_name=body.product_name,
        order_total=body.order_total,
        pickup_address=body.pickup_address,
        distance_km=body.distance_km,
        delivery_fee=body.delivery_fee,
    )
    try:
        result = await sequencer.place_order(order_id, details)
    except ValidationError as e:
        raise to_http_exception(e) from e
    return _transition_response(order_id, result, sequencer)


@order_router.post("/{order_id}/advance", response_model=TransitionResponse)
async def advance_order(
    order_id: str,
    body: AdvanceOrderRequest,
    sequencer: OrderWorkflowSequencer = Depends(get_sequencer),
    directory: InMemoryRecipientDirectory = Depends(get_directory),
) -> TransitionResponse:
    if body.courier_id:
        directory.register(order_id, courier_id=body.courier_id)
    try:
        result = await sequencer.advance_order(order_id, body.to_state)
    except (ValidationError, NotFoundError) as e:
        raise to_http_exception(e) from e
    return _transition_response(order_id, result, sequencer)


@order_router.get("/{order_id}", response_model=OrderStateResponse)
async def get_order(
    order_id: str,
    sequencer: OrderWorkflowSequencer = Depends(get_sequencer),
) -> OrderStateResponse:
    try:
        state = sequencer.state_of(order_id)
    except NotFoundError as e:
        raise to_http_exception(e) from e
    return OrderStateResponse(
        order_id=order_id,
        state=state.value if state else None,
        history=[s.value for s in sequencer.history_of(order_id)],
        review_reminder_pending=sequencer.has_pending_reminder(order_id),
    )
