"""Pydantic request/response schemas for the Ordering API.

These are external contracts (anti-corruption layer) — separate from the
workflow sequencer's own types.
"""

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Request Schemas
# ---------------------------------------------------------------------------
class PlaceOrderRequest(BaseModel):
    customer_id: str = Field(..., min_length=1)
    seller_id: str = Field(..., min_length=1)
    courier_id: str | None = None
    customer_name: str = Field(..., min_length=1)
    product_name: str = Field(..., min_length=1)
    order_total: float = Field(ge=0)
    pickup_address: str = ""
    distance_km: float = Field(ge=0, default=0.0)
    delivery_fee: float = Field(ge=0, default=0.0)

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "customer_id": "cust-001",
                    "seller_id": "seller-001",
                    "customer_name": "Asha",
                    "product_name": "Masala Chai",
                    "order_total": 450.0,
                    "pickup_address": "12 MG Road",
                    "distance_km": 3.5,
                    "delivery_fee": 40.0,
                }
            ]
        }
    }


class AdvanceOrderRequest(BaseModel):
    to_state: str = Field(..., examples=["confirmed"])
    courier_id: str | None = Field(None, description="Courier assigned with this transition")


# ---------------------------------------------------------------------------
# Response Schemas
# ---------------------------------------------------------------------------
class TransitionResponse(BaseModel):
    order_id: str
    changed: bool
    state: str
    notified: int = 0
    failed: int = 0


class OrderStateResponse(BaseModel):
    order_id: str
    state: str | None = None
    history: list[str] = []
    review_reminder_pending: bool = False
