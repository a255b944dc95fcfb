"""Per-user journey state carried between sequential Locust tasks."""

from dataclasses import dataclass, field


@dataclass
class OrderJourneyState:
    order_id: str = ""
    customer_id: str = ""
    seller_id: str = ""
    courier_id: str = ""
    reached: list[str] = field(default_factory=list)
