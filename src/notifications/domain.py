"""Notifications bounded context — order-event notification dispatch core.

Turns order-lifecycle transitions into targeted, prioritized notification
records for the customer, seller and delivery courier of an order. Owns the
notification record aggregate, the per-category templates, the dispatch
engine and the per-recipient mailbox read model.
"""

import structlog
from protean.domain import Domain

notifications = Domain(name="notifications")

logger = structlog.get_logger(__name__)
