"""Error taxonomy for notification dispatch and order sequencing.

Validation failures build on Protean's ``ValidationError`` so they carry a
``messages`` dict keyed by the offending field. Lookup failures build on
``ObjectNotFoundError`` and carry the same kind of ``messages`` dict. Store outages are their own type because callers
treat them differently from bad input.
"""

from protean.exceptions import ObjectNotFoundError, ValidationError


class InvalidCategoryError(ValidationError):
    """The category is not a member of the closed notification category set."""

    def __init__(self, category):
        self.category = category
        super().__init__({"category": [f"Unknown notification category: {category}"]})


class MissingFieldError(ValidationError):
    """A payload field required by the category template is missing or empty."""

    def __init__(self, field):
        self.field = field
        super().__init__({field: ["is required"]})


class InvalidTransitionError(ValidationError):
    """An order was asked to move to a state its current state cannot reach."""

    def __init__(self, order_id, from_state, to_state):
        self.order_id = order_id
        self.from_state = from_state
        self.to_state = to_state
        super().__init__({"status": [f"Cannot transition order {order_id} from {from_state} to {to_state}"]})


class NotFoundError(ObjectNotFoundError):
    """A notification record or order does not exist."""

    def __init__(self, kind, identifier):
        self.kind = kind
        self.identifier = identifier
        messages = {kind: [f"{identifier} not found"]}
        super().__init__(messages)
        self.messages = messages


class UnknownRecipientError(ObjectNotFoundError):
    """The recipient directory has no mapping for an order and role."""

    def __init__(self, order_id, role):
        self.order_id = order_id
        self.role = role
        messages = {"recipient": [f"No {role} mapped for order {order_id}"]}
        super().__init__(messages)
        self.messages = messages


class StoreUnavailableError(Exception):
    """The notification record store could not be reached."""
