import pytest
from ordering.workflow.sequencer import OrderDetails, OrderWorkflowSequencer

REMINDER_DELAY = 0.02


@pytest.fixture
def details():
    return OrderDetails(
        customer_name="Asha",
        product_name="Masala Chai",
        order_total=450.0,
        pickup_address="12 MG Road",
        distance_km=3.5,
        delivery_fee=40.0,
    )


@pytest.fixture
def sequencer(engine, clock):
    return OrderWorkflowSequencer(engine, review_reminder_delay=REMINDER_DELAY, clock=clock)
