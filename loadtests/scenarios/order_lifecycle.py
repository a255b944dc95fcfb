"""Order workflow load scenarios.

``OrderLifecycleUser`` walks an order through the whole happy path, which
fans out to seller, customer and courier mailboxes. ``CancellationUser``
cancels part-way through.
"""

import random

from locust import HttpUser, SequentialTaskSet, between, task

from loadtests.data_generators import place_order_data, unique_id
from loadtests.helpers.response import extract_error_detail
from loadtests.helpers.state import OrderJourneyState

HAPPY_PATH = ["confirmed", "preparing", "ready_for_pickup", "picked_up", "out_for_delivery", "delivered"]


class OrderLifecycleJourney(SequentialTaskSet):
    """Place -> confirmed -> ... -> delivered -> read the customer's mailbox."""

    def on_start(self):
        self.state = OrderJourneyState(
            order_id=unique_id("ord"),
            customer_id=unique_id("cust"),
            seller_id=unique_id("seller"),
            courier_id=unique_id("courier"),
        )

    @task
    def place_order(self):
        payload = place_order_data(self.state.customer_id, self.state.seller_id, self.state.courier_id)
        with self.client.post(
            f"/orders/{self.state.order_id}/place",
            json=payload,
            catch_response=True,
            name="POST /orders/{id}/place",
        ) as resp:
            if resp.status_code == 201:
                self.state.reached.append("pending")
            else:
                resp.failure(f"Place order failed: {resp.status_code} — {extract_error_detail(resp)}")
                self.interrupt()

    @task
    def advance_through_happy_path(self):
        for to_state in HAPPY_PATH:
            with self.client.post(
                f"/orders/{self.state.order_id}/advance",
                json={"to_state": to_state},
                catch_response=True,
                name="POST /orders/{id}/advance",
            ) as resp:
                if resp.status_code != 200:
                    resp.failure(f"Advance to {to_state} failed: {resp.status_code} — {extract_error_detail(resp)}")
                    self.interrupt()
                    return
                self.state.reached.append(to_state)

    @task
    def read_customer_mailbox(self):
        with self.client.get(
            f"/notifications/{self.state.customer_id}",
            catch_response=True,
            name="GET /notifications/{recipient_id}",
        ) as resp:
            if resp.status_code != 200:
                resp.failure(f"Mailbox read failed: {resp.status_code} — {extract_error_detail(resp)}")

    @task
    def mark_all_read(self):
        self.client.post(
            f"/notifications/{self.state.customer_id}/read-all",
            name="POST /notifications/{recipient_id}/read-all",
        )
        self.interrupt()


class CancellationJourney(SequentialTaskSet):
    """Place, advance a random number of steps, then cancel."""

    def on_start(self):
        self.state = OrderJourneyState(
            order_id=unique_id("ord"),
            customer_id=unique_id("cust"),
            seller_id=unique_id("seller"),
        )

    @task
    def place_and_advance(self):
        self.client.post(
            f"/orders/{self.state.order_id}/place",
            json=place_order_data(self.state.customer_id, self.state.seller_id),
            name="POST /orders/{id}/place",
        )
        for to_state in HAPPY_PATH[: random.randint(0, 3)]:
            self.client.post(
                f"/orders/{self.state.order_id}/advance",
                json={"to_state": to_state},
                name="POST /orders/{id}/advance",
            )

    @task
    def cancel(self):
        with self.client.post(
            f"/orders/{self.state.order_id}/advance",
            json={"to_state": "cancelled"},
            catch_response=True,
            name="POST /orders/{id}/advance [cancel]",
        ) as resp:
            if resp.status_code != 200:
                resp.failure(f"Cancel failed: {resp.status_code} — {extract_error_detail(resp)}")
        self.interrupt()


class OrderLifecycleUser(HttpUser):
    tasks = [OrderLifecycleJourney]
    wait_time = between(0.5, 2)


class CancellationUser(HttpUser):
    tasks = [CancellationJourney]
    wait_time = between(1, 3)
    weight = 1
