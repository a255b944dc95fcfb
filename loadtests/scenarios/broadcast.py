"""Direct dispatch load scenarios — seller stock alerts and bulk flash sales."""

from locust import HttpUser, between, task

from loadtests.data_generators import flash_sale_data, stock_alert_data, unique_id
from loadtests.helpers.response import extract_error_detail


class BroadcastUser(HttpUser):
    """Fires stock alerts at one seller and flash sales at a batch of customers."""

    wait_time = between(0.2, 1)

    def on_start(self):
        self.seller_id = unique_id("seller")
        self.audience = [unique_id("cust") for _ in range(25)]

    @task(3)
    def stock_alert(self):
        with self.client.post(
            "/notifications/dispatch",
            json=stock_alert_data(self.seller_id),
            catch_response=True,
            name="POST /notifications/dispatch",
        ) as resp:
            if resp.status_code != 201:
                resp.failure(f"Dispatch failed: {resp.status_code} — {extract_error_detail(resp)}")

    @task(1)
    def flash_sale(self):
        with self.client.post(
            "/notifications/dispatch/bulk",
            json=flash_sale_data(self.audience),
            catch_response=True,
            name="POST /notifications/dispatch/bulk",
        ) as resp:
            if resp.status_code != 200:
                resp.failure(f"Bulk dispatch failed: {resp.status_code} — {extract_error_detail(resp)}")
            elif resp.json()["failed"]:
                resp.failure(f"Bulk dispatch partially failed: {resp.json()}")

    @task(2)
    def seller_counts(self):
        self.client.get(f"/notifications/{self.seller_id}/counts", name="GET /notifications/{recipient_id}/counts")
