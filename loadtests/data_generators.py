"""Faker-based data generators for Locust load test scenarios.

Each generator produces payloads that pass the API's Pydantic request
schemas and the builder's payload validation.
"""

import random
import uuid

from faker import Faker

fake = Faker("en_IN")

PRODUCTS = ["Masala Chai", "Paneer Tikka", "Filter Coffee", "Veg Biryani", "Gulab Jamun", "Mango Lassi"]


def unique_id(prefix: str) -> str:
    """Generate unique ids like 'cust-lt-a1b2c3d4'."""
    return f"{prefix}-lt-{uuid.uuid4().hex[:8]}"


def place_order_data(customer_id: str, seller_id: str, courier_id: str | None = None) -> dict:
    return {
        "customer_id": customer_id,
        "seller_id": seller_id,
        "courier_id": courier_id,
        "customer_name": fake.first_name(),
        "product_name": random.choice(PRODUCTS),
        "order_total": round(random.uniform(99, 2500), 2),
        "pickup_address": fake.street_address(),
        "distance_km": round(random.uniform(0.5, 12), 1),
        "delivery_fee": random.choice([0, 20, 40]),
    }


def stock_alert_data(seller_id: str) -> dict:
    return {
        "category": "stock_alert",
        "recipient_id": seller_id,
        "payload": {"product_name": random.choice(PRODUCTS), "current_stock": random.randint(0, 30)},
    }


def flash_sale_data(recipient_ids: list[str]) -> dict:
    return {
        "category": "flash_sale",
        "recipient_ids": recipient_ids,
        "payload": {"product_name": random.choice(PRODUCTS), "discount": random.choice([10, 20, 30, 50])},
    }
