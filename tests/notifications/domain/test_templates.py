"""Tests for notification templates — rendering and registry."""

import pytest
from notifications.errors import InvalidCategoryError
from notifications.notification.payloads import (
    DeliveryAssignedPayload,
    FlashSalePayload,
    OrderUpdatePayload,
    PaymentFailedPayload,
    PaymentSuccessPayload,
    PriceDropPayload,
    ReviewReminderPayload,
    StockAlertPayload,
)
from notifications.notification.record import NotificationCategory
from notifications.templates import TEMPLATE_REGISTRY, get_template
from notifications.templates.formatting import format_amount
from notifications.templates.order_update import OrderUpdateTemplate


# ---------------------------------------------------------------
# Template registry
# ---------------------------------------------------------------
class TestTemplateRegistry:
    def test_every_category_has_a_template(self):
        for category in NotificationCategory:
            assert category in TEMPLATE_REGISTRY, f"Missing template for {category.value}"

    def test_templates_know_their_category(self):
        for category, template in TEMPLATE_REGISTRY.items():
            assert template.category == category

    def test_get_template_returns_correct_class(self):
        assert get_template(NotificationCategory.ORDER_UPDATE) is OrderUpdateTemplate

    def test_get_template_unknown_category_raises(self):
        with pytest.raises(InvalidCategoryError):
            get_template("carrier_pigeon")


class TestFormatAmount:
    def test_integral_float_drops_decimal(self):
        assert format_amount(450.0) == "450"

    def test_thousands_separator(self):
        assert format_amount(12500) == "12,500"

    def test_fraction_kept(self):
        assert format_amount(1299.5) == "1,299.5"


# ---------------------------------------------------------------
# Order update
# ---------------------------------------------------------------
class TestOrderUpdateTemplate:
    def test_new_order_for_seller(self):
        result = OrderUpdateTemplate.render(
            OrderUpdatePayload(order_id="ord-1", status="pending", amount=450.0, customer_name="Asha")
        )
        assert result["title"] == "New Order Received! 📦"
        assert result["body"] == "You have received a new order #ord-1 worth ₹450 from Asha."

    def test_confirmed(self):
        result = OrderUpdateTemplate.render(OrderUpdatePayload(order_id="ord-1", status="confirmed"))
        assert result["title"] == "Order Confirmed! 🎉"
        assert result["body"] == "Your order #ord-1 has been confirmed and is being prepared."

    def test_status_title_uses_spaces_and_emoji(self):
        result = OrderUpdateTemplate.render(OrderUpdatePayload(order_id="ord-1", status="out_for_delivery"))
        assert result["title"] == "Order OUT FOR DELIVERY 🛵"
        assert result["body"] == "Your order is out for delivery!"

    def test_ready_for_pickup_replaces_every_underscore(self):
        result = OrderUpdateTemplate.render(OrderUpdatePayload(order_id="ord-1", status="ready_for_pickup"))
        assert result["title"] == "Order READY FOR PICKUP 📦"

    def test_message_overrides_default_body(self):
        result = OrderUpdateTemplate.render(
            OrderUpdatePayload(order_id="ord-1", status="preparing", message="Chef is on it")
        )
        assert result["body"] == "Chef is on it"

    def test_delivered(self):
        result = OrderUpdateTemplate.render(OrderUpdatePayload(order_id="ord-1", status="delivered"))
        assert result["title"] == "Order DELIVERED ✅"
        assert result["body"] == "Your order has been delivered successfully! 🎉"

    def test_cancelled_mentions_order(self):
        result = OrderUpdateTemplate.render(OrderUpdatePayload(order_id="ord-9", status="cancelled"))
        assert result["title"] == "Order CANCELLED ❌"
        assert result["body"] == "Order #ord-9 has been cancelled."

    def test_unknown_status_has_no_trailing_space(self):
        result = OrderUpdateTemplate.render(OrderUpdatePayload(order_id="ord-1", status="on_hold"))
        assert result["title"] == "Order ON HOLD"


# ---------------------------------------------------------------
# Remaining categories
# ---------------------------------------------------------------
class TestCategoryTemplates:
    def test_delivery_assigned(self):
        result = get_template(NotificationCategory.DELIVERY_ASSIGNED).render(
            DeliveryAssignedPayload(order_id="ord-1", pickup_address="12 MG Road", distance=3.5)
        )
        assert result["title"] == "New Delivery Assigned 🛵"
        assert result["body"] == "New delivery assigned! Pickup from 12 MG Road. Distance: 3.5km"

    def test_stock_alert(self):
        result = get_template(NotificationCategory.STOCK_ALERT).render(
            StockAlertPayload(product_name="Masala Chai", current_stock=3)
        )
        assert result["title"] == "Low Stock Alert! ⚠️"
        assert result["body"] == "Masala Chai is running low on stock. Only 3 units remaining."

    def test_flash_sale(self):
        result = get_template(NotificationCategory.FLASH_SALE).render(
            FlashSalePayload(product_name="Masala Chai", discount=30)
        )
        assert result["title"] == "Flash Sale Alert! ⚡"
        assert result["body"] == "Masala Chai is now 30% off! Limited time offer."

    def test_price_drop(self):
        result = get_template(NotificationCategory.PRICE_DROP).render(
            PriceDropPayload(product_name="Masala Chai", old_price=120, new_price=99)
        )
        assert result["title"] == "Price Drop Alert 📉"
        assert result["body"] == "Masala Chai price dropped by ₹21! Now available for ₹99"

    def test_review_reminder(self):
        result = get_template(NotificationCategory.REVIEW_REMINDER).render(
            ReviewReminderPayload(order_id="ord-1", product_name="Masala Chai")
        )
        assert result["title"] == "Review Reminder ⭐"
        assert result["body"] == "How was your recent purchase of Masala Chai? Share your experience!"

    def test_payment_success(self):
        result = get_template(NotificationCategory.PAYMENT_SUCCESS).render(
            PaymentSuccessPayload(order_id="ord-1", amount=1299.0, payment_method="UPI")
        )
        assert result["title"] == "Payment Successful! 💳"
        assert result["body"] == "Payment of ₹1,299 for order #ord-1 was successful via UPI."

    def test_payment_failed(self):
        result = get_template(NotificationCategory.PAYMENT_FAILED).render(
            PaymentFailedPayload(order_id="ord-1", amount=450, reason="Card declined")
        )
        assert result["title"] == "Payment Failed ❌"
        assert result["body"] == "Payment of ₹450 for order #ord-1 failed. Card declined"
