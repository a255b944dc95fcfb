"""Template registry — maps NotificationCategory to template classes.

Each template knows its payload type and how to render a title and body
from a validated payload.
"""

from notifications.errors import InvalidCategoryError
from notifications.notification.record import NotificationCategory
from notifications.templates.delivery_assigned import DeliveryAssignedTemplate
from notifications.templates.flash_sale import FlashSaleTemplate
from notifications.templates.order_update import OrderUpdateTemplate
from notifications.templates.payment_failed import PaymentFailedTemplate
from notifications.templates.payment_success import PaymentSuccessTemplate
from notifications.templates.price_drop import PriceDropTemplate
from notifications.templates.review_reminder import ReviewReminderTemplate
from notifications.templates.stock_alert import StockAlertTemplate

TEMPLATE_REGISTRY: dict[NotificationCategory, type] = {
    NotificationCategory.ORDER_UPDATE: OrderUpdateTemplate,
    NotificationCategory.DELIVERY_ASSIGNED: DeliveryAssignedTemplate,
    NotificationCategory.FLASH_SALE: FlashSaleTemplate,
    NotificationCategory.PRICE_DROP: PriceDropTemplate,
    NotificationCategory.REVIEW_REMINDER: ReviewReminderTemplate,
    NotificationCategory.STOCK_ALERT: StockAlertTemplate,
    NotificationCategory.PAYMENT_SUCCESS: PaymentSuccessTemplate,
    NotificationCategory.PAYMENT_FAILED: PaymentFailedTemplate,
}


def get_template(category: NotificationCategory):
    """Look up a template class by category."""
    template_cls = TEMPLATE_REGISTRY.get(category)
    if template_cls is None:
        raise InvalidCategoryError(category)
    return template_cls
