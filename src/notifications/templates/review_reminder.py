"""Review reminder template — sent some time after delivery."""

from notifications.notification.payloads import ReviewReminderPayload
from notifications.notification.record import NotificationCategory


class ReviewReminderTemplate:
    category = NotificationCategory.REVIEW_REMINDER
    payload_type = ReviewReminderPayload

    @staticmethod
    def render(payload: ReviewReminderPayload) -> dict:
        return {
            "title": "Review Reminder ⭐",
            "body": f"How was your recent purchase of {payload.product_name}? Share your experience!",
        }
