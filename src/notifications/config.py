"""Runtime settings for the dispatch core, read from the environment."""

import os
from dataclasses import dataclass

DEFAULT_REVIEW_REMINDER_DELAY_SECONDS = 3600.0
DEFAULT_MAX_CONCURRENT_DISPATCHES = 50


@dataclass(frozen=True)
class DispatchSettings:
    review_reminder_delay: float = DEFAULT_REVIEW_REMINDER_DELAY_SECONDS
    max_concurrent_dispatches: int = DEFAULT_MAX_CONCURRENT_DISPATCHES

    @classmethod
    def from_env(cls) -> "DispatchSettings":
        """Build settings from ``REVIEW_REMINDER_DELAY_SECONDS`` and ``MAX_CONCURRENT_DISPATCHES``."""
        delay = float(os.getenv("REVIEW_REMINDER_DELAY_SECONDS", DEFAULT_REVIEW_REMINDER_DELAY_SECONDS))
        concurrency = int(os.getenv("MAX_CONCURRENT_DISPATCHES", DEFAULT_MAX_CONCURRENT_DISPATCHES))
        if delay < 0:
            raise ValueError("REVIEW_REMINDER_DELAY_SECONDS must not be negative")
        if concurrency < 1:
            raise ValueError("MAX_CONCURRENT_DISPATCHES must be at least 1")
        return cls(review_reminder_delay=delay, max_concurrent_dispatches=concurrency)
