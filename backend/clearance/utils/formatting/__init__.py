"""Formatting utilities."""

from .datetime import utc_now

__all__ = [
    "utc_now",
]
