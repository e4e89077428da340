"""Aggregate application use cases."""

from .notifications import refresh_notifications

__all__ = ["refresh_notifications"]
