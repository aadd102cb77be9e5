"""Utility helpers."""

from .datetime import WEEKDAYS, local_today, short_date_label, weekday_name

__all__ = [
    "WEEKDAYS",
    "local_today",
    "short_date_label",
    "weekday_name",
]
