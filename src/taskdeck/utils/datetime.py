"""Utilities for date handling."""

from datetime import date, datetime

WEEKDAYS = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)

MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def local_today() -> date:
    """Get the host's current local date."""
    return datetime.now().date()


def weekday_name(day: date) -> str:
    """English weekday name, independent of the host locale."""
    return WEEKDAYS[day.weekday()]


def short_date_label(day: date) -> str:
    """Short completion label, e.g. ``Feb 16``."""
    return f"{MONTHS[day.month - 1]} {day.day}"
