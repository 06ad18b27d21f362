"""Common types and helpers shared across models."""

from datetime import datetime
from enum import StrEnum

CAPTURE_TIME_FORMAT = "%I:%M %p"
CAPTURE_DATE_FORMAT = "%m/%d/%y"


class TemperatureUnit(StrEnum):
    FAHRENHEIT = "F"
    CELSIUS = "C"


def local_now() -> datetime:
    return datetime.now().astimezone()


def format_capture_time(dt: datetime) -> str:
    """Format a capture timestamp as e.g. '03:45 pm'."""
    return dt.strftime(CAPTURE_TIME_FORMAT).lower()


def format_capture_date(dt: datetime) -> str:
    return dt.strftime(CAPTURE_DATE_FORMAT)
