"""Date arithmetic and formatting for instrument deadlines.

Deadlines are plain calendar-date arithmetic: no time component, no
timezone and no business-day skipping. Month and weekday names are fixed
English strings so output does not depend on the process locale.
"""

import logging
from datetime import date, datetime, timedelta

logger = logging.getLogger(__name__)

MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)

WEEKDAY_NAMES = (
    "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday",
)

ESTOPPEL_WINDOWS = (10, 28)


def parse_start_date(value: date | str) -> date:
    """Parse a start date given as a date, datetime or ISO string.

    Datetimes and timestamp strings are truncated to their calendar date,
    so a time of day never moves the start date.

    Args:
        value: Date-like value

    Returns:
        Calendar date

    Raises:
        ValueError: If a string is not an ISO date or timestamp
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return datetime.fromisoformat(value.strip()).date()


def compute_deadline(start_date: date, day_offset: int) -> date:
    """Return ``start_date`` plus ``day_offset`` calendar days."""
    return start_date + timedelta(days=day_offset)


def format_long_date(value: date) -> str:
    """Format as weekday, month name, day and year.

    Example:
        ``date(2024, 1, 11)`` -> ``"Thursday, January 11, 2024"``
    """
    return (
        f"{WEEKDAY_NAMES[value.weekday()]}, "
        f"{MONTH_NAMES[value.month - 1]} {value.day}, {value.year}"
    )


def format_short_date(value: date) -> str:
    """Format with abbreviated names, e.g. ``"Thu, Jan 11, 2024"``."""
    return (
        f"{WEEKDAY_NAMES[value.weekday()][:3]}, "
        f"{MONTH_NAMES[value.month - 1][:3]} {value.day}, {value.year}"
    )


def format_issue_date(value: date) -> str:
    """Format a header date stamp as day, month name and year (``"1 January 2024"``)."""
    return f"{value.day} {MONTH_NAMES[value.month - 1]} {value.year}"


def estoppel_deadlines(start_date: date | str) -> dict[int, str]:
    """Compute both estoppel deadlines for a start date.

    Args:
        start_date: Date the conditional acceptance was served

    Returns:
        Mapping of window length (10, 28) to the short formatted deadline
    """
    start = parse_start_date(start_date)
    deadlines = {
        window: format_short_date(compute_deadline(start, window))
        for window in ESTOPPEL_WINDOWS
    }
    logger.debug(f"Estoppel deadlines from {start.isoformat()}: {deadlines}")
    return deadlines
