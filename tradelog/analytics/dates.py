"""Date helpers shared by the analytics functions.

Day ids are ``YYYY-MM-DD`` strings. They are parsed component-wise into naive
calendar dates so weekday and month derivations never depend on the host
timezone.
"""

from datetime import date, timedelta

from tradelog.models import DayEntry

WEEKDAY_NAMES = [
    "Sunday",
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
]


def parse_entry_date(entry_id: str) -> date:
    """Parse a ``YYYY-MM-DD`` day id into a calendar date."""
    year, month, day = (int(part) for part in entry_id.split("-"))
    return date(year, month, day)


def weekday_index(day: date) -> int:
    """Weekday index with Sunday as 0 and Saturday as 6."""
    return day.isoweekday() % 7


def week_bounds(day: date) -> tuple[date, date]:
    """Return the Sunday-to-Saturday week containing ``day``."""
    start = day - timedelta(days=weekday_index(day))
    return start, start + timedelta(days=6)


def month_key(day: date) -> str:
    """Format a date as a ``YYYY-MM`` month key."""
    return f"{day.year:04d}-{day.month:02d}"


def sort_chronologically(
    entries: list[DayEntry], reverse: bool = False
) -> list[DayEntry]:
    """Return a new list of entries ordered by id."""
    return sorted(entries, key=lambda entry: entry.id, reverse=reverse)
