from __future__ import annotations

from datetime import date, datetime

DATE_FORMAT = "%Y-%m-%d"


def format_iso_date(value: date) -> str:
    """Format a date as YYYY-MM-DD."""
    return value.strftime(DATE_FORMAT)


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can inject a fixed clock instead.
    """
    return datetime.now()
