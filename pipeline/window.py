"""
Fetch window: a signed day offset from today, at most MAX_WINDOW_DAYS either way.
"""
from datetime import date, timedelta

from errors import FetchWindowError

MAX_WINDOW_DAYS = 7
NASA_DATE_FORMAT = "%Y-%m-%d"


def validate_offset(offset: int) -> None:
    if offset > MAX_WINDOW_DAYS or offset < -MAX_WINDOW_DAYS:
        raise FetchWindowError(offset)


def date_span(offset: int, today: date) -> tuple[str, str]:
    """Return (start_date, end_date) as YYYY-MM-DD: [today, today+offset] or [today+offset, today]."""
    validate_offset(offset)
    other = today + timedelta(days=offset)
    if offset >= 0:
        start, end = today, other
    else:
        start, end = other, today
    return start.strftime(NASA_DATE_FORMAT), end.strftime(NASA_DATE_FORMAT)
