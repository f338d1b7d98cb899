"""
Date Window

Computes the 5-day rolling window shown on the order form. The window is
centered on ``base_date + offset`` and spans two days either side.
"""

from datetime import date, datetime, timedelta
from typing import List, Union

WINDOW_SIZE = 5
CENTER_INDEX = 2


def _as_date(base_date: Union[date, datetime]) -> date:
    # datetime is a subclass of date, check it first
    if isinstance(base_date, datetime):
        return base_date.date()
    return base_date


def to_date_key(day: date) -> str:
    """Encode a calendar date as YYYY-MM-DD."""
    return f"{day.year:04d}-{day.month:02d}-{day.day:02d}"


def build_window_dates(base_date: Union[date, datetime], offset: int) -> List[date]:
    """Return the 5 calendar dates of the window, oldest first."""
    center = _as_date(base_date) + timedelta(days=offset)
    return [
        center + timedelta(days=i - CENTER_INDEX)
        for i in range(WINDOW_SIZE)
    ]


def build_window_keys(base_date: Union[date, datetime], offset: int) -> List[str]:
    """
    Build the canonical date keys for the window.

    Args:
        base_date: Session "today" (time of day is ignored)
        offset: Signed day shift applied by the back/forward buttons

    Returns:
        5 keys; index 2 is ``base_date + offset``
    """
    return [to_date_key(d) for d in build_window_dates(base_date, offset)]


def build_window_labels(base_date: Union[date, datetime], offset: int) -> List[str]:
    """Build short display labels ("Jan 15"), index-aligned with the keys."""
    return [
        f"{d.strftime('%b')} {d.day}"
        for d in build_window_dates(base_date, offset)
    ]
