# Standard library imports
from datetime import datetime, timedelta, timezone
from typing import Tuple


def utc_now() -> datetime:
    """Current UTC time as a naive datetime, matching what Motor returns."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def to_naive_utc(value: datetime) -> datetime:
    """Normalise an aware datetime to naive UTC; naive values are assumed UTC."""
    if value.tzinfo is not None:
        return value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


def epoch_millis(value: datetime) -> int:
    return int(value.replace(tzinfo=timezone.utc).timestamp() * 1000)


def start_of_day(value: datetime) -> datetime:
    return value.replace(hour=0, minute=0, second=0, microsecond=0)


def period_bounds(period: str, now: datetime) -> Tuple[datetime, datetime]:
    """
    Resolve a named reporting period to a [start, end) window.

    today: current calendar day. week: the trailing seven days.
    month: current calendar month. Unknown names fall back to today.
    """
    if period == "week":
        return now - timedelta(days=7), now
    if period == "month":
        start = start_of_day(now).replace(day=1)
        if start.month == 12:
            end = start.replace(year=start.year + 1, month=1)
        else:
            end = start.replace(month=start.month + 1)
        return start, end
    start = start_of_day(now)
    return start, start + timedelta(days=1)
