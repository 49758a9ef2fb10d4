"""
Unit tests for swachhta_prahari.core.time_utils
"""
from datetime import datetime, timedelta, timezone

from swachhta_prahari.core.time_utils import (
    to_naive_utc,
    epoch_millis,
    start_of_day,
    period_bounds,
)


class TestToNaiveUtc:
    def test_aware_value_converted(self):
        ist = timezone(timedelta(hours=5, minutes=30))
        value = datetime(2025, 1, 10, 13, 30, tzinfo=ist)
        assert to_naive_utc(value) == datetime(2025, 1, 10, 8, 0)

    def test_naive_value_unchanged(self):
        value = datetime(2025, 1, 10, 8, 0)
        assert to_naive_utc(value) is value


def test_epoch_millis():
    assert epoch_millis(datetime(1970, 1, 1, 0, 0, 1)) == 1000


def test_start_of_day():
    assert start_of_day(datetime(2025, 1, 10, 17, 45, 3, 99)) == datetime(2025, 1, 10)


class TestPeriodBounds:
    now = datetime(2025, 12, 15, 10, 0)

    def test_today(self):
        assert period_bounds("today", self.now) == (datetime(2025, 12, 15), datetime(2025, 12, 16))

    def test_week_is_trailing_seven_days(self):
        assert period_bounds("week", self.now) == (datetime(2025, 12, 8, 10, 0), self.now)

    def test_month_rolls_over_year(self):
        assert period_bounds("month", self.now) == (datetime(2025, 12, 1), datetime(2026, 1, 1))

    def test_unknown_falls_back_to_today(self):
        assert period_bounds("fortnight", self.now)[0] == datetime(2025, 12, 15)
