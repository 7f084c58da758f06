from datetime import date, datetime

import pytest

from services.premium_table import premium, sunday_holiday_rate


@pytest.mark.parametrize("day, rate", [
    (date(2025, 6, 30), 0.75),
    (date(2025, 7, 1), 0.80),
    (date(2026, 6, 30), 0.80),
    (date(2026, 7, 1), 0.90),
    (date(2027, 6, 30), 0.90),
    (date(2027, 7, 1), 1.00),
    (date(2031, 1, 1), 1.00),
])
def test_sunday_holiday_rate_schedule(day, rate):
    assert sunday_holiday_rate(day) == rate


def test_sunday_holiday_rate_uses_the_calendar_day_of_datetimes():
    assert sunday_holiday_rate(datetime(2025, 6, 30, 23, 0)) == 0.75
    assert sunday_holiday_rate(datetime(2025, 7, 1, 0, 0)) == 0.80


@pytest.mark.parametrize("night, sunday, expected", [
    (True, True, 1.5),
    (False, True, 1.0),
    (True, False, 0.75),
    (False, False, 0.25),
])
def test_overtime_premiums_do_not_depend_on_date(night, sunday, expected):
    assert premium(date(2024, 1, 1), True, night, sunday) == pytest.approx(expected)
    assert premium(date(2028, 1, 1), True, night, sunday) == pytest.approx(expected)


def test_ordinary_premiums():
    day = date(2026, 8, 2)
    assert premium(day, False, False, False) == 0
    assert premium(day, False, True, False) == pytest.approx(0.35)
    assert premium(day, False, False, True) == pytest.approx(0.90)
    assert premium(day, False, True, True) == pytest.approx(1.25)
    assert premium(date(2025, 1, 5), False, True, True) == pytest.approx(1.10)
