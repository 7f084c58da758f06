"""Legal premium percentages (recargos) for Colombian working hours.

Overtime and night premiums come from the DIAN concept table in
``Config.PORCENTAJES_EXTRA``. The ordinary Sunday/holiday premium rises
in steps (Ley 2466 de 2025), so it is looked up by the calendar date of
the hour being paid.
"""
import bisect
import datetime

from config import Config

# (effective from, rate); half-open intervals, lower bound inclusive.
SUNDAY_HOLIDAY_RATE_SCHEDULE = (
    (datetime.date(2025, 7, 1), 0.80),
    (datetime.date(2026, 7, 1), 0.90),
    (datetime.date(2027, 7, 1), 1.00),
)
SUNDAY_HOLIDAY_BASE_RATE = 0.75

_SCHEDULE_DATES = [effective for effective, _ in SUNDAY_HOLIDAY_RATE_SCHEDULE]


def _pct(code):
    return Config.PORCENTAJES_EXTRA[code] / 100


def sunday_holiday_rate(value):
    if isinstance(value, datetime.datetime):
        value = value.date()
    index = bisect.bisect_right(_SCHEDULE_DATES, value)
    if index == 0:
        return SUNDAY_HOLIDAY_BASE_RATE
    return SUNDAY_HOLIDAY_RATE_SCHEDULE[index - 1][1]


def premium(value, is_overtime, is_night, is_sunday_or_holiday):
    """Premium over the hourly rate, as a fraction (0.35 == 35%)."""
    if is_overtime:
        if is_sunday_or_holiday and is_night:
            return _pct('HENDF')
        if is_sunday_or_holiday:
            return _pct('HEDDF')
        if is_night:
            return _pct('HEN')
        return _pct('HED')

    if is_sunday_or_holiday and is_night:
        return sunday_holiday_rate(value) + _pct('HRN')
    if is_sunday_or_holiday:
        return sunday_holiday_rate(value)
    if is_night:
        return _pct('HRN')
    return 0.0
