import datetime

from services.colombia_holidays import HolidayCalendar

# Ley 2466 de 2025: night work starts at 19:00 from this date on.
NOCTURNAL_19_START = datetime.date(2025, 12, 25)
NOCTURNAL_END_HOUR = 6


def _as_date(value):
    if isinstance(value, datetime.datetime):
        return value.date()
    return value


def nocturnal_start_hour(value):
    return 19 if _as_date(value) >= NOCTURNAL_19_START else 21


class HourClassifier:
    """Labels instants as night and/or Sunday-or-holiday."""

    def __init__(self, calendar=None):
        self.calendar = calendar or HolidayCalendar()

    def is_night(self, instant):
        hour = instant.hour
        return hour >= nocturnal_start_hour(instant) or hour < NOCTURNAL_END_HOUR

    def is_sunday_or_holiday(self, instant):
        day = _as_date(instant)
        return day.weekday() == 6 or self.calendar.is_holiday(day)

    def classify(self, instant):
        """Returns ``(is_night, is_sunday_or_holiday)``."""
        return self.is_night(instant), self.is_sunday_or_holiday(instant)
