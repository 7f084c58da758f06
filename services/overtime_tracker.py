import datetime

DEFAULT_WEEKLY_LIMIT = 44


def week_start(value):
    """Monday of the ISO week containing ``value`` (date or datetime)."""
    if isinstance(value, datetime.datetime):
        value = value.date()
    return value - datetime.timedelta(days=value.weekday())


def week_bounds(value):
    monday = week_start(value)
    return monday, monday + datetime.timedelta(days=6)


def merge_fetch_window(dates):
    """Date range of already recorded shifts that share a week with ``dates``.

    Callers load the shifts in this range and pass them as ``existing``
    inputs to the merge calculation.
    """
    if not dates:
        return None
    return week_bounds(min(dates))[0], week_bounds(max(dates))[1]


class WeeklyOvertimeTracker:
    """Ordinary hours consumed per ISO week within one calculation batch.

    Hours must be fed in ascending chronological order. Once a week reaches
    ``limit`` ordinary hours every later hour of that week is overtime.
    """

    def __init__(self, limit=DEFAULT_WEEKLY_LIMIT):
        self.limit = limit
        self._used = {}

    def used(self, value):
        return self._used.get(week_start(value), 0)

    def consume(self, instant, hours=1):
        """Books ``hours`` at ``instant``; returns True if they are overtime."""
        key = week_start(instant)
        used = self._used.get(key, 0)
        if used >= self.limit:
            return True
        self._used[key] = used + hours
        return False
