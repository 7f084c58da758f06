import datetime
import logging
import re

from domain import ShiftType

_logger = logging.getLogger(__name__)

# (start hour, end hour, end day offset)
FIXED_WINDOWS = {
    ShiftType.MORNING: (5, 13, 0),
    ShiftType.AFTERNOON: (13, 21, 0),
    ShiftType.NIGHT: (21, 5, 1),
}

_HHMM = re.compile(r'^\s*(\d{1,2}):(\d{1,2})\s*$')


def parse_hhmm(value):
    """'HH:MM' -> minutes since midnight, or None if unparseable/out of range."""
    if not value:
        return None
    match = _HHMM.match(str(value))
    if not match:
        return None
    hours, minutes = int(match.group(1)), int(match.group(2))
    if hours > 23 or minutes > 59:
        return None
    return hours * 60 + minutes


def fixed_window(day, shift):
    """Start/end instants of a morning, afternoon or night shift on ``day``."""
    start_hour, end_hour, end_offset = FIXED_WINDOWS[ShiftType(shift)]
    base = datetime.datetime.combine(day, datetime.time())
    start = base + datetime.timedelta(hours=start_hour)
    end = base + datetime.timedelta(days=end_offset, hours=end_hour)
    return start, end


def additional_window(day, time_range):
    """Window of an additional shift, or None when the range can't be parsed.

    An end at or before the start rolls over to the next day.
    """
    if time_range is None:
        return None
    start_minutes = parse_hhmm(time_range.start)
    end_minutes = parse_hhmm(time_range.end)
    if start_minutes is None or end_minutes is None:
        _logger.debug("Unparseable additional range %r on %s", time_range, day)
        return None

    base = datetime.datetime.combine(day, datetime.time())
    start = base + datetime.timedelta(minutes=start_minutes)
    end = base + datetime.timedelta(minutes=end_minutes)
    if end <= start:
        end += datetime.timedelta(days=1)
    return start, end


def resolve_window(day, shift, time_range=None):
    if ShiftType(shift) is ShiftType.ADDITIONAL:
        return additional_window(day, time_range)
    return fixed_window(day, shift)
