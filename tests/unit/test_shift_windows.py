from datetime import date, datetime

import pytest

from domain import AdditionalTimeRange, ShiftType
from services.shift_windows import additional_window, fixed_window, parse_hhmm, resolve_window


@pytest.mark.parametrize("shift, start, end", [
    (ShiftType.MORNING, datetime(2025, 3, 4, 5), datetime(2025, 3, 4, 13)),
    (ShiftType.AFTERNOON, datetime(2025, 3, 4, 13), datetime(2025, 3, 4, 21)),
    (ShiftType.NIGHT, datetime(2025, 3, 4, 21), datetime(2025, 3, 5, 5)),
])
def test_fixed_windows(shift, start, end):
    assert fixed_window(date(2025, 3, 4), shift) == (start, end)


def test_fixed_window_accepts_codes():
    assert fixed_window(date(2025, 3, 4), 'noche')[1] == datetime(2025, 3, 5, 5)


@pytest.mark.parametrize("value, expected", [
    ('00:00', 0),
    ('7:05', 425),
    ('23:59', 1439),
    ('24:00', None),
    ('12:60', None),
    ('18', None),
    ('ab:cd', None),
    ('', None),
    (None, None),
])
def test_parse_hhmm(value, expected):
    assert parse_hhmm(value) == expected


def test_additional_window_same_day():
    window = additional_window(date(2025, 1, 6), AdditionalTimeRange('18:00', '20:00'))
    assert window == (datetime(2025, 1, 6, 18), datetime(2025, 1, 6, 20))


def test_additional_window_rolls_over_midnight():
    window = additional_window(date(2025, 1, 6), AdditionalTimeRange('22:00', '02:00'))
    assert window == (datetime(2025, 1, 6, 22), datetime(2025, 1, 7, 2))


def test_additional_window_equal_times_is_a_full_day():
    start, end = additional_window(date(2025, 1, 6), AdditionalTimeRange('08:00', '08:00'))
    assert (end - start).total_seconds() == 24 * 3600


def test_unparseable_additional_window_is_none():
    assert additional_window(date(2025, 1, 6), AdditionalTimeRange('25:00', '02:00')) is None
    assert additional_window(date(2025, 1, 6), None) is None
    assert resolve_window(date(2025, 1, 6), ShiftType.ADDITIONAL) is None


def test_resolve_window_dispatches_on_shift_type():
    assert resolve_window(date(2025, 1, 6), ShiftType.MORNING) == \
        (datetime(2025, 1, 6, 5), datetime(2025, 1, 6, 13))
    assert resolve_window(date(2025, 1, 6), ShiftType.ADDITIONAL,
                          AdditionalTimeRange('10:00', '12:00'))[0] == datetime(2025, 1, 6, 10)
