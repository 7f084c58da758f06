from datetime import date, datetime, timedelta

from services.overtime_tracker import (WeeklyOvertimeTracker, merge_fetch_window,
                                       week_bounds, week_start)


def test_week_start_is_monday():
    assert week_start(date(2025, 1, 12)) == date(2025, 1, 6)    # Sunday
    assert week_start(date(2025, 1, 6)) == date(2025, 1, 6)
    assert week_start(datetime(2025, 1, 8, 23)) == date(2025, 1, 6)


def test_week_bounds():
    assert week_bounds(date(2025, 1, 8)) == (date(2025, 1, 6), date(2025, 1, 12))


def test_merge_fetch_window_covers_whole_weeks():
    dates = [date(2025, 1, 15), date(2025, 1, 8)]
    assert merge_fetch_window(dates) == (date(2025, 1, 6), date(2025, 1, 19))
    assert merge_fetch_window([]) is None


def test_hours_become_overtime_after_the_limit():
    tracker = WeeklyOvertimeTracker(limit=3)
    start = datetime(2025, 1, 6, 8)
    flags = [tracker.consume(start + timedelta(hours=h)) for h in range(5)]
    assert flags == [False, False, False, True, True]
    assert tracker.used(start) == 3


def test_limit_resets_on_monday():
    tracker = WeeklyOvertimeTracker(limit=1)
    assert tracker.consume(datetime(2025, 1, 12, 22)) is False
    assert tracker.consume(datetime(2025, 1, 12, 23)) is True
    assert tracker.consume(datetime(2025, 1, 13, 0)) is False


def test_fractional_consumption():
    tracker = WeeklyOvertimeTracker(limit=1)
    at = datetime(2025, 1, 7, 10)
    assert tracker.consume(at, 0.75) is False
    assert tracker.consume(at, 0.75) is False
    assert tracker.consume(at, 0.75) is True
