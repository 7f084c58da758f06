import threading
from datetime import date, datetime

from services.colombia_holidays import HolidayCalendar, easter_sunday, move_to_monday


def test_easter_sunday_known_years():
    assert easter_sunday(2019) == date(2019, 4, 21)
    assert easter_sunday(2024) == date(2024, 3, 31)
    assert easter_sunday(2025) == date(2025, 4, 20)
    assert easter_sunday(2026) == date(2026, 4, 5)


def test_move_to_monday_keeps_mondays_and_never_skips_a_week():
    assert move_to_monday(date(2025, 1, 6)) == date(2025, 1, 6)   # Monday
    assert move_to_monday(date(2025, 1, 5)) == date(2025, 1, 6)   # Sunday
    assert move_to_monday(date(2025, 1, 4)) == date(2025, 1, 6)   # Saturday
    assert move_to_monday(date(2025, 1, 7)) == date(2025, 1, 13)  # Tuesday


def test_holidays_2025(calendar):
    expected = {
        date(2025, 1, 1), date(2025, 1, 6), date(2025, 3, 24),
        date(2025, 4, 17), date(2025, 4, 18), date(2025, 5, 1),
        date(2025, 6, 2), date(2025, 6, 23), date(2025, 6, 30),
        date(2025, 7, 20), date(2025, 8, 7), date(2025, 8, 18),
        date(2025, 10, 13), date(2025, 11, 3), date(2025, 11, 17),
        date(2025, 12, 8), date(2025, 12, 25),
    }
    assert calendar.holidays(2025) == expected


def test_holidays_2026_easter_based(calendar):
    holidays = calendar.holidays(2026)
    assert date(2026, 1, 12) in holidays   # Reyes, moved from Tuesday
    assert date(2026, 4, 2) in holidays    # Jueves Santo
    assert date(2026, 4, 3) in holidays    # Viernes Santo
    assert date(2026, 5, 18) in holidays   # Ascensión
    assert date(2026, 6, 8) in holidays    # Corpus Christi
    assert date(2026, 6, 15) in holidays   # Sagrado Corazón
    assert date(2026, 1, 6) not in holidays


def test_coinciding_holidays_share_a_name(calendar):
    names = calendar.holiday_names(2025)
    assert 'San Pedro y San Pablo' in names[date(2025, 6, 30)]
    assert 'Sagrado Corazón' in names[date(2025, 6, 30)]
    assert names[date(2025, 12, 25)] == 'Navidad'


def test_is_holiday_accepts_datetimes(calendar):
    assert calendar.is_holiday(datetime(2025, 6, 2, 23, 30))
    assert calendar.is_holiday(date(2025, 7, 20))
    assert not calendar.is_holiday(datetime(2025, 6, 3, 0, 30))


def test_cache_is_per_instance_and_stable():
    calendar = HolidayCalendar()
    first = calendar.holidays(2027)
    assert calendar.holidays(2027) is first
    assert HolidayCalendar().holidays(2027) == first

    names = calendar.holiday_names(2027)
    names.clear()
    assert calendar.holiday_names(2027)


def test_concurrent_first_lookup_gives_identical_sets():
    calendar = HolidayCalendar()
    results = []

    def lookup():
        results.append(calendar.holidays(2030))

    threads = [threading.Thread(target=lookup) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(results) == 8
    assert all(r == results[0] for r in results)
