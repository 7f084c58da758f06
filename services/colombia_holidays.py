import datetime
import logging
import threading

_logger = logging.getLogger(__name__)

FIXED_HOLIDAYS = (
    (1, 1, 'Año Nuevo'),
    (5, 1, 'Día del Trabajo'),
    (7, 20, 'Día de la Independencia'),
    (8, 7, 'Batalla de Boyacá'),
    (12, 8, 'Inmaculada Concepción'),
    (12, 25, 'Navidad'),
)

# Ley Emiliani: observed on the following Monday.
MOVABLE_HOLIDAYS = (
    (1, 6, 'Reyes Magos'),
    (3, 19, 'San José'),
    (6, 29, 'San Pedro y San Pablo'),
    (8, 15, 'Asunción de la Virgen'),
    (10, 12, 'Día de la Raza'),
    (11, 1, 'Todos los Santos'),
    (11, 11, 'Independencia de Cartagena'),
)

# Offsets from Easter Sunday, moved to Monday.
EASTER_MOVABLE_HOLIDAYS = (
    (43, 'Ascensión del Señor'),
    (64, 'Corpus Christi'),
    (71, 'Sagrado Corazón'),
)


def easter_sunday(year):
    """Gregorian computus (Meeus/Jones/Butcher)."""
    a = year % 19
    b = year // 100
    c = year % 100
    d = b // 4
    e = b % 4
    f = (b + 8) // 25
    g = (b - f + 1) // 3
    h = (19 * a + b - d - g + 15) % 30
    i = c // 4
    k = c % 4
    l = (32 + 2 * e + 2 * i - h - k) % 7
    m = (a + 11 * h + 22 * l) // 451
    month = (h + l - 7 * m + 114) // 31
    day = ((h + l - 7 * m + 114) % 31) + 1
    return datetime.date(year, month, day)


def move_to_monday(day):
    """Returns ``day`` if it is a Monday, otherwise the following Monday."""
    # Sunday=0 numbering; the delta is 0 only on Mondays.
    weekday = (day.weekday() + 1) % 7
    if weekday == 1:
        return day
    return day + datetime.timedelta(days=(8 - weekday) % 7)


class HolidayCalendar:
    """Colombian public holidays, memoized per year.

    The cache belongs to the instance. Population happens under a lock so
    concurrent first lookups of the same year compute it once.
    """

    def __init__(self):
        self._by_year = {}
        self._lock = threading.Lock()

    def _year(self, year):
        cached = self._by_year.get(year)
        if cached is not None:
            return cached

        with self._lock:
            cached = self._by_year.get(year)
            if cached is None:
                names = self._build_year(year)
                cached = (frozenset(names), names)
                self._by_year[year] = cached
                _logger.debug("Holiday calendar %s: %d dates", year, len(names))
        return cached

    def holidays(self, year):
        return self._year(year)[0]

    def holiday_names(self, year):
        return dict(self._year(year)[1])

    def is_holiday(self, value):
        """Accepts a ``date`` or a ``datetime``; only the calendar day counts."""
        if isinstance(value, datetime.datetime):
            value = value.date()
        return value in self.holidays(value.year)

    @staticmethod
    def _build_year(year):
        names = {}

        def add(day, name):
            # Two holidays may land on the same Monday.
            names[day] = f"{names[day]} / {name}" if day in names else name

        for month, day, name in FIXED_HOLIDAYS:
            add(datetime.date(year, month, day), name)

        for month, day, name in MOVABLE_HOLIDAYS:
            add(move_to_monday(datetime.date(year, month, day)), name)

        easter = easter_sunday(year)
        add(easter - datetime.timedelta(days=3), 'Jueves Santo')
        add(easter - datetime.timedelta(days=2), 'Viernes Santo')

        for offset, name in EASTER_MOVABLE_HOLIDAYS:
            add(move_to_monday(easter + datetime.timedelta(days=offset)), name)

        return names
