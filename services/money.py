import datetime
import math

from config import Config


def round_cop(value):
    """Nearest whole peso, halves rounded up."""
    return int(math.floor(value + 0.5))


def format_cop(value):
    """'$ 1.234.567' with es-CO thousands separators."""
    amount = round_cop(value)
    sign = '-' if amount < 0 else ''
    return f"{sign}$ {abs(amount):,}".replace(',', '.')


def monthly_ordinary_hours(weekly_hours=None):
    if weekly_hours is None:
        weekly_hours = Config.WEEKLY_HOURS
    return weekly_hours * 52 / 12


def hourly_rate_from_salary(base_salary, weekly_hours=None):
    return base_salary / monthly_ordinary_hours(weekly_hours)


def enumerate_dates(start, end):
    """Every date from ``start`` to ``end``, both inclusive."""
    days = []
    current = start
    while current <= end:
        days.append(current)
        current += datetime.timedelta(days=1)
    return days


def month_bounds(month):
    """'YYYY-MM' -> (first day, last day)."""
    year, month_number = (int(part) for part in month.split('-')[:2])
    first = datetime.date(year, month_number, 1)
    if month_number == 12:
        next_first = datetime.date(year + 1, 1, 1)
    else:
        next_first = datetime.date(year, month_number + 1, 1)
    return first, next_first - datetime.timedelta(days=1)
