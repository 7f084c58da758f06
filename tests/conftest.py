import datetime

import pytest

from domain import MonthSummaryConfig, MonthSummaryEntry, NoveltyType, ShiftCalcBreakdown
from services.colombia_holidays import HolidayCalendar
from services.colombia_payroll_engine import ColombiaPayrollEngine


@pytest.fixture
def calendar():
    return HolidayCalendar()


@pytest.fixture
def engine(calendar):
    return ColombiaPayrollEngine(calendar=calendar, weekly_limit=44)


@pytest.fixture
def hourly_rate():
    return 1000


@pytest.fixture
def summary_config():
    def build(**overrides):
        values = {
            'month': '2025-03',
            'base_salary': 1000000,
            'smmlv': 1000000,
            'transport_allowance': 200000,
        }
        values.update(overrides)
        return MonthSummaryConfig(**values)
    return build


@pytest.fixture
def make_entry():
    def build(day, total_pay, novelty=NoveltyType.NORMAL, **hours):
        breakdown = ShiftCalcBreakdown(base_pay=total_pay, total_pay=total_pay, **hours)
        if isinstance(day, str):
            day = datetime.date.fromisoformat(day)
        return MonthSummaryEntry(date=day, novelty=novelty, total_pay=total_pay,
                                 breakdown=breakdown)
    return build
