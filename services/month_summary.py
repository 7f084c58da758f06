import logging
import math

from domain import MonthSummary, NoveltyType
from services.colombia_payroll_engine import novelty_multiplier
from services.money import enumerate_dates, month_bounds, round_cop

_logger = logging.getLogger(__name__)

PRORATION_DAYS = 30

TRANSPORT_NOVELTIES = (
    NoveltyType.NORMAL,
    NoveltyType.LICENCIA_REMUNERADA,
    NoveltyType.DIA_FAMILIA,
    NoveltyType.CUMPLEANOS,
)
NON_CONTRIBUTING_NOVELTIES = (
    NoveltyType.LICENCIA_NO_REMUNERADA,
    NoveltyType.AUSENCIA,
)

# (upper bound in SMMLV, rate); Ley 797 de 2003 art. 8.
SOLIDARITY_FUND_BRACKETS = (
    (4, 0.0),
    (16, 0.01),
    (17, 0.012),
    (18, 0.014),
    (19, 0.016),
    (20, 0.018),
)
SOLIDARITY_FUND_TOP_RATE = 0.02

HOUR_FIELDS = (
    'hours_day', 'hours_night',
    'hours_sunday_holiday_day', 'hours_sunday_holiday_night',
    'overtime_hours_total', 'overtime_day', 'overtime_night',
    'overtime_sunday_holiday_day', 'overtime_sunday_holiday_night',
)


def transport_day_indicator(novelty):
    return 1 if NoveltyType(novelty) in TRANSPORT_NOVELTIES else 0


def contribution_day_indicator(novelty):
    return 0 if NoveltyType(novelty) in NON_CONTRIBUTING_NOVELTIES else 1


def solidarity_fund_rate(ibc_in_smmlv):
    for upper, rate in SOLIDARITY_FUND_BRACKETS:
        if ibc_in_smmlv < upper:
            return rate
    return SOLIDARITY_FUND_TOP_RATE


def is_transport_eligible(config):
    return (
        config.smmlv > 0
        and config.transport_allowance > 0
        and config.base_salary > 0
        and config.base_salary <= config.smmlv * config.transport_salary_cap_smmlv
    )


def _keep_max(per_day, day, value):
    if value > per_day.get(day, 0):
        per_day[day] = value
    else:
        per_day.setdefault(day, value)


def summarize_month(entries, config):
    """Aggregates daily shift results and salary settings into one payslip.

    Sums are kept unrounded while accumulating; every currency field of the
    result is rounded once.
    """
    shift_pay = 0.0
    base_pay = 0.0
    surcharge_pay = 0.0
    hours = dict.fromkeys(HOUR_FIELDS, 0.0)

    day_weight = {}
    transport_days = {}
    contribution_days = {}

    for entry in entries:
        shift_pay += entry.total_pay or 0
        base_pay += entry.breakdown.base_pay or 0
        surcharge_pay += entry.breakdown.surcharge_pay or 0
        for name in HOUR_FIELDS:
            hours[name] += getattr(entry.breakdown, name) or 0

        # A day with several entries keeps its most favourable novelty.
        _keep_max(day_weight, entry.date, novelty_multiplier(entry.novelty))
        _keep_max(transport_days, entry.date, transport_day_indicator(entry.novelty))
        _keep_max(contribution_days, entry.date, contribution_day_indicator(entry.novelty))

    # Devengados
    transport_eligible = is_transport_eligible(config)
    transport_proration_days = min(PRORATION_DAYS, sum(transport_days.values()))
    transport_allowance = 0
    if transport_eligible:
        transport_allowance = round_cop(
            config.transport_allowance * transport_proration_days / PRORATION_DAYS)

    salary_earnings = sum(item.amount for item in config.earnings_items if item.is_salary)
    non_salary_earnings = sum(item.amount for item in config.earnings_items if not item.is_salary)
    gross_pay = round_cop(shift_pay + transport_allowance + salary_earnings + non_salary_earnings)

    # IBC, prorated by the days that contribute to social security
    contribution_days_count = min(PRORATION_DAYS, sum(contribution_days.values()))
    contribution_proration = contribution_days_count / PRORATION_DAYS
    if config.smmlv > 0:
        ibc_floor = config.smmlv * config.ibc_min_smmlv * contribution_proration
        ibc_ceiling = config.smmlv * config.ibc_max_smmlv * contribution_proration
    else:
        ibc_floor = 0
        ibc_ceiling = math.inf
    ibc = round_cop(min(max(max(0, shift_pay + salary_earnings), ibc_floor), ibc_ceiling))

    # Deducciones
    health = pension = solidarity_fund = 0
    if config.apply_standard_deductions:
        health = round_cop(ibc * config.health_pct)
        pension = round_cop(ibc * config.pension_pct)
        if config.apply_solidarity_fund and config.smmlv > 0:
            solidarity_fund = round_cop(ibc * solidarity_fund_rate(ibc / config.smmlv))

    other_deductions = round_cop(sum(item.amount for item in config.deduction_items))
    total_deductions = health + pension + solidarity_fund + other_deductions

    _logger.debug("Month %s: %d entries, gross %s, deductions %s",
                  config.month, len(day_weight), gross_pay, total_deductions)

    return MonthSummary(
        month=config.month,
        shifts_count=len(entries),
        unique_days=len(day_weight),
        shift_pay=round_cop(shift_pay),
        base_pay=round_cop(base_pay),
        surcharge_pay=round_cop(surcharge_pay),
        transport_eligible=transport_eligible,
        transport_proration_days=transport_proration_days,
        transport_allowance=transport_allowance,
        salary_earnings=round_cop(salary_earnings),
        non_salary_earnings=round_cop(non_salary_earnings),
        gross_pay=gross_pay,
        ibc=ibc,
        health=health,
        pension=pension,
        solidarity_fund=solidarity_fund,
        other_deductions=other_deductions,
        total_deductions=total_deductions,
        net_pay=gross_pay - total_deductions,
        **hours,
    )


# --- Multi-month reports ---

def summarize_period(summaries):
    """Averages over several months (e.g. the last six), or None if empty."""
    if not summaries:
        return None
    count = len(summaries)
    return {
        'months': count,
        'avg_net_pay': round_cop(sum(s.net_pay for s in summaries) / count),
        'avg_gross_pay': round_cop(sum(s.gross_pay for s in summaries) / count),
        'avg_shifts': round(sum(s.shifts_count for s in summaries) / count, 2),
    }


def year_totals(summaries):
    if not summaries:
        return None
    return {
        'gross_pay': sum(s.gross_pay for s in summaries),
        'total_deductions': sum(s.total_deductions for s in summaries),
        'net_pay': sum(s.net_pay for s in summaries),
    }


def daily_pay_series(entries, month):
    """Total pay per calendar day of ``month`` ('YYYY-MM'), zero-filled."""
    first, last = month_bounds(month)
    totals = {}
    for entry in entries:
        totals[entry.date] = totals.get(entry.date, 0) + (entry.total_pay or 0)
    return [(day, totals.get(day, 0)) for day in enumerate_dates(first, last)]
