import datetime
import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from config import Config
from domain import (AdditionalTimeRange, NoveltyType, ShiftCalcBreakdown,
                    ShiftCalculation, ShiftInput, ShiftType)
from services.hour_classifier import HourClassifier
from services.money import round_cop
from services.overtime_tracker import WeeklyOvertimeTracker
from services.premium_table import premium
from services.shift_windows import additional_window, fixed_window

_logger = logging.getLogger(__name__)

ONE_HOUR = datetime.timedelta(hours=1)
ADDITIONAL_SLICE = datetime.timedelta(minutes=15)
NOVELTY_DAY_HOURS = 8

UNPAID_NOVELTIES = (NoveltyType.LICENCIA_NO_REMUNERADA, NoveltyType.AUSENCIA)


def novelty_multiplier(novelty):
    novelty = NoveltyType(novelty)
    if novelty in UNPAID_NOVELTIES:
        return 0
    if novelty is NoveltyType.INCAPACIDAD_EPS:
        return 2 / 3
    return 1


# --- Shift plans: one variant per way a day is paid ---

@dataclass(frozen=True)
class NormalShift:
    start: datetime.datetime
    end: datetime.datetime

    def hours(self):
        t = self.start
        while t < self.end:
            yield t
            t += ONE_HOUR


@dataclass(frozen=True)
class AdditionalShift:
    time_range: Optional[AdditionalTimeRange]
    window: Optional[Tuple[datetime.datetime, datetime.datetime]]


@dataclass(frozen=True)
class NoveltyOverride:
    multiplier: float


def plan_shift(day, shift, novelty, time_range=None):
    shift = ShiftType(shift)
    novelty = NoveltyType(novelty)
    if shift is ShiftType.ADDITIONAL:
        window = additional_window(day, time_range) if novelty is NoveltyType.NORMAL else None
        return AdditionalShift(time_range, window)
    if novelty is not NoveltyType.NORMAL:
        return NoveltyOverride(novelty_multiplier(novelty))
    return NormalShift(*fixed_window(day, shift))


class _PayAccumulator:
    """Unrounded hour buckets and pay sums for one shift."""

    def __init__(self, hourly_rate):
        self.hourly_rate = hourly_rate
        self.ordinary = [0.0, 0.0, 0.0, 0.0]
        self.overtime = [0.0, 0.0, 0.0, 0.0]
        self.base_sum = 0.0
        self.premium_sum = 0.0

    @staticmethod
    def _bucket(night, sunday_or_holiday):
        # day, night, sunday/holiday day, sunday/holiday night
        return (2 if sunday_or_holiday else 0) + (1 if night else 0)

    def add(self, at, hours, overtime, night, sunday_or_holiday):
        buckets = self.overtime if overtime else self.ordinary
        buckets[self._bucket(night, sunday_or_holiday)] += hours
        self.base_sum += self.hourly_rate * hours
        self.premium_sum += self.hourly_rate * premium(
            at, overtime, night, sunday_or_holiday) * hours

    def breakdown(self, hours_total=None, time_range=None):
        overtime_total = sum(self.overtime)
        if hours_total is None:
            hours_total = sum(self.ordinary) + overtime_total
        base_pay = round_cop(self.base_sum)
        surcharge_pay = round_cop(self.premium_sum)
        return ShiftCalcBreakdown(
            hours_total=hours_total,
            hours_day=self.ordinary[0],
            hours_night=self.ordinary[1],
            hours_sunday_holiday_day=self.ordinary[2],
            hours_sunday_holiday_night=self.ordinary[3],
            overtime_hours_total=overtime_total,
            overtime_day=self.overtime[0],
            overtime_night=self.overtime[1],
            overtime_sunday_holiday_day=self.overtime[2],
            overtime_sunday_holiday_night=self.overtime[3],
            base_pay=base_pay,
            surcharge_pay=surcharge_pay,
            total_pay=base_pay + surcharge_pay,
            additional_start_time=time_range.start if time_range else None,
            additional_end_time=time_range.end if time_range else None,
        )


# --- Handlers, one per plan variant ---

def calculate_novelty_override(plan, hourly_rate):
    base_pay = round_cop(hourly_rate * NOVELTY_DAY_HOURS * plan.multiplier)
    return ShiftCalcBreakdown(hours_total=NOVELTY_DAY_HOURS, base_pay=base_pay,
                              surcharge_pay=0, total_pay=base_pay)


def calculate_additional(plan, hourly_rate, classifier):
    """Additional work is paid as overtime slice by slice; it never books
    ordinary hours in the weekly tracker."""
    acc = _PayAccumulator(hourly_rate)
    if plan.window is None:
        return acc.breakdown(hours_total=0, time_range=plan.time_range)

    start, end = plan.window
    t = start
    while t < end:
        slice_end = min(t + ADDITIONAL_SLICE, end)
        hours = (slice_end - t).total_seconds() / 3600
        night, sunday_or_holiday = classifier.classify(t)
        acc.add(t, hours, True, night, sunday_or_holiday)
        t = slice_end
    return acc.breakdown(time_range=plan.time_range)


def calculate_normal(plan, hourly_rate, classifier, tracker):
    acc = _PayAccumulator(hourly_rate)
    for t in plan.hours():
        overtime = tracker.consume(t)
        night, sunday_or_holiday = classifier.classify(t)
        acc.add(t, 1, overtime, night, sunday_or_holiday)
    return acc.breakdown(hours_total=(plan.end - plan.start) / ONE_HOUR)


class ColombiaPayrollEngine:
    """Per-shift hour classification and pay for Colombian labor law."""

    def __init__(self, calendar=None, weekly_limit=None):
        self.classifier = HourClassifier(calendar)
        self.weekly_limit = Config.WEEKLY_HOURS if weekly_limit is None else weekly_limit

    @property
    def calendar(self):
        return self.classifier.calendar

    def _breakdown(self, plan, hourly_rate, tracker):
        if isinstance(plan, NoveltyOverride):
            return calculate_novelty_override(plan, hourly_rate)
        if isinstance(plan, AdditionalShift):
            return calculate_additional(plan, hourly_rate, self.classifier)
        return calculate_normal(plan, hourly_rate, self.classifier, tracker)

    def calculate_shifts(self, dates, shift, novelty, hourly_rate,
                         weekly_limit=None, additional_range=None):
        """One ``ShiftCalculation`` per date, in the order given.

        Dates are booked against the weekly ordinary limit in chronological
        order, so a later day of the week picks up the overtime.
        """
        shift = ShiftType(shift)
        novelty = NoveltyType(novelty)
        if weekly_limit is None:
            weekly_limit = self.weekly_limit
        tracker = WeeklyOvertimeTracker(weekly_limit)

        results = [None] * len(dates)
        for index in sorted(range(len(dates)), key=lambda i: dates[i]):
            day = dates[index]
            plan = plan_shift(day, shift, novelty, additional_range)
            breakdown = self._breakdown(plan, hourly_rate, tracker)
            results[index] = ShiftCalculation(day, shift, novelty, breakdown)

        _logger.debug("Calculated %d %s/%s shifts", len(results), shift, novelty)
        return results

    def calculate_shifts_merged(self, inputs, hourly_rate, weekly_limit=None):
        """Replays existing and new shifts through one weekly tracker.

        Every normal hour of every input is sorted by instant so recorded
        shifts consume their share of the weekly limit in their real
        position. Returns one calculation per input, in input order.
        """
        if weekly_limit is None:
            weekly_limit = self.weekly_limit
        plans = [plan_shift(item.date, item.shift, item.novelty, item.additional_range)
                 for item in inputs]

        events = [(t, index)
                  for index, plan in enumerate(plans) if isinstance(plan, NormalShift)
                  for t in plan.hours()]
        events.sort(key=lambda event: event[0])

        tracker = WeeklyOvertimeTracker(weekly_limit)
        accumulators = {}
        for t, index in events:
            overtime = tracker.consume(t)
            night, sunday_or_holiday = self.classifier.classify(t)
            acc = accumulators.setdefault(index, _PayAccumulator(hourly_rate))
            acc.add(t, 1, overtime, night, sunday_or_holiday)

        results = []
        for index, (item, plan) in enumerate(zip(inputs, plans)):
            if isinstance(plan, NormalShift):
                acc = accumulators.get(index, _PayAccumulator(hourly_rate))
                breakdown = acc.breakdown(hours_total=(plan.end - plan.start) / ONE_HOUR)
            else:
                breakdown = self._breakdown(plan, hourly_rate, None)
            results.append(ShiftCalculation(item.date, ShiftType(item.shift),
                                            NoveltyType(item.novelty), breakdown))
        return results

    def calculate_new_shifts(self, existing, new, hourly_rate, weekly_limit=None):
        """Merged calculation that keeps only the results for ``new``."""
        inputs = ([_tagged(item, 'existing') for item in existing]
                  + [_tagged(item, 'new') for item in new])
        merged = self.calculate_shifts_merged(inputs, hourly_rate, weekly_limit)
        _logger.debug("Merged %d existing + %d new shifts", len(existing), len(new))
        return merged[len(existing):]


def _tagged(item, tag):
    if item.tag == tag:
        return item
    return ShiftInput(item.date, item.shift, item.novelty, tag, item.additional_range)
