from __future__ import annotations

from dataclasses import asdict, dataclass, field
from datetime import date
from enum import Enum
from typing import List, Optional

from config import Config


class ShiftType(str, Enum):
    MORNING = 'manana'        # 05:00 - 13:00
    AFTERNOON = 'tarde'       # 13:00 - 21:00
    NIGHT = 'noche'           # 21:00 - 05:00 (+1)
    ADDITIONAL = 'adicional'  # explicit start/end

    def __str__(self) -> str:
        return self.value


class NoveltyType(str, Enum):
    NORMAL = 'normal'
    INCAPACIDAD_EPS = 'incapacidad_eps'
    INCAPACIDAD_ARL = 'incapacidad_arl'
    VACACIONES = 'vacaciones'
    LICENCIA_REMUNERADA = 'licencia_remunerada'
    LICENCIA_NO_REMUNERADA = 'licencia_no_remunerada'
    DIA_FAMILIA = 'dia_familia'
    CUMPLEANOS = 'cumpleanos'
    AUSENCIA = 'ausencia'

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class AdditionalTimeRange:
    """Clock times ("HH:MM") of an additional shift, anchored on its date."""
    start: str
    end: str


@dataclass
class ShiftCalcBreakdown:
    hours_total: float = 0
    hours_day: float = 0
    hours_night: float = 0
    hours_sunday_holiday_day: float = 0
    hours_sunday_holiday_night: float = 0
    overtime_hours_total: float = 0
    overtime_day: float = 0
    overtime_night: float = 0
    overtime_sunday_holiday_day: float = 0
    overtime_sunday_holiday_night: float = 0
    base_pay: int = 0
    surcharge_pay: int = 0
    total_pay: int = 0
    additional_start_time: Optional[str] = None
    additional_end_time: Optional[str] = None

    @property
    def bucket_hours(self) -> float:
        """Sum of the 8 ordinary + overtime buckets."""
        return (
            self.hours_day + self.hours_night
            + self.hours_sunday_holiday_day + self.hours_sunday_holiday_night
            + self.overtime_day + self.overtime_night
            + self.overtime_sunday_holiday_day + self.overtime_sunday_holiday_night
        )

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class ShiftCalculation:
    date: date
    shift: ShiftType
    novelty: NoveltyType
    breakdown: ShiftCalcBreakdown

    def to_dict(self) -> dict:
        return {
            'date': self.date.isoformat(),
            'shift': self.shift.value,
            'novelty': self.novelty.value,
            'breakdown': self.breakdown.to_dict(),
        }


@dataclass
class ShiftInput:
    date: date
    shift: ShiftType
    novelty: NoveltyType = NoveltyType.NORMAL
    tag: str = 'new'  # 'existing' | 'new'
    additional_range: Optional[AdditionalTimeRange] = None


@dataclass
class EarningItem:
    label: str
    amount: float
    is_salary: bool = False


@dataclass
class DeductionItem:
    label: str
    amount: float


@dataclass
class MonthSummaryConfig:
    month: str
    base_salary: float
    smmlv: float
    transport_allowance: float
    transport_salary_cap_smmlv: float = 2
    earnings_items: List[EarningItem] = field(default_factory=list)
    deduction_items: List[DeductionItem] = field(default_factory=list)
    apply_standard_deductions: bool = True
    health_pct: float = 0.04
    pension_pct: float = 0.04
    apply_solidarity_fund: bool = True
    ibc_min_smmlv: float = 1
    ibc_max_smmlv: float = 25

    @classmethod
    def from_defaults(cls, month, base_salary, **overrides):
        """Builds a config from the legal references in ``Config``."""
        values = {
            'smmlv': Config.SMMLV,
            'transport_allowance': Config.AUX_TRANSPORTE,
            'transport_salary_cap_smmlv': Config.TRANSPORT_CAP_SMMLV,
            'health_pct': Config.HEALTH_PCT,
            'pension_pct': Config.PENSION_PCT,
            'ibc_min_smmlv': Config.IBC_MIN_SMMLV,
            'ibc_max_smmlv': Config.IBC_MAX_SMMLV,
        }
        values.update(overrides)
        return cls(month=month, base_salary=base_salary, **values)


@dataclass
class MonthSummaryEntry:
    date: date
    novelty: NoveltyType
    total_pay: int
    breakdown: ShiftCalcBreakdown

    @classmethod
    def from_calculation(cls, calc: ShiftCalculation) -> 'MonthSummaryEntry':
        return cls(date=calc.date, novelty=calc.novelty,
                   total_pay=calc.breakdown.total_pay, breakdown=calc.breakdown)


@dataclass
class MonthSummary:
    month: str
    shifts_count: int = 0
    unique_days: int = 0
    shift_pay: int = 0
    base_pay: int = 0
    surcharge_pay: int = 0
    transport_eligible: bool = False
    transport_proration_days: float = 0
    transport_allowance: int = 0
    salary_earnings: int = 0
    non_salary_earnings: int = 0
    gross_pay: int = 0
    ibc: int = 0
    health: int = 0
    pension: int = 0
    solidarity_fund: int = 0
    other_deductions: int = 0
    total_deductions: int = 0
    net_pay: int = 0
    hours_day: float = 0
    hours_night: float = 0
    hours_sunday_holiday_day: float = 0
    hours_sunday_holiday_night: float = 0
    overtime_hours_total: float = 0
    overtime_day: float = 0
    overtime_night: float = 0
    overtime_sunday_holiday_day: float = 0
    overtime_sunday_holiday_night: float = 0

    def to_dict(self) -> dict:
        return asdict(self)
