import sys
import json
import logging
import argparse
import datetime
import traceback

from config import Config
from domain import (AdditionalTimeRange, DeductionItem, EarningItem,
                    MonthSummaryConfig, MonthSummaryEntry, NoveltyType,
                    ShiftInput, ShiftType)
from services.colombia_payroll_engine import ColombiaPayrollEngine
from services.money import format_cop, hourly_rate_from_salary
from services.month_summary import summarize_month


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description='Nómina por turnos (Colombia)')
    parser.add_argument('--input', required=True,
                        help='JSON file with salary, shifts and optional existing shifts')
    parser.add_argument('--month', type=str,
                        help='Month to summarize (YYYY-MM). Defaults to the first shift month.')
    parser.add_argument('--json', action='store_true',
                        help='Print the result as JSON instead of a report')
    return parser.parse_args(argv)


def _shift_input(raw, tag):
    time_range = None
    if raw.get('start') or raw.get('end'):
        time_range = AdditionalTimeRange(raw.get('start', ''), raw.get('end', ''))
    return ShiftInput(
        date=datetime.date.fromisoformat(raw['date']),
        shift=ShiftType(raw.get('shift', ShiftType.MORNING.value)),
        novelty=NoveltyType(raw.get('novelty', NoveltyType.NORMAL.value)),
        tag=tag,
        additional_range=time_range,
    )


def _summary_config(payload, month, salary):
    raw = dict(payload.get('config', {}))
    raw['earnings_items'] = [EarningItem(**item) for item in raw.get('earnings_items', [])]
    raw['deduction_items'] = [DeductionItem(**item) for item in raw.get('deduction_items', [])]
    return MonthSummaryConfig.from_defaults(month, salary, **raw)


def run(payload, month=None):
    salary = payload['salary']
    weekly_hours = payload.get('weekly_hours', Config.WEEKLY_HOURS)
    hourly_rate = hourly_rate_from_salary(salary, weekly_hours)

    existing = [_shift_input(raw, 'existing') for raw in payload.get('existing', [])]
    new = [_shift_input(raw, 'new') for raw in payload.get('shifts', [])]

    engine = ColombiaPayrollEngine(weekly_limit=weekly_hours)
    calculations = engine.calculate_new_shifts(existing, new, hourly_rate)

    if month is None:
        month = calculations[0].date.strftime('%Y-%m') if calculations else \
            datetime.date.today().strftime('%Y-%m')
    entries = [MonthSummaryEntry.from_calculation(calc) for calc in calculations
               if calc.date.strftime('%Y-%m') == month]
    summary = summarize_month(entries, _summary_config(payload, month, salary))

    return {
        'hourly_rate': hourly_rate,
        'shifts': calculations,
        'summary': summary,
    }


def print_report(result):
    print(f"--- NÓMINA POR TURNOS ({result['summary'].month}) ---")
    print(f"    Valor hora: {format_cop(result['hourly_rate'])}")

    print("\n>>> Turnos calculados:")
    for calc in result['shifts']:
        b = calc.breakdown
        print(f"    - {calc.date.isoformat()} {calc.shift} ({calc.novelty}): "
              f"{b.hours_total:g} h, extras {b.overtime_hours_total:g} h, "
              f"básico {format_cop(b.base_pay)}, recargos {format_cop(b.surcharge_pay)}, "
              f"total {format_cop(b.total_pay)}")

    s = result['summary']
    print("\n>>> Resumen del mes:")
    print(f"    Devengado (turnos): {format_cop(s.shift_pay)}")
    print(f"    Auxilio transporte: {format_cop(s.transport_allowance)}")
    print(f"    Bruto:              {format_cop(s.gross_pay)}")
    print(f"    IBC:                {format_cop(s.ibc)}")
    print(f"    Salud:              {format_cop(s.health)}")
    print(f"    Pensión:            {format_cop(s.pension)}")
    print(f"    Solidaridad:        {format_cop(s.solidarity_fund)}")
    print(f"    Otras deducciones:  {format_cop(s.other_deductions)}")
    print(f"    Neto a pagar:       {format_cop(s.net_pay)}")


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=Config.LOG_LEVEL,
                        format='%(asctime)s %(levelname)s %(name)s: %(message)s')
    try:
        with open(args.input, encoding='utf-8') as f:
            payload = json.load(f)

        result = run(payload, args.month)

        if args.json:
            print(json.dumps({
                'hourly_rate': result['hourly_rate'],
                'shifts': [calc.to_dict() for calc in result['shifts']],
                'summary': result['summary'].to_dict(),
            }, ensure_ascii=False, indent=2))
        else:
            print_report(result)
        return 0

    except Exception as e:
        print(f"❌ Error calculando la nómina: {e}")
        traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
