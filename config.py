import os
from dotenv import load_dotenv

load_dotenv()


def _env_float(name, default):
    value = os.getenv(name)
    if value is None or value.strip() == '':
        return default
    return float(value)


class Config:
    # Legal references (COP). Override per year through the environment.
    SMMLV = _env_float('NOMINA_SMMLV', 1750905)
    AUX_TRANSPORTE = _env_float('NOMINA_AUX_TRANSPORTE', 200000)
    TRANSPORT_CAP_SMMLV = _env_float('NOMINA_TRANSPORT_CAP_SMMLV', 2)

    WEEKLY_HOURS = _env_float('NOMINA_WEEKLY_HOURS', 44)

    HEALTH_PCT = _env_float('NOMINA_HEALTH_PCT', 0.04)
    PENSION_PCT = _env_float('NOMINA_PENSION_PCT', 0.04)
    IBC_MIN_SMMLV = _env_float('NOMINA_IBC_MIN_SMMLV', 1)
    IBC_MAX_SMMLV = _env_float('NOMINA_IBC_MAX_SMMLV', 25)

    LOG_LEVEL = os.getenv('NOMINA_LOG_LEVEL', 'WARNING')

    # Overtime premiums by DIAN concept. Sunday/holiday ordinary hours are
    # not listed: their rate depends on the shift date (premium_table).
    PORCENTAJES_EXTRA = {
        'HED': 25.00,
        'HEN': 75.00,
        'HRN': 35.00,
        'HEDDF': 100.00,
        'HENDF': 150.00
    }
