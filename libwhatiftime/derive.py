from functools import lru_cache

from .models import DerivedTimes, TimeUnitConfig
from .units import STANDARD_SECONDS_PER_YEAR


def derive(config: TimeUnitConfig) -> DerivedTimes:
    """
    Chain the six multipliers into second-counts.

    seconds/hour  = s/min · min/h
    seconds/day   = s/h · h/day
    seconds/week  = s/day · days/week
    seconds/month = s/week · weeks/month
    seconds/year  = s/month · months/year

    time_ratio = seconds/year / (60·60·24·365.25)
    """
    return _derive_values(config.as_tuple())


@lru_cache(maxsize=256)
def _derive_values(units):
    spm, mph, hpd, dpw, wpm, mpy = units

    seconds_per_hour = spm * mph
    seconds_per_day = seconds_per_hour * hpd
    seconds_per_week = seconds_per_day * dpw
    seconds_per_month = seconds_per_week * wpm
    seconds_per_year = seconds_per_month * mpy

    unit_table = {
        "second": 1,
        "minute": spm,
        "hour": seconds_per_hour,
        "day": seconds_per_day,
        "week": seconds_per_week,
        "month": seconds_per_month,
        "year": seconds_per_year,
    }

    return DerivedTimes(
        seconds_per_hour=seconds_per_hour,
        seconds_per_day=seconds_per_day,
        seconds_per_week=seconds_per_week,
        seconds_per_month=seconds_per_month,
        seconds_per_year=seconds_per_year,
        time_ratio=seconds_per_year / STANDARD_SECONDS_PER_YEAR,
        unit_table=unit_table,
    )
