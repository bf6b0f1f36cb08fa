from .converter import format_fixed, format_number, round_half_up
from .models import DerivedTimes, Narrative, TimeUnitConfig

EARTH_HOURS_PER_DAY = 24
EARTH_DAYS_PER_WEEK = 7

LESSON_MINUTES = 45
NAP_MINUTES = 20
MARATHON_HOURS = 4


def _n(value):
    """Plain number text: 24 -> '24', 1.5 -> '1.5'."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _longer_or_shorter(value, reference):
    return "longer" if value > reference else "shorter"


def describe_overview(config: TimeUnitConfig, derived: DerivedTimes) -> str:
    hpd = config.hours_per_day
    if hpd == EARTH_HOURS_PER_DAY:
        day_clause = "making it as long as an Earth day"
    else:
        day_clause = f"making it {_longer_or_shorter(hpd, EARTH_HOURS_PER_DAY)} than an Earth day"
    return (
        "In your custom time system, time flows differently from what we're used to. "
        f"A minute takes {_n(config.seconds_per_minute)} heartbeats (seconds), "
        f"and you'd need to count to {format_number(derived.seconds_per_hour)} to measure a full hour. "
        f"Each day contains {_n(hpd)} hours, {day_clause}."
    )


def describe_facts(config: TimeUnitConfig, derived: DerivedTimes):
    facts = []
    hpd = config.hours_per_day
    dpw = config.days_per_week

    if hpd != EARTH_HOURS_PER_DAY:
        facts.append(
            f"Your day is {_n(abs(hpd - EARTH_HOURS_PER_DAY))} hours "
            f"{_longer_or_shorter(hpd, EARTH_HOURS_PER_DAY)} than Earth's day"
        )
    if dpw != EARTH_DAYS_PER_WEEK:
        more_fewer = "more" if dpw > EARTH_DAYS_PER_WEEK else "fewer"
        facts.append(
            f"Your week has {_n(abs(dpw - EARTH_DAYS_PER_WEEK))} days "
            f"{more_fewer} than a standard week"
        )

    facts.append(
        f"A school lesson ({LESSON_MINUTES} minutes) would last "
        f"{_n(round_half_up(LESSON_MINUTES * config.seconds_per_minute / 60))} standard minutes"
    )
    facts.append(
        f"A quick power nap ({NAP_MINUTES} minutes) would be "
        f"{_n(round_half_up(NAP_MINUTES * config.seconds_per_minute / 60))} standard minutes"
    )
    facts.append(
        f"A marathon runner (finishing in {MARATHON_HOURS} hours) would take "
        f"{_n(round_half_up(MARATHON_HOURS * derived.time_ratio))} hours in your time"
    )
    return facts


def describe_calendar(config: TimeUnitConfig) -> str:
    wpm = config.weeks_per_month
    mpy = config.months_per_year
    return (
        f"Your calendar would look quite different too - each month has {_n(wpm)} weeks, "
        f"making it {_n(wpm * config.days_per_week)} days long. "
        f"A full year in your system has {_n(mpy)} months, or {_n(mpy * wpm)} weeks total."
    )


def describe_ratio(derived: DerivedTimes) -> str:
    """
    A ratio below 1 means the custom year is shorter than an Earth year, so
    more of them pass per Earth year: report the reciprocal. Otherwise the
    ratio itself is reported.
    """
    ratio = derived.time_ratio
    faster = ratio < 1
    years = 1 / ratio if faster else ratio
    return (
        f"Compared to Earth time, your year is {'shorter' if faster else 'longer'} "
        f"by a factor of {format_fixed(abs(ratio - 1))}. "
        f"This means time in your system flows {'faster' if faster else 'slower'} - "
        f"for every Earth year that passes, {format_fixed(years)} years would pass in your system."
    )


def build_narrative(config: TimeUnitConfig, derived: DerivedTimes) -> Narrative:
    return Narrative(
        overview=describe_overview(config, derived),
        facts=describe_facts(config, derived),
        calendar=describe_calendar(config),
        comparison=describe_ratio(derived),
    )
