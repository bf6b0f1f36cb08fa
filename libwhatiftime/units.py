import logging
import math
import re

logger = logging.getLogger(__name__)

# Unit definitions: the seven keys of the unit table, smallest first
UNIT_KEYS = ("second", "minute", "hour", "day", "week", "month", "year")

TIME_UNIT_OPTIONS = [
    ("second", "Second"),
    ("minute", "Minute"),
    ("hour", "Hour"),
    ("day", "Day"),
    ("week", "Week"),
    ("month", "Month"),
    ("year", "Year"),
]

# Field order follows the chain minute -> hour -> day -> week -> month -> year
FIELD_NAMES = (
    "seconds_per_minute",
    "minutes_per_hour",
    "hours_per_day",
    "days_per_week",
    "weeks_per_month",
    "months_per_year",
)

DEFAULT_UNITS = {
    "seconds_per_minute": 60,
    "minutes_per_hour": 60,
    "hours_per_day": 24,
    "days_per_week": 7,
    "weeks_per_month": 4,
    "months_per_year": 12,
}

# Upper bound on every count: below 2**53, and a year of six maxed counts
# (1e90 s) is still a finite float
MAX_UNIT_COUNT = 10 ** 15

DEFAULT_FROM_UNIT = "day"
DEFAULT_TO_UNIT = "hour"

# Standard (SI / Julian) lengths in seconds
STANDARD_SECONDS_PER_YEAR = 60 * 60 * 24 * 365.25

STANDARD_SECONDS = {
    "second": 1,
    "minute": 60,
    "hour": 3600,
    "day": 86400,
    "week": 604800,
    "month": STANDARD_SECONDS_PER_YEAR / 12,
    "year": STANDARD_SECONDS_PER_YEAR,
}


def to_camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


def to_snake(name: str) -> str:
    return re.sub(r"([A-Z])", r"_\1", name).lower()


def humanize_field(name: str) -> str:
    """'secondsPerMinute' or 'seconds_per_minute' -> 'Seconds Per Minute'."""
    words = re.sub(r"([A-Z])", r" \1", to_camel(name))
    return " ".join(w.capitalize() for w in words.split())


def normalize_unit_key(key):
    """Map a unit label ('Hours', 'hours', 'hour') onto its table key.

    Returns None when the label does not name one of the seven units.
    """
    if not isinstance(key, str):
        return None
    k = key.strip().lower()
    if k in UNIT_KEYS:
        return k
    if k.endswith("s") and k[:-1] in UNIT_KEYS:
        return k[:-1]
    return None


def _parse_text(text):
    text = text.strip()
    if not text:
        return None
    try:
        return int(text)
    except ValueError:
        pass
    try:
        return float(text)
    except ValueError:
        return None


def parse_unit_count(raw):
    """
    Parse a raw input into a unit count between 1 and MAX_UNIT_COUNT.

    Anything that does not parse to a finite number, and anything below 1,
    becomes 1; anything above MAX_UNIT_COUNT becomes MAX_UNIT_COUNT.
    Fractional values are kept as they are. Integral values come back as int.
    """
    value = None
    if isinstance(raw, bool):
        value = None
    elif isinstance(raw, (int, float)):
        value = raw
    elif isinstance(raw, str):
        value = _parse_text(raw)

    if value is None or (isinstance(value, float) and not math.isfinite(value)) or value < 1:
        logger.debug("Clamping unit count %r to 1", raw)
        return 1
    if value > MAX_UNIT_COUNT:
        logger.debug("Clamping unit count %r to %d", raw, MAX_UNIT_COUNT)
        return MAX_UNIT_COUNT
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value
