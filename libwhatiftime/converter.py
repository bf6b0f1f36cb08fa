from decimal import Context, Decimal, ROUND_HALF_UP
import math

from .errors import UnknownUnitError
from .units import normalize_unit_key


def _lookup(unit_table, key):
    unit = normalize_unit_key(key)
    if unit is None or unit not in unit_table:
        raise UnknownUnitError(f"Unknown time unit: {key!r}")
    return unit_table[unit]


def convert(unit_table, from_key, to_key):
    """How many `to_key` units fit in one `from_key` unit."""
    return _lookup(unit_table, from_key) / _lookup(unit_table, to_key)


def _quantize(value, places):
    exact = Decimal(value)
    # enough precision for every integer digit plus the requested decimals
    ctx = Context(prec=max(28, exact.adjusted() + places + 2), rounding=ROUND_HALF_UP)
    return exact.quantize(Decimal(1).scaleb(-places), context=ctx)


def round_half_up(value, places=0):
    """Round like a calculator does (2.5 -> 3), not like round() (2.5 -> 2)."""
    if isinstance(value, float) and not math.isfinite(value):
        return value
    rounded = _quantize(value, places)
    return int(rounded) if places == 0 else float(rounded)


def format_fixed(value, places=2):
    """Fixed-point text with `places` decimals, halves rounded up."""
    if isinstance(value, float) and not math.isfinite(value):
        return "∞" if value > 0 else "NaN"
    return f"{_quantize(value, places):f}"


def format_number(value, max_fraction_digits=3):
    """
    Display a number with thousands separators and at most three decimals,
    trailing zeros dropped: 2419200 -> '2,419,200', 0.04166666 -> '0.042'.
    """
    if isinstance(value, float) and not math.isfinite(value):
        return "∞" if value > 0 else "NaN"
    text = f"{_quantize(value, max_fraction_digits):,f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text
