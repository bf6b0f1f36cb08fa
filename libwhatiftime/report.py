"""
libwhatiftime/report.py
─────────────────────────────────────────────────────────────────────────────
Plain-text report for a custom time system: the six configured units, the
derived second-counts, the current converter reading and the narrative
comparison with Earth time.
"""
import datetime

from .converter import convert, format_fixed, format_number
from .models import ConverterSelection, DerivedTimes, TimeUnitConfig
from .narrative import build_narrative
from .units import DEFAULT_UNITS, STANDARD_SECONDS, TIME_UNIT_OPTIONS, humanize_field

_W  = 72        # line width
_DV = "═" * _W  # heavy divider
_DH = "─" * _W  # light divider
_DT = "·" * _W  # dot divider

def _sec(title):
    return f"\n{_DV}\n  {title}\n{_DV}\n"

def _sub(title):
    return f"\n  ── {title} {'─' * max(0, _W - len(title) - 6)}\n"

def _wrap(text, indent=2, width=_W - 4):
    """Naive word-wrap for long strings."""
    words   = text.split()
    lines   = []
    current = " " * indent
    for w in words:
        if len(current) + len(w) + 1 <= width + indent:
            current += w + " "
        else:
            lines.append(current.rstrip())
            current = " " * indent + w + " "
    if current.strip():
        lines.append(current.rstrip())
    return "\n".join(lines)


def generate_time_report(config: TimeUnitConfig, derived: DerivedTimes,
                         selection: ConverterSelection):
    """Generate the downloadable summary of a time system."""
    timestamp = datetime.datetime.now().strftime("%Y-%m-%d  %H:%M")
    narrative = build_narrative(config, derived)
    labels    = dict(TIME_UNIT_OPTIONS)
    lines = []
    A = lines.append

    A(_DV)
    A("  What If Time  ·  TIME SYSTEM REPORT")
    A(_DV)
    A(f"  Generated  :  {timestamp}")
    A(_DT)

    A(_sec("1.  YOUR UNITS"))
    for name, value in config.fields():
        std = DEFAULT_UNITS[name]
        marker = "" if value == std else f"   (standard: {std})"
        A(f"  {humanize_field(name):<22}:  {format_number(value)}{marker}")

    A(_sec("2.  LENGTH OF EACH UNIT"))
    A(f"  {'Unit':<10}{'Your length (s)':>24}{'Standard (s)':>18}{'Ratio':>12}")
    A("  " + _DH[:64])
    for key, label in TIME_UNIT_OPTIONS:
        custom = derived.unit_table[key]
        std    = STANDARD_SECONDS[key]
        A(f"  {label:<10}{format_number(custom):>24}{format_number(std):>18}"
          f"{format_fixed(custom / std, 4):>12}")
    A("")
    A(f"  Year ratio (yours ÷ 365.25 days)  :  {format_fixed(derived.time_ratio, 4)}")

    A(_sec("3.  CONVERTER"))
    factor = convert(derived.unit_table, selection.from_unit, selection.to_unit)
    A(_wrap(
        f"By your rules, one {labels[selection.from_unit]} equals "
        f"{format_number(factor)} {labels[selection.to_unit]}."
    ))

    A(_sec("4.  UNDERSTANDING YOUR TIME SYSTEM"))
    A(_wrap(narrative.overview))
    A(_sub("Interesting facts"))
    for fact in narrative.facts:
        A(_wrap(f"• {fact}", indent=2))
    A("")
    A(_wrap(narrative.calendar))
    A("")
    A(_wrap(narrative.comparison))

    A("")
    A(_DT)
    A("  What If Time  ·  explore time with different fundamental units")
    A(_DV)

    return "\n".join(lines)
