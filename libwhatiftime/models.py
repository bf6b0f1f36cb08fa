from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Dict, List, Union

from .errors import UnknownFieldError, UnknownUnitError
from .units import (
    DEFAULT_FROM_UNIT,
    DEFAULT_TO_UNIT,
    DEFAULT_UNITS,
    FIELD_NAMES,
    normalize_unit_key,
    parse_unit_count,
    to_camel,
    to_snake,
)


UnitCount = Union[int, float]


class TimeUnitConfig(BaseModel):
    """The six 'units per next-larger unit' values of a custom time system."""
    model_config = ConfigDict(
        validate_assignment=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )

    seconds_per_minute: UnitCount = DEFAULT_UNITS["seconds_per_minute"]
    minutes_per_hour: UnitCount = DEFAULT_UNITS["minutes_per_hour"]
    hours_per_day: UnitCount = DEFAULT_UNITS["hours_per_day"]
    days_per_week: UnitCount = DEFAULT_UNITS["days_per_week"]
    weeks_per_month: UnitCount = DEFAULT_UNITS["weeks_per_month"]
    months_per_year: UnitCount = DEFAULT_UNITS["months_per_year"]

    # Never rejects a value: bad input becomes 1
    @field_validator(*FIELD_NAMES, mode="before")
    @classmethod
    def clamp_to_one(cls, v):
        return parse_unit_count(v)

    def set_field(self, name: str, raw_value):
        """Store a raw user input at `name`, clamped. Returns the stored value."""
        field = to_snake(name)
        if field not in FIELD_NAMES:
            raise UnknownFieldError(name)
        setattr(self, field, raw_value)
        return getattr(self, field)

    def fields(self):
        return [(name, getattr(self, name)) for name in FIELD_NAMES]

    def as_tuple(self):
        return tuple(getattr(self, name) for name in FIELD_NAMES)

    def reset(self):
        for name, value in DEFAULT_UNITS.items():
            setattr(self, name, value)


class ConverterSelection(BaseModel):
    """The pair of units picked in the converter."""
    model_config = ConfigDict(
        validate_assignment=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )

    from_unit: str = DEFAULT_FROM_UNIT
    to_unit: str = DEFAULT_TO_UNIT

    @field_validator('from_unit', 'to_unit', mode="before")
    @classmethod
    def must_be_known_unit(cls, v):
        key = normalize_unit_key(v)
        if key is None:
            raise UnknownUnitError(f"Unknown time unit: {v!r}")
        return key


class DerivedTimes(BaseModel):
    """Second-counts computed from a TimeUnitConfig. Never stored."""
    model_config = ConfigDict(frozen=True)

    seconds_per_hour: UnitCount
    seconds_per_day: UnitCount
    seconds_per_week: UnitCount
    seconds_per_month: UnitCount
    seconds_per_year: UnitCount
    time_ratio: float
    unit_table: Dict[str, UnitCount]


class Narrative(BaseModel):
    """Comparison text for a custom time system, split into paragraphs."""
    overview: str
    facts_intro: str = "Some interesting facts about your time system:"
    facts: List[str] = Field(default_factory=list)
    calendar: str
    comparison: str

    def paragraphs(self):
        facts = self.facts_intro + "".join(f"\n• {f}" for f in self.facts)
        return [self.overview, facts, self.calendar, self.comparison]
