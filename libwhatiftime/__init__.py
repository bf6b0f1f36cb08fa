# libwhatiftime — Custom Time System Library
# Public API Exports

from .models import TimeUnitConfig, ConverterSelection, DerivedTimes, Narrative
from .derive import derive
from .converter import convert, format_number, format_fixed, round_half_up
from .narrative import build_narrative
from .compare import comparison_frame
from .project import to_project_json, load_project, load_project_upload
from .report import generate_time_report
from .units import (
    UNIT_KEYS,
    TIME_UNIT_OPTIONS,
    FIELD_NAMES,
    DEFAULT_UNITS,
    STANDARD_SECONDS,
    STANDARD_SECONDS_PER_YEAR,
    humanize_field,
    normalize_unit_key,
    parse_unit_count,
)
from .errors import WhatIfTimeError, UnknownFieldError, UnknownUnitError, ProjectFileError
