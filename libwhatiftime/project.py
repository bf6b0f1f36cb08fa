"""
Save / load of a time system as a small JSON project file.

    {
      "version": 1,
      "timeUnits": {"secondsPerMinute": 60, ...},
      "converter": {"fromUnit": "day", "toUnit": "hour"}
    }

Unit counts are clamped on load exactly as typed input is; missing entries
fall back to the defaults.
"""
import json
import logging

from pydantic import ValidationError

from .errors import ProjectFileError
from .models import ConverterSelection, TimeUnitConfig

logger = logging.getLogger(__name__)

PROJECT_VERSION = 1


def to_project_json(config: TimeUnitConfig, selection: ConverterSelection) -> str:
    payload = {
        "version": PROJECT_VERSION,
        "timeUnits": config.model_dump(by_alias=True),
        "converter": selection.model_dump(by_alias=True),
    }
    return json.dumps(payload, indent=2)


def load_project(text):
    """Parse a project file. Returns (TimeUnitConfig, ConverterSelection)."""
    try:
        data = json.loads(text)
    except (TypeError, ValueError) as e:
        raise ProjectFileError(f"Project file is not valid JSON: {e}") from e
    if not isinstance(data, dict):
        raise ProjectFileError("Project file must contain a JSON object.")

    version = data.get("version", PROJECT_VERSION)
    if version != PROJECT_VERSION:
        raise ProjectFileError(f"Unsupported project version: {version!r}")

    units = data.get("timeUnits") or {}
    converter = data.get("converter") or {}
    if not isinstance(units, dict) or not isinstance(converter, dict):
        raise ProjectFileError("'timeUnits' and 'converter' must be JSON objects.")

    try:
        config = TimeUnitConfig.model_validate(units)
        selection = ConverterSelection.model_validate(converter)
    except ValidationError as e:
        raise ProjectFileError(f"Project file has invalid values: {e}") from e

    logger.debug("Loaded project: %s, %s -> %s",
                 config.as_tuple(), selection.from_unit, selection.to_unit)
    return config, selection


def load_project_upload(uploaded, loaded_id=None):
    """
    Load an uploaded project file (a Streamlit UploadedFile) once.

    Uploads are told apart by `file_id`, so a new file with the same name and
    size still loads. Returns None when `uploaded` is the file already loaded
    as `loaded_id`, else (config, selection, file_id).
    """
    if uploaded.file_id == loaded_id:
        return None
    config, selection = load_project(uploaded.getvalue())
    return config, selection, uploaded.file_id
