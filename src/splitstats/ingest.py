"""Loading workout history returned by the workout-history service.

The service answers with either a bare JSON list of records or an
envelope of the form {"success": true, "data": [...]} /
{"success": false, "error": "..."}.

Invalid entries are skipped with a warning so that one bad record does
not hide the rest of the history.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import TypeAdapter, ValidationError

from splitstats.models.types import WorkoutRecord

logger = logging.getLogger(__name__)

_record_adapter = TypeAdapter(WorkoutRecord)


class RecordFormatError(ValueError):
    """Payload is not a list of workout records."""


def unwrap_response(payload: Any) -> Any:
    """Return the data of a service envelope, or the payload as is.

    Raises:
        RecordFormatError: If the envelope reports a failure.
    """
    if isinstance(payload, dict) and "success" in payload:
        if not payload["success"]:
            raise RecordFormatError(payload.get("error") or "Service reported a failure")
        return payload.get("data")
    return payload


def parse_records(payload: Any) -> list[WorkoutRecord]:
    """Validate decoded JSON into WorkoutRecords.

    Args:
        payload: List of record objects, or a service envelope around one.

    Returns:
        Valid records in input order.

    Raises:
        RecordFormatError: If the payload is not a list.
    """
    items = unwrap_response(payload)
    if not isinstance(items, list):
        raise RecordFormatError(f"Expected a list of workout records, got {type(items).__name__}")

    records = []
    for index, item in enumerate(items):
        try:
            records.append(_record_adapter.validate_python(item))
        except ValidationError as e:
            logger.warning(
                f"Skipping workout record {index}: {e.error_count()} validation error(s): "
                f"{e.errors()[0]['msg']}"
            )

    if len(records) < len(items):
        logger.warning(f"Loaded {len(records)} of {len(items)} workout records")
    return records


def load_records(path: Path | str) -> list[WorkoutRecord]:
    """Read workout records from a JSON file.

    Raises:
        FileNotFoundError: If the path is not an existing file.
        RecordFormatError: If the file is not UTF-8 JSON or has the wrong shape.
    """
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"Workout history file not found: {path}")

    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except UnicodeDecodeError as e:
        raise RecordFormatError(f"{path} is not UTF-8 text: {e}") from e
    except json.JSONDecodeError as e:
        raise RecordFormatError(f"Invalid JSON in {path}: {e}") from e

    return parse_records(payload)
