"""Validation rules for incoming task data"""
from datetime import datetime, timezone
from typing import Any, Mapping, Optional

from app.features.tasks.domain import TaskFields
from app.features.tasks.errors import Err, Ok, Result, ValidationError

# Wire names, in the order missing fields are reported
REQUIRED_FIELDS = ("title", "employee", "startDate", "endDate", "description")

MISSING_FIELD = "missing field"
INVALID_FIELD_TYPE = "invalid field type"
INVALID_DATE = "invalid date"
DATE_ORDER = "date order"


def parse_date(value: str) -> Optional[datetime]:
    """
    Parse an ISO-8601 date or date-time.

    Naive values are treated as UTC so that plain dates and offset-aware
    timestamps can be compared with each other.

    Returns:
        Aware datetime, or None if the value is not a valid date
    """
    try:
        parsed = datetime.fromisoformat(value.strip())
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def validate_task_fields(fields: Mapping[str, Any]) -> Result[TaskFields]:
    """
    Check task fields in a fixed order: presence, type, date format, date order.

    The first failing rule wins, so a request that is both incomplete and
    has reversed dates is always reported as a missing field.

    Args:
        fields: Mapping keyed by wire names; unknown keys are ignored

    Returns:
        Ok(TaskFields) with the original string values, or Err(ValidationError)
    """
    missing = [name for name in REQUIRED_FIELDS if not fields.get(name)]
    if missing:
        return Err(ValidationError(MISSING_FIELD, missing))

    wrong_type = [name for name in REQUIRED_FIELDS if not isinstance(fields[name], str)]
    if wrong_type:
        return Err(ValidationError(INVALID_FIELD_TYPE, wrong_type))

    start = parse_date(fields["startDate"])
    end = parse_date(fields["endDate"])
    unparsable = [name for name, value in (("startDate", start), ("endDate", end)) if value is None]
    if unparsable:
        return Err(ValidationError(INVALID_DATE, unparsable))

    if start > end:
        return Err(ValidationError(DATE_ORDER, ["startDate", "endDate"]))

    return Ok(TaskFields(**{name: fields[name] for name in REQUIRED_FIELDS}))
