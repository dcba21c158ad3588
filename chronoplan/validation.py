"""
Input validation for the public entry points.

The generators assume well-formed input. Everything a caller can get wrong
(time strings, chronotype, commitment ranges, dates, timezones) is checked
here and reported as a ScheduleValidationError naming the offending field.
"""

from typing import Any

import pytz

from .circadian_math import parse_date, to_minutes
from .scheduling.slot_finder import DEFAULT_MIN_SLOT_MINUTES
from .types import CHRONOTYPES, RECURRENCE_TYPES, Commitment, ScheduleRequest

DIGITS = frozenset("0123456789")


class ScheduleValidationError(ValueError):
    """Rejected input, with the name of the field at fault."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field
        self.message = message

    def to_dict(self) -> dict[str, str]:
        return {"error": self.message, "field": self.field}


def validate_time(t: str) -> bool:
    """Validate time format like '07:00'."""
    if not isinstance(t, str) or len(t) != 5 or t[2] != ":":
        return False
    if not all(c in DIGITS for c in t[:2] + t[3:]):
        return False
    return 0 <= int(t[:2]) <= 23 and 0 <= int(t[3:]) <= 59


def validate_date(d: str) -> bool:
    """Validate date format like '2025-01-13'."""
    if not isinstance(d, str) or len(d) != 10 or d[4] != "-" or d[7] != "-":
        return False
    if not all(c in DIGITS for c in d[:4] + d[5:7] + d[8:]):
        return False
    try:
        parse_date(d)
        return True
    except ValueError:
        return False


def validate_timezone(tz: str) -> bool:
    """Validate an IANA timezone name like 'America/Los_Angeles'."""
    return isinstance(tz, str) and tz in pytz.all_timezones_set


def check_time(field: str, value: Any) -> None:
    if not validate_time(value):
        raise ScheduleValidationError(field, f"Invalid {field} format: {value!r} (expected HH:MM)")


def check_chronotype(value: Any) -> None:
    if value not in CHRONOTYPES:
        raise ScheduleValidationError(
            "chronotype",
            "Invalid chronotype. Must be one of: " + ", ".join(CHRONOTYPES),
        )


def check_commitment(commitment: Commitment, position: int) -> None:
    """Reject commitments that are incomplete, malformed or cross midnight."""
    prefix = f"commitments[{position}]"
    if not commitment.start or not commitment.end or not commitment.title:
        raise ScheduleValidationError(prefix, "Each commitment must have start, end, and title")

    check_time(f"{prefix}.start", commitment.start)
    check_time(f"{prefix}.end", commitment.end)

    if to_minutes(commitment.start) >= to_minutes(commitment.end):
        raise ScheduleValidationError(
            prefix,
            f"Commitment '{commitment.title}' must end after it starts "
            f"({commitment.start} - {commitment.end})",
        )

    if commitment.recurrence not in RECURRENCE_TYPES:
        raise ScheduleValidationError(
            f"{prefix}.recurrence",
            "Invalid recurrence. Must be one of: " + ", ".join(RECURRENCE_TYPES),
        )


def validate_request(request: ScheduleRequest) -> None:
    """
    Validate a complete schedule request.

    Raises:
        ScheduleValidationError: On the first problem found
    """
    check_time("wake_time", request.wake_time)
    check_time("sleep_time", request.sleep_time)
    check_chronotype(request.chronotype)

    for position, commitment in enumerate(request.commitments):
        check_commitment(commitment, position)

    if request.week_start is not None and not validate_date(request.week_start):
        raise ScheduleValidationError(
            "week_start", f"Invalid week_start format: {request.week_start!r} (expected YYYY-MM-DD)"
        )

    if request.timezone is not None and not validate_timezone(request.timezone):
        raise ScheduleValidationError("timezone", f"Unknown timezone: {request.timezone!r}")

    min_slot = request.min_slot_minutes
    if isinstance(min_slot, bool) or not isinstance(min_slot, int) or min_slot < 1:
        raise ScheduleValidationError("min_slot_minutes", "min_slot_minutes must be positive")


def commitment_from_dict(data: dict[str, Any], position: int = 0) -> Commitment:
    """Build a Commitment from a JSON-style dict."""
    if not isinstance(data, dict):
        raise ScheduleValidationError(f"commitments[{position}]", "Commitment must be an object")

    tags = data.get("tags") or []
    if not isinstance(tags, list):
        raise ScheduleValidationError(f"commitments[{position}].tags", "tags must be a list")

    return Commitment(
        start=data.get("start", ""),
        end=data.get("end", ""),
        title=data.get("title", ""),
        recurrence=data.get("recurrence") or "none",
        id=data.get("id"),
        priority=data.get("priority", "medium"),
        description=data.get("description"),
        location=data.get("location"),
        rationale=data.get("rationale"),
        tags=tuple(tags),
    )


def request_from_dict(data: dict[str, Any]) -> ScheduleRequest:
    """
    Build and validate a ScheduleRequest from a JSON-style payload.

    Raises:
        ScheduleValidationError: If a field is missing or malformed
    """
    for field in ("wake_time", "sleep_time", "chronotype"):
        if field not in data:
            raise ScheduleValidationError(field, f"Missing required field: {field}")

    raw_commitments = data.get("commitments") or []
    if not isinstance(raw_commitments, list):
        raise ScheduleValidationError("commitments", "commitments must be a list")

    request = ScheduleRequest(
        wake_time=data["wake_time"],
        sleep_time=data["sleep_time"],
        chronotype=data["chronotype"],
        commitments=[commitment_from_dict(c, i) for i, c in enumerate(raw_commitments)],
        week_start=data.get("week_start"),
        timezone=data.get("timezone"),
        min_slot_minutes=data.get("min_slot_minutes", DEFAULT_MIN_SLOT_MINUTES),
    )
    validate_request(request)
    return request
