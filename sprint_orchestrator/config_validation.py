"""Shared configuration validation helpers."""

from __future__ import annotations

from datetime import date, datetime

from sprint_orchestrator.planning.models import AssignmentMode


def require_positive_int(value: int, field_name: str) -> int:
    """Validate a positive integer input and return it."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{field_name} must be an integer.")
    if value <= 0:
        raise ValueError(f"{field_name} must be greater than zero.")
    return value


def validate_choice(value: str, field_name: str, allowed: set[str]) -> str:
    """Validate that a string value is within a set of allowed options."""
    if value not in allowed:
        options = ", ".join(sorted(allowed))
        raise ValueError(f"{field_name} must be one of: {options}.")
    return value


def validate_assignment_mode(value: str) -> AssignmentMode:
    """Validate assignment mode option."""
    allowed = {mode.value for mode in AssignmentMode}
    return AssignmentMode(validate_choice(value, "assignment_mode", allowed))


def parse_iso_date(value: str | date, field_name: str) -> date:
    """Parse a YYYY-MM-DD date string; timestamps are truncated to their date."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(str(value))
    except ValueError as exc:
        raise ValueError(f"{field_name} must be an ISO date (YYYY-MM-DD).") from exc
