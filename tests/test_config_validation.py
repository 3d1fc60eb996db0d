"""Tests for config validation helpers."""

from __future__ import annotations

from datetime import date, datetime

import pytest

from sprint_orchestrator.config_validation import (
    parse_iso_date,
    require_positive_int,
    validate_assignment_mode,
    validate_choice,
)
from sprint_orchestrator.planning.models import AssignmentMode, SprintConfiguration


def test_require_positive_int_accepts_positive() -> None:
    assert require_positive_int(3, "velocity") == 3


@pytest.mark.parametrize("value", [0, -4, True, 2.5])
def test_require_positive_int_rejects_invalid(value: object) -> None:
    with pytest.raises(ValueError):
        require_positive_int(value, "velocity")  # type: ignore[arg-type]


def test_validate_choice_lists_options() -> None:
    with pytest.raises(ValueError, match="must be one of: a, b"):
        validate_choice("c", "mode", {"b", "a"})


def test_validate_assignment_mode_accepts_first_eligible() -> None:
    """Assignment mode validator should allow the legacy selection mode."""
    assert validate_assignment_mode("first_eligible") is AssignmentMode.first_eligible


def test_parse_iso_date() -> None:
    assert parse_iso_date("2024-01-01", "start_date") == date(2024, 1, 1)
    assert parse_iso_date(date(2024, 1, 1), "start_date") == date(2024, 1, 1)
    parsed = parse_iso_date(datetime(2024, 1, 1, 10, 0), "start_date")
    assert parsed == date(2024, 1, 1)
    assert type(parsed) is date
    with pytest.raises(ValueError, match="start_date"):
        parse_iso_date("01/02/2024", "start_date")


def test_sprint_configuration_validates_boundaries() -> None:
    with pytest.raises(ValueError):
        SprintConfiguration(start_date=date(2024, 1, 1), velocity_per_sprint=0)
    with pytest.raises(ValueError):
        SprintConfiguration(start_date=date(2024, 1, 1), sprint_length_weeks=0)
    with pytest.raises(ValueError, match="assignment_mode"):
        SprintConfiguration(start_date=date(2024, 1, 1), assignment_mode="random")  # type: ignore[arg-type]


def test_sprint_configuration_coerces_mode_strings() -> None:
    config = SprintConfiguration(
        start_date=date(2024, 1, 1),
        assignment_mode="first_eligible",  # type: ignore[arg-type]
    )
    assert config.assignment_mode is AssignmentMode.first_eligible
