"""Loading planning inputs from JSON/YAML documents and serializing plans."""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from datetime import date
from pathlib import Path
from typing import Any

import yaml

from sprint_orchestrator.config_validation import (
    parse_iso_date,
    require_positive_int,
    validate_assignment_mode,
)
from sprint_orchestrator.planning.models import (
    Feature,
    GeneratedSprint,
    SprintConfiguration,
    SprintPlanSummary,
    TeamMember,
)

_YAML_SUFFIXES = {".yaml", ".yml"}
_PLAN_SPRINT_KEYS = ("name", "start_date", "end_date", "goal", "velocity", "features", "tasks")
_PLAN_TASK_KEYS = ("title", "priority", "story_points", "estimated_hours")
_PLAN_SUMMARY_KEYS = ("sprint_count", "task_count", "unassigned_task_count")
_CONFIG_KEYS = {"start_date", "sprint_length_weeks", "velocity_per_sprint", "assignment_mode"}


class PlanningInputError(ValueError):
    """Raised when a planning input document is malformed."""


@dataclass(frozen=True)
class PlanningInput:
    """Backlog, roster and configuration overrides read from a document."""

    features: tuple[Feature, ...]
    team_members: tuple[TeamMember, ...]
    config_overrides: dict[str, Any] = field(default_factory=dict)


def load_planning_input(path: Path) -> PlanningInput:
    """Read a planning input document from JSON or YAML."""
    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() in _YAML_SUFFIXES:
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise PlanningInputError(f"invalid YAML in {path}: {exc}") from exc
    else:
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise PlanningInputError(f"invalid JSON in {path}: {exc}") from exc
    return parse_planning_input(data)


def parse_planning_input(data: Any) -> PlanningInput:
    """Validate a decoded planning document."""
    if not isinstance(data, dict):
        raise PlanningInputError("planning input must be an object.")
    raw_features = data.get("features", data.get("backlog", []))
    raw_members = data.get("team_members", data.get("roster", []))
    raw_config = data.get("config") or {}
    if not isinstance(raw_config, dict):
        raise PlanningInputError("config must be an object.")
    unknown = sorted(set(raw_config) - _CONFIG_KEYS)
    if unknown:
        raise PlanningInputError(f"unknown config keys: {', '.join(unknown)}")
    features = _parse_items(raw_features, "features", Feature.from_dict)
    members = _parse_items(raw_members, "team_members", TeamMember.from_dict)
    return PlanningInput(
        features=tuple(features),
        team_members=tuple(members),
        config_overrides=dict(raw_config),
    )


def build_configuration(
    overrides: Mapping[str, Any],
    *,
    default_start_date: date,
    start_date: date | None = None,
    sprint_length_weeks: int | None = None,
    velocity_per_sprint: int | None = None,
    assignment_mode: str | None = None,
) -> SprintConfiguration:
    """Merge explicit options over document overrides over defaults."""
    merged: dict[str, Any] = dict(overrides)
    explicit = {
        "start_date": start_date,
        "sprint_length_weeks": sprint_length_weeks,
        "velocity_per_sprint": velocity_per_sprint,
        "assignment_mode": assignment_mode,
    }
    merged.update({key: value for key, value in explicit.items() if value is not None})

    kwargs: dict[str, Any] = {
        "start_date": parse_iso_date(merged.get("start_date", default_start_date), "start_date"),
    }
    if "sprint_length_weeks" in merged:
        kwargs["sprint_length_weeks"] = require_positive_int(
            merged["sprint_length_weeks"], "sprint_length_weeks"
        )
    if "velocity_per_sprint" in merged:
        kwargs["velocity_per_sprint"] = require_positive_int(
            merged["velocity_per_sprint"], "velocity_per_sprint"
        )
    if "assignment_mode" in merged:
        kwargs["assignment_mode"] = validate_assignment_mode(str(merged["assignment_mode"]))
    return SprintConfiguration(**kwargs)


def plan_to_payload(
    sprints: Sequence[GeneratedSprint],
    summary: SprintPlanSummary,
    *,
    config: SprintConfiguration | None = None,
    roster: Sequence[TeamMember] = (),
) -> dict[str, Any]:
    """Build the JSON-compatible payload for a generated plan."""
    payload: dict[str, Any] = {
        "summary": summary.to_dict(),
        "sprints": [sprint.to_dict() for sprint in sprints],
        "team_members": [member.to_dict() for member in roster],
    }
    if config is not None:
        payload["config"] = config.to_dict()
    return payload


def write_plan(payload: dict[str, Any], path: Path) -> Path:
    """Persist a plan payload as JSON."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(payload, indent=2) + "\n", encoding="utf-8")
    return path


def read_plan(path: Path) -> dict[str, Any]:
    """Load a previously written plan payload."""
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise PlanningInputError(f"invalid JSON in {path}: {exc}") from exc
    if not isinstance(data, dict) or not isinstance(data.get("sprints"), list):
        raise PlanningInputError("plan payload must be an object with a sprints list.")
    _check_plan_entries(data)
    return data


def _parse_items(raw: Any, field_name: str, factory: Any) -> list[Any]:
    if not isinstance(raw, list):
        raise PlanningInputError(f"{field_name} must be a list.")
    items = []
    for index, item in enumerate(raw):
        if not isinstance(item, dict):
            raise PlanningInputError(f"{field_name}[{index}] is not an object.")
        try:
            items.append(factory(item))
        except KeyError as exc:
            raise PlanningInputError(f"{field_name}[{index}] is missing {exc.args[0]!r}.") from exc
        except ValueError as exc:
            raise PlanningInputError(f"{field_name}[{index}]: {exc}") from exc
    return items


def _check_plan_entries(data: dict[str, Any]) -> None:
    """Reject plan payloads that lack the fields needed to render them."""
    summary = data.get("summary")
    if summary:
        _require_keys(summary, _PLAN_SUMMARY_KEYS, "summary")
    for index, member in enumerate(data.get("team_members", [])):
        _require_keys(member, ("user_email",), f"team_members[{index}]")
    for index, sprint in enumerate(data["sprints"]):
        label = f"sprints[{index}]"
        _require_keys(sprint, _PLAN_SPRINT_KEYS, label)
        for key in ("features", "tasks"):
            if not isinstance(sprint[key], list):
                raise PlanningInputError(f"{label}.{key} must be a list.")
        for task_index, task in enumerate(sprint["tasks"]):
            _require_keys(task, _PLAN_TASK_KEYS, f"{label}.tasks[{task_index}]")


def _require_keys(entry: Any, keys: Sequence[str], label: str) -> None:
    if not isinstance(entry, dict):
        raise PlanningInputError(f"{label} is not an object.")
    for key in keys:
        if key not in entry:
            raise PlanningInputError(f"{label} is missing {key!r}.")
