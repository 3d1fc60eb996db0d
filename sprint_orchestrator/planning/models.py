"""Domain records for sprint generation and task allocation."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Any


class FeatureStatus(str, Enum):
    """Known backlog feature states."""

    draft = "draft"
    approved = "approved"
    rejected = "rejected"


class Priority(str, Enum):
    """Feature and task priority levels."""

    critical = "critical"
    high = "high"
    medium = "medium"
    low = "low"


class Complexity(str, Enum):
    """Feature size buckets used for effort estimation."""

    simple = "simple"
    moderate = "moderate"
    complex = "complex"


class MemberRole(str, Enum):
    """Known team member roles."""

    designer = "designer"
    developer = "developer"
    tester = "tester"
    lead = "lead"
    manager = "manager"


class TaskKind(str, Enum):
    """Sub-task kinds synthesized for each feature, in template order."""

    design = "design"
    implement = "implement"
    test = "test"


class AssignmentMode(str, Enum):
    """Assignee selection strategy for a generation run."""

    balanced = "balanced"
    first_eligible = "first_eligible"


class PlanningStage(str, Enum):
    """Synchronous stage boundaries reported during generation."""

    prioritize = "prioritize"
    pack = "pack"
    synthesize = "synthesize"
    complete = "complete"


def _required_text(payload: dict[str, Any], key: str) -> str:
    """Return a required string field, rejecting null or blank values."""
    value = payload[key]
    if value is None or not str(value).strip():
        raise ValueError(f"{key} must be a non-empty value.")
    return str(value)


@dataclass(frozen=True)
class Feature:
    """Backlog feature owned by the caller."""

    id: str
    title: str
    status: str
    priority: str
    complexity: str
    description: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Serialize feature to JSON-compatible dict."""
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "status": self.status,
            "priority": self.priority,
            "complexity": self.complexity,
        }

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> Feature:
        """Restore feature from serialized data."""
        return cls(
            id=_required_text(payload, "id"),
            title=_required_text(payload, "title"),
            description=str(payload.get("description") or ""),
            status=str(payload.get("status", FeatureStatus.draft.value)),
            priority=str(payload.get("priority", Priority.medium.value)),
            complexity=str(payload.get("complexity", Complexity.moderate.value)),
        )


@dataclass(frozen=True)
class TeamMember:
    """Roster entry keyed by email."""

    user_email: str
    full_name: str
    role: str

    def to_dict(self) -> dict[str, Any]:
        """Serialize team member to JSON-compatible dict."""
        return {"user_email": self.user_email, "full_name": self.full_name, "role": self.role}

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> TeamMember:
        """Restore team member from serialized data."""
        email = _required_text(payload, "user_email")
        return cls(
            user_email=email,
            full_name=str(payload.get("full_name") or email),
            role=_required_text(payload, "role"),
        )


@dataclass(frozen=True)
class SprintConfiguration:
    """Caller-supplied parameters for a generation run."""

    start_date: date
    sprint_length_weeks: int = 2
    velocity_per_sprint: int = 40
    assignment_mode: AssignmentMode = AssignmentMode.balanced

    def __post_init__(self) -> None:
        if self.sprint_length_weeks <= 0:
            raise ValueError("sprint_length_weeks must be greater than zero.")
        if self.velocity_per_sprint <= 0:
            raise ValueError("velocity_per_sprint must be greater than zero.")
        if not isinstance(self.assignment_mode, AssignmentMode):
            try:
                mode = AssignmentMode(self.assignment_mode)
            except ValueError as exc:
                options = ", ".join(item.value for item in AssignmentMode)
                raise ValueError(f"assignment_mode must be one of: {options}.") from exc
            object.__setattr__(self, "assignment_mode", mode)

    def to_dict(self) -> dict[str, Any]:
        """Serialize configuration to JSON-compatible dict."""
        return {
            "start_date": self.start_date.isoformat(),
            "sprint_length_weeks": self.sprint_length_weeks,
            "velocity_per_sprint": self.velocity_per_sprint,
            "assignment_mode": self.assignment_mode.value,
        }


@dataclass(frozen=True)
class GeneratedTask:
    """Sub-task synthesized from a feature."""

    title: str
    description: str
    kind: TaskKind
    priority: str
    story_points: int
    estimated_hours: int
    assignee_id: str | None
    feature_id: str
    due_date: date
    status: str = "todo"

    def to_dict(self) -> dict[str, Any]:
        """Serialize task to JSON-compatible dict."""
        return {
            "title": self.title,
            "description": self.description,
            "kind": self.kind.value,
            "priority": self.priority,
            "story_points": self.story_points,
            "estimated_hours": self.estimated_hours,
            "assignee_id": self.assignee_id,
            "feature_id": self.feature_id,
            "due_date": self.due_date.isoformat(),
            "status": self.status,
        }


@dataclass(frozen=True)
class GeneratedSprint:
    """Sprint emitted by a generation run."""

    number: int
    name: str
    start_date: date
    end_date: date
    goal: str
    velocity: int
    features: tuple[Feature, ...]
    tasks: tuple[GeneratedTask, ...]
    status: str = "planning"

    def to_dict(self) -> dict[str, Any]:
        """Serialize sprint to JSON-compatible dict."""
        return {
            "number": self.number,
            "name": self.name,
            "start_date": self.start_date.isoformat(),
            "end_date": self.end_date.isoformat(),
            "goal": self.goal,
            "velocity": self.velocity,
            "status": self.status,
            "features": [feature.to_dict() for feature in self.features],
            "tasks": [task.to_dict() for task in self.tasks],
        }


@dataclass(frozen=True)
class SprintPlanSummary:
    """Aggregate view of a generated plan for review screens."""

    sprint_count: int
    feature_count: int
    task_count: int
    total_velocity: int
    unassigned_task_count: int
    assignee_load: dict[str, int]

    def to_dict(self) -> dict[str, Any]:
        """Serialize summary to JSON-compatible dict."""
        return {
            "sprint_count": self.sprint_count,
            "feature_count": self.feature_count,
            "task_count": self.task_count,
            "total_velocity": self.total_velocity,
            "unassigned_task_count": self.unassigned_task_count,
            "assignee_load": dict(self.assignee_load),
        }
