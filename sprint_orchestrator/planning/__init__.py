"""Sprint planning engine: prioritizer, packer and task synthesizer."""

from __future__ import annotations

from sprint_orchestrator.planning.models import (
    AssignmentMode,
    Feature,
    GeneratedSprint,
    GeneratedTask,
    PlanningStage,
    SprintConfiguration,
    SprintPlanSummary,
    TaskKind,
    TeamMember,
)
from sprint_orchestrator.planning.sprint_generator import generate_sprint_plan, summarize_plan

__all__ = [
    "AssignmentMode",
    "Feature",
    "GeneratedSprint",
    "GeneratedTask",
    "PlanningStage",
    "SprintConfiguration",
    "SprintPlanSummary",
    "TaskKind",
    "TeamMember",
    "generate_sprint_plan",
    "summarize_plan",
]
