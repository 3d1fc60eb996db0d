"""Pydantic models for the sprint planning API."""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel, Field

from sprint_orchestrator.planning.models import Feature, TeamMember


class FeaturePayload(BaseModel):
    """Backlog feature as sent by the dashboard."""

    id: str = Field(..., min_length=1)
    title: str = Field(..., min_length=1)
    description: str = ""
    status: str
    priority: str
    complexity: str = "moderate"

    def to_domain(self) -> Feature:
        """Convert to the engine's feature record."""
        return Feature(
            id=self.id,
            title=self.title,
            description=self.description,
            status=self.status,
            priority=self.priority,
            complexity=self.complexity,
        )


class TeamMemberPayload(BaseModel):
    """Roster entry as sent by the dashboard."""

    user_email: str = Field(..., min_length=1)
    full_name: str = ""
    role: str

    def to_domain(self) -> TeamMember:
        """Convert to the engine's team member record."""
        return TeamMember(
            user_email=self.user_email,
            full_name=self.full_name or self.user_email,
            role=self.role,
        )


class SprintConfigPayload(BaseModel):
    """Sprint configuration chosen in the generator dialog."""

    start_date: date
    sprint_length_weeks: int = 2
    velocity_per_sprint: int = 40
    assignment_mode: str = "balanced"


class SprintGenerationRequest(BaseModel):
    """Request payload for generating a sprint plan."""

    features: list[FeaturePayload] = Field(default_factory=list)
    team_members: list[TeamMemberPayload] = Field(default_factory=list)
    config: SprintConfigPayload


class TaskResponse(BaseModel):
    """Generated task."""

    title: str
    description: str
    kind: str
    priority: str
    story_points: int
    estimated_hours: int
    assignee_id: str | None
    feature_id: str
    due_date: date
    status: str


class SprintResponse(BaseModel):
    """Generated sprint."""

    number: int
    name: str
    start_date: date
    end_date: date
    goal: str
    velocity: int
    status: str
    features: list[FeaturePayload]
    tasks: list[TaskResponse]


class PlanSummaryResponse(BaseModel):
    """Plan totals for the review step."""

    sprint_count: int
    feature_count: int
    task_count: int
    total_velocity: int
    unassigned_task_count: int
    assignee_load: dict[str, int]


class SprintGenerationResponse(BaseModel):
    """Response payload for a generated sprint plan."""

    sprints: list[SprintResponse]
    summary: PlanSummaryResponse
