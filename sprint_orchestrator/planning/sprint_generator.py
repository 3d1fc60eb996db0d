"""Sprint plan generation: prioritize, pack, then synthesize and assign tasks."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Sequence

from sprint_orchestrator.planning.assignment import AssignmentBalancer
from sprint_orchestrator.planning.models import (
    Feature,
    GeneratedSprint,
    PlanningStage,
    SprintConfiguration,
    SprintPlanSummary,
    TeamMember,
)
from sprint_orchestrator.planning.packer import pack_features, sprint_goal, sprint_window
from sprint_orchestrator.planning.prioritizer import prioritize_features
from sprint_orchestrator.planning.tasks import synthesize_sprint_tasks

logger = logging.getLogger(__name__)

StageCallback = Callable[[PlanningStage], None]


def generate_sprint_plan(
    backlog: Iterable[Feature],
    roster: Sequence[TeamMember],
    config: SprintConfiguration,
    *,
    on_stage: StageCallback | None = None,
) -> tuple[GeneratedSprint, ...]:
    """Generate sprints with assigned tasks from a backlog and a roster.

    Only approved features are planned. The optional ``on_stage`` callback is
    invoked synchronously as each stage begins and once more on completion.
    """
    notify = on_stage or _ignore_stage

    notify(PlanningStage.prioritize)
    prioritized = prioritize_features(backlog)
    logger.debug(
        "Prioritized %d approved features",
        len(prioritized),
        extra={"stage": PlanningStage.prioritize.value},
    )

    notify(PlanningStage.pack)
    bins = pack_features(prioritized, config.velocity_per_sprint)
    for sprint_bin in bins:
        logger.debug(
            "Sprint %d closed with %d features at %d points",
            sprint_bin.number,
            len(sprint_bin.features),
            sprint_bin.velocity,
            extra={"stage": PlanningStage.pack.value},
        )

    notify(PlanningStage.synthesize)
    balancer = AssignmentBalancer(roster, config.assignment_mode)
    sprints: list[GeneratedSprint] = []
    for sprint_bin in bins:
        start, end = sprint_window(sprint_bin.number, config)
        sprints.append(
            GeneratedSprint(
                number=sprint_bin.number,
                name=f"Sprint {sprint_bin.number}",
                start_date=start,
                end_date=end,
                goal=sprint_goal(sprint_bin.features),
                velocity=sprint_bin.velocity,
                features=sprint_bin.features,
                tasks=synthesize_sprint_tasks(sprint_bin.features, balancer, due_date=end),
            )
        )

    notify(PlanningStage.complete)
    logger.info(
        "Generated %d sprints from %d approved features (%s assignment)",
        len(sprints),
        len(prioritized),
        config.assignment_mode.value,
        extra={"stage": PlanningStage.complete.value},
    )
    return tuple(sprints)


def summarize_plan(
    sprints: Sequence[GeneratedSprint],
    roster: Sequence[TeamMember],
) -> SprintPlanSummary:
    """Aggregate sprint, task and per-assignee totals for a generated plan."""
    load = {member.user_email: 0 for member in roster}
    unassigned = 0
    task_count = 0
    for sprint in sprints:
        for task in sprint.tasks:
            task_count += 1
            if task.assignee_id is None:
                unassigned += 1
                continue
            load[task.assignee_id] = load.get(task.assignee_id, 0) + 1
    return SprintPlanSummary(
        sprint_count=len(sprints),
        feature_count=sum(len(sprint.features) for sprint in sprints),
        task_count=task_count,
        total_velocity=sum(sprint.velocity for sprint in sprints),
        unassigned_task_count=unassigned,
        assignee_load=load,
    )


def _ignore_stage(stage: PlanningStage) -> None:
    return None
