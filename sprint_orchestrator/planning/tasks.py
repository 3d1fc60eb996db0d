"""Fixed design/implement/test task template per feature."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import date

from sprint_orchestrator.planning.assignment import AssignmentBalancer
from sprint_orchestrator.planning.models import Feature, GeneratedTask, Priority, TaskKind
from sprint_orchestrator.planning.packer import feature_points

DESIGN_POINTS = 3
DESIGN_HOURS = 8
TEST_POINTS = 2
TEST_HOURS = 4
IMPLEMENT_HOURS_PER_POINT = 2


def synthesize_feature_tasks(
    feature: Feature,
    balancer: AssignmentBalancer,
    *,
    due_date: date,
) -> tuple[GeneratedTask, GeneratedTask, GeneratedTask]:
    """Expand a feature into design, implement and test tasks, in that order.

    Implementation points are the feature points minus the fixed design and
    test share, so the three tasks always add up to the feature's points.
    """
    implement_points = feature_points(feature) - DESIGN_POINTS - TEST_POINTS
    design = GeneratedTask(
        title=f"Design {feature.title}",
        description=f"Create UI/UX design and technical specifications for {feature.title}",
        kind=TaskKind.design,
        priority=Priority.high.value,
        story_points=DESIGN_POINTS,
        estimated_hours=DESIGN_HOURS,
        assignee_id=balancer.assign(TaskKind.design),
        feature_id=feature.id,
        due_date=due_date,
    )
    implement = GeneratedTask(
        title=f"Implement {feature.title}",
        description=f"Develop the core functionality for {feature.title}",
        kind=TaskKind.implement,
        priority=feature.priority,
        story_points=implement_points,
        estimated_hours=implement_points * IMPLEMENT_HOURS_PER_POINT,
        assignee_id=balancer.assign(TaskKind.implement),
        feature_id=feature.id,
        due_date=due_date,
    )
    test = GeneratedTask(
        title=f"Test {feature.title}",
        description=f"Write and execute tests for {feature.title}",
        kind=TaskKind.test,
        priority=Priority.medium.value,
        story_points=TEST_POINTS,
        estimated_hours=TEST_HOURS,
        assignee_id=balancer.assign(TaskKind.test),
        feature_id=feature.id,
        due_date=due_date,
    )
    return design, implement, test


def synthesize_sprint_tasks(
    features: Sequence[Feature],
    balancer: AssignmentBalancer,
    *,
    due_date: date,
) -> tuple[GeneratedTask, ...]:
    """Synthesize tasks for every feature of a sprint in feature order."""
    tasks: list[GeneratedTask] = []
    for feature in features:
        tasks.extend(synthesize_feature_tasks(feature, balancer, due_date=due_date))
    return tuple(tasks)
