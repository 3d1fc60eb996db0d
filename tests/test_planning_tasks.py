"""Tests for the per-feature task template."""

from __future__ import annotations

from datetime import date

from conftest import make_feature, make_member

from sprint_orchestrator.planning.assignment import AssignmentBalancer
from sprint_orchestrator.planning.models import TaskKind
from sprint_orchestrator.planning.tasks import synthesize_feature_tasks, synthesize_sprint_tasks

DUE = date(2024, 1, 14)


def _roster():
    return [
        make_member("d@x.io", "designer"),
        make_member("dev@x.io", "developer"),
        make_member("t@x.io", "tester"),
    ]


def test_feature_expands_to_design_implement_test() -> None:
    feature = make_feature("F", title="Checkout", priority="low", complexity="complex")
    design, implement, test = synthesize_feature_tasks(
        feature, AssignmentBalancer(_roster()), due_date=DUE
    )

    assert design.title == "Design Checkout"
    assert design.description == (
        "Create UI/UX design and technical specifications for Checkout"
    )
    assert (design.kind, design.priority, design.story_points, design.estimated_hours) == (
        TaskKind.design,
        "high",
        3,
        8,
    )
    assert design.assignee_id == "d@x.io"

    assert implement.title == "Implement Checkout"
    assert implement.description == "Develop the core functionality for Checkout"
    assert implement.priority == "low"
    assert implement.story_points == 16
    assert implement.estimated_hours == 32
    assert implement.assignee_id == "dev@x.io"

    assert test.title == "Test Checkout"
    assert test.description == "Write and execute tests for Checkout"
    assert (test.priority, test.story_points, test.estimated_hours) == ("medium", 2, 4)
    assert test.assignee_id == "t@x.io"

    for task in (design, implement, test):
        assert task.feature_id == "F"
        assert task.status == "todo"
        assert task.due_date == DUE


def test_simple_feature_keeps_zero_point_implement_task() -> None:
    feature = make_feature("S", complexity="simple")
    _, implement, _ = synthesize_feature_tasks(feature, AssignmentBalancer([]), due_date=DUE)
    assert implement.story_points == 0
    assert implement.estimated_hours == 0
    assert implement.assignee_id is None


def test_task_points_add_up_to_feature_points() -> None:
    for complexity, points in (("simple", 5), ("moderate", 13), ("complex", 21), ("x", 13)):
        tasks = synthesize_feature_tasks(
            make_feature("F", complexity=complexity),
            AssignmentBalancer(_roster()),
            due_date=DUE,
        )
        assert sum(task.story_points for task in tasks) == points


def test_sprint_tasks_follow_feature_order() -> None:
    features = [make_feature("A"), make_feature("B")]
    tasks = synthesize_sprint_tasks(features, AssignmentBalancer(_roster()), due_date=DUE)
    assert [task.feature_id for task in tasks] == ["A", "A", "A", "B", "B", "B"]
    assert [task.kind for task in tasks] == [
        TaskKind.design,
        TaskKind.implement,
        TaskKind.test,
    ] * 2
