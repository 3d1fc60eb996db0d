"""Shared fixtures for sprint planning tests."""

from __future__ import annotations

from datetime import date

import pytest

from sprint_orchestrator.planning.models import Feature, SprintConfiguration, TeamMember


def make_feature(
    feature_id: str,
    *,
    priority: str = "medium",
    complexity: str = "moderate",
    status: str = "approved",
    title: str | None = None,
) -> Feature:
    return Feature(
        id=feature_id,
        title=title or f"Feature {feature_id}",
        status=status,
        priority=priority,
        complexity=complexity,
    )


def make_member(email: str, role: str, name: str | None = None) -> TeamMember:
    return TeamMember(user_email=email, full_name=name or email.split("@")[0].title(), role=role)


@pytest.fixture
def example_backlog() -> list[Feature]:
    return [
        make_feature("F1", priority="critical", complexity="simple"),
        make_feature("F2", priority="high", complexity="complex"),
        make_feature("F3", priority="low", complexity="moderate"),
    ]


@pytest.fixture
def example_roster() -> list[TeamMember]:
    return [
        make_member("d@example.com", "designer", "Dana Designer"),
        make_member("dev@example.com", "developer", "Devon Developer"),
        make_member("t@example.com", "tester", "Tess Tester"),
    ]


@pytest.fixture
def example_config() -> SprintConfiguration:
    return SprintConfiguration(
        start_date=date(2024, 1, 1),
        sprint_length_weeks=2,
        velocity_per_sprint=20,
    )
