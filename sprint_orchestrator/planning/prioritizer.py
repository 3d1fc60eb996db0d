"""Backlog filtering and priority ordering."""

from __future__ import annotations

from collections.abc import Iterable

from sprint_orchestrator.planning.models import Feature, FeatureStatus, Priority

PRIORITY_RANK: dict[str, int] = {
    Priority.critical.value: 4,
    Priority.high.value: 3,
    Priority.medium.value: 2,
    Priority.low.value: 1,
}


def priority_rank(priority: str) -> int:
    """Return the sort rank for a priority; unknown values rank below low."""
    return PRIORITY_RANK.get(priority, 0)


def prioritize_features(backlog: Iterable[Feature]) -> tuple[Feature, ...]:
    """Keep approved features ordered by descending priority.

    ``sorted`` is stable, so features of equal priority keep their backlog order.
    """
    approved = [feature for feature in backlog if feature.status == FeatureStatus.approved.value]
    return tuple(sorted(approved, key=lambda feature: priority_rank(feature.priority), reverse=True))
