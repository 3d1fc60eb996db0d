"""Greedy velocity-capped packing of features into sprints."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date, timedelta

from sprint_orchestrator.planning.models import Complexity, Feature, SprintConfiguration

COMPLEXITY_POINTS: dict[str, int] = {
    Complexity.simple.value: 5,
    Complexity.moderate.value: 13,
    Complexity.complex.value: 21,
}
DEFAULT_FEATURE_POINTS = 13


@dataclass(frozen=True)
class SprintBin:
    """Features packed into a single sprint."""

    number: int
    features: tuple[Feature, ...]
    velocity: int


def feature_points(feature: Feature) -> int:
    """Map feature complexity to effort points."""
    return COMPLEXITY_POINTS.get(feature.complexity, DEFAULT_FEATURE_POINTS)


def pack_features(features: Sequence[Feature], velocity_per_sprint: int) -> tuple[SprintBin, ...]:
    """Bin prioritized features into sprints in a single greedy pass.

    A sprint is closed only when the next feature would exceed the velocity cap
    and the sprint already holds something. A feature larger than the cap
    therefore lands alone in its own sprint instead of being dropped.
    """
    bins: list[SprintBin] = []
    current: list[Feature] = []
    current_velocity = 0
    number = 1

    for feature in features:
        points = feature_points(feature)
        if current_velocity + points > velocity_per_sprint and current:
            bins.append(SprintBin(number=number, features=tuple(current), velocity=current_velocity))
            number += 1
            current = []
            current_velocity = 0
        current.append(feature)
        current_velocity += points

    if current:
        bins.append(SprintBin(number=number, features=tuple(current), velocity=current_velocity))
    return tuple(bins)


def sprint_window(number: int, config: SprintConfiguration) -> tuple[date, date]:
    """Return the inclusive start/end dates for a 1-indexed sprint number."""
    length_days = config.sprint_length_weeks * 7
    start = config.start_date + timedelta(days=(number - 1) * length_days)
    end = start + timedelta(days=length_days - 1)
    return start, end


def sprint_goal(features: Sequence[Feature]) -> str:
    """Generate a one-line sprint goal from the leading feature."""
    primary = features[0]
    if len(features) == 1:
        return f"Complete {primary.title}"
    return f"Implement {primary.title} and {len(features) - 1} supporting features"
