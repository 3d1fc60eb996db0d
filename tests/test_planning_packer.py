"""Tests for greedy sprint packing, windows and goals."""

from __future__ import annotations

from datetime import date

from conftest import make_feature

from sprint_orchestrator.planning.models import SprintConfiguration
from sprint_orchestrator.planning.packer import (
    feature_points,
    pack_features,
    sprint_goal,
    sprint_window,
)


def test_feature_points_follow_complexity_table() -> None:
    assert feature_points(make_feature("a", complexity="simple")) == 5
    assert feature_points(make_feature("b", complexity="moderate")) == 13
    assert feature_points(make_feature("c", complexity="complex")) == 21
    assert feature_points(make_feature("d", complexity="galactic")) == 13
    assert feature_points(make_feature("e", complexity="")) == 13


def test_pack_fills_until_cap_then_opens_new_sprint() -> None:
    features = [make_feature(str(index), complexity="simple") for index in range(5)]
    bins = pack_features(features, velocity_per_sprint=10)
    assert [len(sprint_bin.features) for sprint_bin in bins] == [2, 2, 1]
    assert [sprint_bin.velocity for sprint_bin in bins] == [10, 10, 5]
    assert [sprint_bin.number for sprint_bin in bins] == [1, 2, 3]


def test_oversized_feature_is_placed_alone() -> None:
    features = [
        make_feature("small", complexity="simple"),
        make_feature("huge", complexity="complex"),
        make_feature("mid", complexity="moderate"),
    ]
    bins = pack_features(features, velocity_per_sprint=20)
    assert [[feature.id for feature in sprint_bin.features] for sprint_bin in bins] == [
        ["small"],
        ["huge"],
        ["mid"],
    ]
    assert [sprint_bin.velocity for sprint_bin in bins] == [5, 21, 13]


def test_oversized_first_feature_does_not_emit_empty_sprint() -> None:
    bins = pack_features([make_feature("huge", complexity="complex")], velocity_per_sprint=1)
    assert len(bins) == 1
    assert bins[0].velocity == 21


def test_packing_does_not_look_ahead_for_smaller_features() -> None:
    features = [
        make_feature("a", complexity="moderate"),
        make_feature("b", complexity="moderate"),
        make_feature("c", complexity="simple"),
    ]
    bins = pack_features(features, velocity_per_sprint=20)
    assert [[feature.id for feature in sprint_bin.features] for sprint_bin in bins] == [
        ["a"],
        ["b", "c"],
    ]


def test_empty_input_produces_no_bins() -> None:
    assert pack_features([], velocity_per_sprint=40) == ()


def test_sprint_windows_are_contiguous() -> None:
    config = SprintConfiguration(start_date=date(2024, 1, 1), sprint_length_weeks=2)
    assert sprint_window(1, config) == (date(2024, 1, 1), date(2024, 1, 14))
    assert sprint_window(2, config) == (date(2024, 1, 15), date(2024, 1, 28))
    assert sprint_window(3, config) == (date(2024, 1, 29), date(2024, 2, 11))


def test_one_week_window_crosses_year_boundary() -> None:
    config = SprintConfiguration(start_date=date(2024, 12, 30), sprint_length_weeks=1)
    assert sprint_window(1, config) == (date(2024, 12, 30), date(2025, 1, 5))


def test_sprint_goal_wording() -> None:
    login = make_feature("1", title="Login")
    search = make_feature("2", title="Search")
    export = make_feature("3", title="Export")
    assert sprint_goal([login]) == "Complete Login"
    assert sprint_goal([login, search, export]) == "Implement Login and 2 supporting features"
