"""
Tests for the heuristic-then-exact coloring orchestrator.
"""
import pytest

from conftest import build_map, clique_rects
from map_colorer.core.error_handling import SearchBudgetExceeded, UncolorableMapError
from map_colorer.core.orchestrator import ColoringOrchestrator, ColoringState, color_map
from map_colorer.types import ColoringMethod, ColoringStatus


def test_heuristic_success(triangle_map):
    orchestrator = ColoringOrchestrator()
    result = orchestrator.run(triangle_map)

    assert orchestrator.state == ColoringState.SUCCESS
    assert result.status == ColoringStatus.SUCCESS
    assert result.method == ColoringMethod.DSATUR
    assert not result.heuristic_failed
    assert not result.failed
    assert [r.color for r in result.regions] == [1, 2, 3]
    assert result.colors_used == 3


def test_result_preserves_names_bounds_and_order(disjoint_map):
    result = color_map(disjoint_map)
    assert [(r.name, r.bounds, r.color) for r in result.regions] == [
        ("A", (0, 0, 10, 10), 1),
        ("B", (20, 20, 30, 30), 1),
    ]
    assert result.color_of("B") == 1
    with pytest.raises(KeyError):
        result.color_of("missing")


def test_k5_is_definitively_failed(k5_map):
    orchestrator = ColoringOrchestrator()
    result = orchestrator.run(k5_map)

    assert orchestrator.state == ColoringState.DEFINITIVELY_FAILED
    assert result.status == ColoringStatus.UNCOLORABLE
    assert result.method is None
    assert result.heuristic_failed
    assert result.failed
    assert [r.color for r in result.regions] == [0, 0, 0, 0, 0]
    with pytest.raises(UncolorableMapError):
        result.raise_for_status()


def test_heuristic_coloring_does_not_leak_into_exact_run(triangle_map):
    orchestrator = ColoringOrchestrator()

    def overflowing_heuristic(region_map):
        for region in region_map:
            region.color = 7
        return False

    orchestrator.heuristic.color = overflowing_heuristic
    result = orchestrator.run(triangle_map)

    assert orchestrator.state == ColoringState.SUCCESS
    assert result.method == ColoringMethod.BACKTRACKING
    assert result.heuristic_failed
    assert [r.color for r in result.regions] == [1, 2, 3]


def test_budget_exhausted(k5_map):
    orchestrator = ColoringOrchestrator(node_limit=2)
    result = orchestrator.run(k5_map)

    assert orchestrator.state == ColoringState.BUDGET_EXHAUSTED
    assert result.status == ColoringStatus.BUDGET_EXHAUSTED
    assert result.failed
    with pytest.raises(SearchBudgetExceeded):
        result.raise_for_status()


def test_builds_adjacency_when_missing():
    region_map = build_map(clique_rects(3), compute=False)
    assert not region_map.neighbors_computed
    result = color_map(region_map)
    assert region_map.neighbors_computed
    assert [r.color for r in result.regions] == [1, 2, 3]


def test_rerun_is_deterministic(grid_map):
    orchestrator = ColoringOrchestrator()
    first = orchestrator.run(grid_map)
    second = orchestrator.run(grid_map)
    assert [r.color for r in first.regions] == [r.color for r in second.regions]
    assert first.method == second.method


def test_successful_result_is_proper(grid_map):
    result = color_map(grid_map)
    assert result.status == ColoringStatus.SUCCESS
    assert grid_map.is_complete_coloring()
    assert all(1 <= r.color <= 4 for r in result.regions)


def test_edge_adjacent_regions_can_share_color():
    region_map = build_map([("A", (0, 0, 10, 10)), ("B", (10, 0, 20, 10))])
    result = color_map(region_map)
    assert [r.color for r in result.regions] == [1, 1]


def test_result_serializes(triangle_map):
    data = color_map(triangle_map).model_dump(mode="json")
    assert data["status"] == "success"
    assert data["method"] == "dsatur"
    assert data["regions"][0] == {"name": "R0", "bounds": [0, 0, 10, 10], "color": 1}
