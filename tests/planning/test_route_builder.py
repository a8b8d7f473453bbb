# tests/planning/test_route_builder.py
import math

import pytest

from storenav.config import GlobalConfig
from storenav.errors import RouteIncompleteError
from storenav.map.grid_map import GridMap
from storenav.map.store_layout import Zone, build_store_grid
from storenav.planning.heuristics import ZeroHeuristic
from storenav.planning.planners import AStarPlanner
from storenav.planning.route_builder import RouteBuilder, build_route, resolve_waypoint
from storenav.types import Coordinate

C = Coordinate

ENCLOSED = GridMap.from_ascii([
    ".......",
    "....###",
    "....#.#",
    "....###",
    ".......",
])


def assert_no_adjacent_duplicates(result):
    for a, b in zip(result.coordinates, result.coordinates[1:]):
        assert a != b


def assert_every_heading_change_announced(result):
    steps = result.steps
    for i in range(1, len(steps) - 1):
        if steps[i].direction != steps[i - 1].direction:
            assert "turn" in steps[i].instruction.lower(), (i, [s.instruction for s in steps])


# --- resolve_waypoint ---

def test_resolve_prefers_scan_order_at_radius_one():
    zone = Zone("dairy", "Dairy", 2, 1, 3, 1)
    grid_map = build_store_grid(7, 5, [zone])
    # 中心 (3,1) 是货架，半径 1 时先扫描列偏移 -1、行偏移 -1
    assert resolve_waypoint(grid_map, zone) == C(2, 0)


def test_resolve_expands_radius():
    zone = Zone("island", "Island", 2, 2, 3, 3)
    grid_map = build_store_grid(7, 7, [zone])
    assert resolve_waypoint(grid_map, zone) == C(1, 1)


def test_resolve_fails_beyond_radius():
    zone = Zone("wall", "Wall", 1, 1, 11, 11)
    grid_map = build_store_grid(13, 13, [zone])
    assert resolve_waypoint(grid_map, zone) is None
    assert resolve_waypoint(grid_map, zone, max_radius=6) == C(0, 0)


def test_resolve_ignores_out_of_bounds_cells():
    grid_map = GridMap.empty(3, 3)
    corner = Zone("corner", "Corner", 0, 0, 1, 1)
    # 正方形包含中心本身 (偏移 0,0)；列偏移 -1 的格子全部越界被跳过
    assert resolve_waypoint(grid_map, corner) == C(0, 0)


# --- RouteBuilder ---

def test_join_coordinates_appear_once(open_grid):
    result = RouteBuilder(open_grid).build_through(C(0, 0), [C(2, 2), C(4, 4)], C(4, 0))

    assert result.coordinates == [
        C(0, 0), C(0, 1), C(0, 2), C(1, 2), C(2, 2),
        C(2, 3), C(2, 4), C(3, 4), C(4, 4),
        C(4, 3), C(4, 2), C(4, 1), C(4, 0),
    ]
    assert result.coordinates.count(C(2, 2)) == 1
    assert result.coordinates.count(C(4, 4)) == 1
    assert result.total_distance == 13
    assert result.estimated_time == 7
    assert result.waypoints == [C(2, 2), C(4, 4)]
    assert result.complete
    assert_no_adjacent_duplicates(result)


def test_route_is_annotated_as_one_path(open_grid):
    result = RouteBuilder(open_grid).build_through(C(0, 0), [C(2, 2), C(4, 4)], C(4, 0))
    texts = [s.instruction for s in result.steps]

    assert texts.count("Start from entrance") == 1
    assert texts.count("Arrive at checkout") == 1
    assert texts[0] == "Start from entrance"
    assert texts[-1] == "Arrive at checkout"
    assert texts[9] == "Turn north"
    assert result.turns == 4


def test_build_through_zones_marks_arrivals():
    zone = Zone("dairy", "Dairy", 2, 1, 3, 1)
    grid_map = build_store_grid(7, 5, [zone])
    result = RouteBuilder(grid_map).build(C(0, 4), [zone], C(6, 4))

    assert result.coordinates[0] == C(0, 4)
    assert result.coordinates[-1] == C(6, 4)
    assert result.total_distance == 15
    assert result.estimated_time == math.ceil(15 * 0.5)
    assert result.coordinates.count(C(2, 0)) == 1
    idx = result.coordinates.index(C(2, 0))
    assert result.steps[idx].instruction.lower().endswith("arrive at dairy")
    assert all(grid_map.is_walkable(c) for c in result.coordinates)


def test_waypoints_visited_in_input_order(open_grid):
    points = [C(4, 4), C(0, 4), C(4, 0)]
    result = RouteBuilder(open_grid).build_through(C(0, 0), points, C(2, 2))
    pos = 0
    for p in points:
        # index 找不到时抛出 ValueError
        pos = result.coordinates.index(p, pos)
    assert result.coordinates[-1] == C(2, 2)


def test_no_waypoints_goes_straight_to_exit(open_grid):
    result = build_route(open_grid, C(0, 0), [], C(3, 0))
    assert result.coordinates == [C(0, 0), C(1, 0), C(2, 0), C(3, 0)]
    assert result.estimated_time == 2


def test_anchor_equal_to_exit(open_grid):
    result = build_route(open_grid, C(1, 1), [], C(1, 1))
    assert result.total_distance == 1
    assert result.estimated_time == 1
    assert result.steps[0].instruction == "Start from entrance"


def test_repeated_waypoints_do_not_duplicate_steps(open_grid):
    result = RouteBuilder(open_grid).build_through(C(0, 0), [C(0, 0), C(3, 3), C(3, 3)], C(0, 0))
    assert_no_adjacent_duplicates(result)
    assert result.total_distance == 13


def test_no_adjacent_duplicates_on_random_grids(random_cases):
    for grid_map, start, goal in random_cases:
        builder = RouteBuilder(grid_map)
        for points in ([], [goal], [goal, start], [start, goal, goal]):
            assert_no_adjacent_duplicates(builder.build_through(start, points, goal))


def test_unresolvable_zone_is_skipped(caplog):
    wall = Zone("wall", "Wall", 1, 1, 11, 11)
    grid_map = build_store_grid(13, 13, [wall])
    result = RouteBuilder(grid_map).build(C(0, 0), [wall], C(12, 12))

    assert result.skipped_zones == [wall]
    assert not result.complete
    assert result.total_distance == 25
    assert "skipping" in caplog.text


def test_unreachable_waypoint_continues_from_last_position():
    result = RouteBuilder(ENCLOSED).build_through(C(0, 0), [C(5, 2)], C(6, 4))

    assert result.unreachable_segments == [(C(0, 0), C(5, 2))]
    assert not result.complete
    assert result.coordinates[0] == C(0, 0)
    assert result.coordinates[-1] == C(6, 4)
    assert result.total_distance == 11


def test_unreachable_exit_keeps_partial_route():
    result = RouteBuilder(ENCLOSED).build_through(C(0, 0), [C(3, 3)], C(5, 2))
    assert result.coordinates[-1] == C(3, 3)
    assert result.unreachable_segments == [(C(3, 3), C(5, 2))]

    empty = RouteBuilder(ENCLOSED).build_through(C(0, 0), [], C(5, 2))
    assert empty.steps == []
    assert empty.total_distance == 0
    assert empty.estimated_time == 0


def test_strict_mode_raises():
    builder = RouteBuilder(ENCLOSED, config=GlobalConfig(strict=True))
    with pytest.raises(RouteIncompleteError) as excinfo:
        builder.build_through(C(0, 0), [C(5, 2)], C(6, 4))
    assert excinfo.value.unreachable_segments == [(C(0, 0), C(5, 2))]

    wall = Zone("wall", "Wall", 1, 1, 11, 11)
    strict = RouteBuilder(build_store_grid(13, 13, [wall]), config=GlobalConfig(strict=True))
    with pytest.raises(RouteIncompleteError) as excinfo:
        strict.build(C(0, 0), [wall], C(12, 12))
    assert excinfo.value.skipped_zones == [wall]


def test_custom_planner_and_time_constant(open_grid):
    builder = RouteBuilder(open_grid,
                           planner=AStarPlanner(heuristic=ZeroHeuristic()),
                           config=GlobalConfig(minutes_per_step=0.25))
    result = builder.build_through(C(0, 0), [C(4, 4)], C(0, 4))
    assert result.total_distance == 13
    assert result.estimated_time == 4


def test_estimated_time_is_monotonic(open_grid):
    builder = RouteBuilder(open_grid)
    times = [builder.estimate_time(d) for d in range(50)]
    assert times == sorted(times)


def test_every_heading_change_is_announced_on_store_routes():
    zone = Zone("z", "Z", 2, 2, 3, 2)
    grid_map = build_store_grid(7, 6, [zone])
    cells = [C(x, y) for y in range(6) for x in range(7) if grid_map.is_walkable(C(x, y))]
    builder = RouteBuilder(grid_map)

    for anchor in cells:
        for exit_point in cells:
            result = builder.build(anchor, [zone], exit_point)
            assert result.complete
            assert_every_heading_change_announced(result)


def test_turn_at_join_is_announced():
    zone = Zone("z", "Z", 2, 2, 3, 2)
    grid_map = build_store_grid(7, 6, [zone])
    result = RouteBuilder(grid_map).build(C(1, 0), [zone], C(4, 1))
    assert_every_heading_change_announced(result)
    idx = result.coordinates.index(resolve_waypoint(grid_map, zone))
    assert "arrive at z" in result.steps[idx].instruction.lower()
    assert result.steps[idx + 1].instruction.startswith("Turn ")


def test_zones_sharing_a_cell_are_all_announced(open_grid):
    dairy = Zone("dairy", "Dairy", 2, 2, 1, 1)
    bakery = Zone("bakery", "Bakery", 2, 2, 1, 1)
    result = RouteBuilder(open_grid).build(C(0, 0), [dairy, bakery], C(4, 2))

    # 两个区域解析到同一格，只出现一次并合并文案
    assert result.waypoints == [C(1, 1), C(1, 1)]
    assert result.coordinates.count(C(1, 1)) == 1
    idx = result.coordinates.index(C(1, 1))
    assert result.steps[idx].instruction.endswith("rrive at Dairy, Bakery")


def test_zone_at_anchor_or_exit_is_announced(open_grid):
    produce = Zone("produce", "Produce", 0, 0, 1, 1)
    snacks = Zone("snacks", "Snacks", 4, 0, 1, 1)
    result = RouteBuilder(open_grid).build(C(0, 0), [produce, snacks], C(3, 0))

    assert result.waypoints == [C(0, 0), C(3, 0)]
    assert result.coordinates == [C(0, 0), C(1, 0), C(2, 0), C(3, 0)]
    assert result.steps[0].instruction == "Start from entrance; Arrive at Produce"
    assert result.steps[-1].instruction == "Arrive at Snacks; Arrive at checkout"
