# tests/conftest.py
from collections import deque

import numpy as np
import pytest

from storenav.map.grid_map import GridMap
from storenav.types import Coordinate


def bfs_distance(grid_map, start, goal):
    """广度优先搜索得到的真实最短步数 (不可达返回 None)，作为 A* 的对照"""
    if not grid_map.is_walkable(start) or not grid_map.is_walkable(goal):
        return None
    dist = {start: 0}
    queue = deque([start])
    while queue:
        current = queue.popleft()
        if current == goal:
            return dist[current]
        for dx, dy in ((0, -1), (0, 1), (-1, 0), (1, 0)):
            nb = current.offset(dx, dy)
            if grid_map.in_bounds(nb) and grid_map.is_walkable(nb) and nb not in dist:
                dist[nb] = dist[current] + 1
                queue.append(nb)
    return None


def random_grid(seed, width=12, height=9, density=0.3):
    rng = np.random.default_rng(seed)
    return GridMap((rng.random((height, width)) < density).astype(np.int8)), rng


def random_walkable(grid_map, rng):
    free = np.argwhere(grid_map.data == 0)
    y, x = free[rng.integers(len(free))]
    return Coordinate(int(x), int(y))


@pytest.fixture
def bfs():
    return bfs_distance


@pytest.fixture
def open_grid():
    return GridMap.empty(5, 5)


@pytest.fixture
def random_cases():
    """(grid, start, goal) 三元组，覆盖有障碍、可能不可达的情况"""
    cases = []
    for seed in range(40):
        grid_map, rng = random_grid(seed)
        if grid_map.walkable_count() < 2:
            continue
        cases.append((grid_map, random_walkable(grid_map, rng), random_walkable(grid_map, rng)))
    return cases
