# storenav/planning/heuristics/manhattan.py
from storenav.types import Coordinate
from .base import Heuristic


class ManhattanHeuristic(Heuristic):
    """
    曼哈顿距离 (L1).
    Cost = |dx| + |dy|
    在 4-连通、单位代价的栅格上它恰好是无障碍时的真实代价，
    从不高估 (Admissible)，因此 A* 返回最短路径。
    """
    def estimate(self, current: Coordinate, goal: Coordinate) -> float:
        return abs(current.x - goal.x) + abs(current.y - goal.y)
