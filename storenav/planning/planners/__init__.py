# storenav/planning/planners/__init__.py

from .base import PlannerBase
from .a_star import AStarPlanner, find_path


__all__ = [
    "PlannerBase",
    "AStarPlanner",
    "find_path",
]
