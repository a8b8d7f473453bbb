# storenav/planning/heuristics/__init__.py

from .base import Heuristic
from .manhattan import ManhattanHeuristic
from .zero import ZeroHeuristic


__all__ = [
    "Heuristic",
    "ManhattanHeuristic",
    "ZeroHeuristic",
]
