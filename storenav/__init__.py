"""Store navigator: grid A* routing through store zones."""
from storenav.config import GlobalConfig, InstructionPhrases
from storenav.errors import (
    DegenerateGridError,
    InvalidZoneError,
    OutOfBoundsError,
    RouteIncompleteError,
    StoreNavError,
)
from storenav.map import GridMap, Zone, build_store_grid, zones_for_items
from storenav.planning.planners import AStarPlanner, find_path
from storenav.planning.route_builder import RouteBuilder, RouteResult, build_route, resolve_waypoint
from storenav.types import Coordinate, Direction, PathStep

__version__ = "0.1.0"

__all__ = [
    "GlobalConfig",
    "InstructionPhrases",
    "StoreNavError",
    "DegenerateGridError",
    "InvalidZoneError",
    "OutOfBoundsError",
    "RouteIncompleteError",
    "GridMap",
    "Zone",
    "build_store_grid",
    "zones_for_items",
    "AStarPlanner",
    "find_path",
    "RouteBuilder",
    "RouteResult",
    "build_route",
    "resolve_waypoint",
    "Coordinate",
    "Direction",
    "PathStep",
]
