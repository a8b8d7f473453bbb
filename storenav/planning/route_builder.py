# storenav/planning/route_builder.py
import logging
import math
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple

from storenav.config import GlobalConfig
from storenav.errors import RouteIncompleteError
from storenav.map.base import MapBase
from storenav.map.store_layout import Zone
from storenav.planning.instructions import annotate, count_turns
from storenav.planning.interfaces import IPlannerObserver
from storenav.planning.planners.a_star import AStarPlanner
from storenav.planning.planners.base import PlannerBase
from storenav.types import Coordinate, PathStep

logger = logging.getLogger(__name__)


def resolve_waypoint(grid_map: MapBase, zone: Zone, max_radius: int = 5) -> Optional[Coordinate]:
    """
    在区域中心附近寻找可通行格子。

    半径从 1 到 max_radius 逐级扩大，每个半径扫描完整的 (2r+1)x(2r+1) 正方形：
    外层循环列偏移 -r..r，内层循环行偏移 -r..r，返回第一个可通行格子。
    内部格子在每个半径都会重复扫描，保持该顺序以保证结果可复现。
    """
    center = zone.center
    for radius in range(1, max_radius + 1):
        for dx in range(-radius, radius + 1):
            for dy in range(-radius, radius + 1):
                candidate = center.offset(dx, dy)
                if grid_map.in_bounds(candidate) and grid_map.is_walkable(candidate):
                    return candidate
    return None


@dataclass
class RouteResult:
    """
    一次完整路线规划的结果。
    complete 为 False 表示有区域被跳过或有分段不可达 (路线可能出现 "跳跃")。
    """
    steps: List[PathStep]
    estimated_time: int
    total_distance: int
    waypoints: List[Coordinate] = field(default_factory=list)
    skipped_zones: List[Zone] = field(default_factory=list)
    unreachable_segments: List[Tuple[Coordinate, Coordinate]] = field(default_factory=list)

    @property
    def complete(self) -> bool:
        return not self.skipped_zones and not self.unreachable_segments

    @property
    def coordinates(self) -> List[Coordinate]:
        return [step.coordinate for step in self.steps]

    @property
    def turns(self) -> int:
        return count_turns(self.steps)

    def __len__(self) -> int:
        return len(self.steps)


class RouteBuilder:
    """
    多路点路线拼接：入口 -> 区域1 -> ... -> 区域N -> 收银台

    每一段调用一次规划器；第一段整段加入，之后每段丢弃首个点 (与上一段终点重复)。
    某段不可达时该段不贡献任何点，下一段从最后实际到达的位置出发。
    """

    def __init__(self,
                 grid_map: MapBase,
                 planner: Optional[PlannerBase] = None,
                 config: Optional[GlobalConfig] = None):
        self.grid_map = grid_map
        self.config = config or GlobalConfig()
        self.planner = planner or AStarPlanner(phrases=self.config.phrases)

    def estimate_time(self, distance: int) -> int:
        """估计耗时 [min]，随距离单调不减"""
        return int(math.ceil(distance * self.config.minutes_per_step))

    def resolve(self, zones: Sequence[Zone]) -> Tuple[List[Tuple[Zone, Coordinate]], List[Zone]]:
        """解析所有区域，返回 (成功列表, 跳过列表)"""
        resolved: List[Tuple[Zone, Coordinate]] = []
        skipped: List[Zone] = []
        for zone in zones:
            coord = resolve_waypoint(self.grid_map, zone, self.config.search_radius)
            if coord is None:
                logger.warning("Zone %s (%s): no walkable cell within radius %d of %s, skipping",
                               zone.id, zone.name, self.config.search_radius, zone.center)
                skipped.append(zone)
                continue
            resolved.append((zone, coord))
        return resolved, skipped

    def build(self,
              anchor: Coordinate,
              zones: Sequence[Zone],
              exit_point: Coordinate,
              debugger: Optional[IPlannerObserver] = None) -> RouteResult:
        """入口 -> 各区域 (按给定顺序) -> 收银台"""
        resolved, skipped = self.resolve(zones)
        result = self._stitch(anchor, resolved, exit_point, debugger)
        result.skipped_zones = skipped
        return self._finish(result)

    def build_through(self,
                      anchor: Coordinate,
                      points: Sequence[Coordinate],
                      exit_point: Coordinate,
                      debugger: Optional[IPlannerObserver] = None) -> RouteResult:
        """直接给定已解析的路点坐标"""
        return self._finish(self._stitch(anchor, [(None, p) for p in points], exit_point, debugger))

    def _stitch(self,
                anchor: Coordinate,
                resolved: Sequence[Tuple[Optional[Zone], Coordinate]],
                exit_point: Coordinate,
                debugger: Optional[IPlannerObserver]) -> RouteResult:
        targets = list(resolved) + [(None, exit_point)]
        steps: List[PathStep] = []
        landmarks: Dict[int, List[str]] = {}
        unreachable: List[Tuple[Coordinate, Coordinate]] = []
        position = anchor

        for zone, target in targets:
            segment = self.planner.plan(position, target, self.grid_map, debugger=debugger)
            if not segment:
                logger.warning("No path from %s to %s, continuing from %s", position, target, position)
                unreachable.append((position, target))
                continue

            # 第一段整段加入，之后丢弃与上一段终点重复的首个点
            steps.extend(segment if not steps else segment[1:])
            position = target
            if zone is not None:
                landmarks.setdefault(len(steps) - 1, []).append(zone.name)

        # 整条路线重新生成指令 (只有一个起点/终点文案)，同一格的多个区域合并为一条
        steps = annotate(steps, self.config.phrases,
                         {i: ", ".join(names) for i, names in landmarks.items()})

        return RouteResult(
            steps=steps,
            estimated_time=self.estimate_time(len(steps)),
            total_distance=len(steps),
            waypoints=[coord for _, coord in resolved],
            unreachable_segments=unreachable,
        )

    def _finish(self, result: RouteResult) -> RouteResult:
        if self.config.strict and not result.complete:
            raise RouteIncompleteError(
                f"Route incomplete: {len(result.skipped_zones)} zone(s) skipped, "
                f"{len(result.unreachable_segments)} segment(s) unreachable",
                skipped_zones=result.skipped_zones,
                unreachable_segments=result.unreachable_segments,
            )
        logger.info("Route built: %d steps, ~%d min, complete=%s",
                    result.total_distance, result.estimated_time, result.complete)
        return result


def build_route(grid_map: MapBase,
                anchor: Coordinate,
                zones: Sequence[Zone],
                exit_point: Coordinate,
                config: Optional[GlobalConfig] = None) -> RouteResult:
    return RouteBuilder(grid_map, config=config).build(anchor, zones, exit_point)
