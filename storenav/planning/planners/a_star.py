# storenav/planning/planners/a_star.py
import heapq
import logging
from typing import Dict, List, Optional, Set, Tuple

from storenav.config import InstructionPhrases
from storenav.errors import OutOfBoundsError
from storenav.map.base import MapBase
from storenav.planning.heuristics.base import Heuristic
from storenav.planning.heuristics.manhattan import ManhattanHeuristic
from storenav.planning.instructions import annotate, assign_directions
from storenav.planning.interfaces import IPlannerObserver
from storenav.planning.planners.base import PlannerBase
from storenav.types import Coordinate, Direction, PathStep, SearchNode
from storenav.visualization.observers import EfficientObserver

logger = logging.getLogger(__name__)

# 扩展顺序固定：上、下、左、右
NEIGHBOR_ORDER = (Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT)


class AStarPlanner(PlannerBase):
    """
    4-连通、单位代价栅格上的 A* 实现。

    工作流程：
    1. 起终点越界直接抛出 OutOfBoundsError；不可通行或不连通则返回空路径。
    2. 节点存放在节点池 (arena) 中，parent 记录为下标。
    3. OpenSet 使用二叉堆，键为 (f, h, 发现顺序)：
       f 相同时 h 小者优先，再相同时先发现者优先。
       节点 g 值被改进时原地更新并重新入堆，旧的堆项在弹出时丢弃。
    4. 回溯得到坐标序列后生成方向与导航指令。
    """

    def __init__(self,
                 heuristic: Optional[Heuristic] = None,
                 phrases: Optional[InstructionPhrases] = None):
        self.h_fn = heuristic or ManhattanHeuristic()
        self.phrases = phrases or InstructionPhrases()

    def plan(self,
             start: Coordinate,
             goal: Coordinate,
             grid_map: MapBase,
             debugger: Optional[IPlannerObserver] = None) -> List[PathStep]:

        # 1. 初始化观察者
        if debugger is None:
            debugger = EfficientObserver()
        debugger.set_map_info(grid_map)

        # 2. 边界检查：越界属于集成错误，快速失败
        for coord in (start, goal):
            if not grid_map.in_bounds(coord):
                raise OutOfBoundsError(coord, grid_map.width, grid_map.height)

        if not grid_map.is_walkable(start) or not grid_map.is_walkable(goal):
            debugger.log("Start or goal is not walkable", level='WARN',
                         payload={'start': start, 'goal': goal})
            logger.info("[A*] %s -> %s: endpoint is blocked, no path", start, goal)
            return []

        # 不在同一连通区域时无需搜索
        if not grid_map.connected(start, goal):
            debugger.log("Start and goal are in different components", level='INFO',
                         payload={'start': start, 'goal': goal})
            logger.info("[A*] %s -> %s: goal unreachable, no path", start, goal)
            return []

        coords = self._search(start, goal, grid_map, debugger)
        if not coords:
            return []

        path = annotate(assign_directions(coords), self.phrases)
        debugger.log("Path found", payload={'start': start, 'goal': goal, 'length': len(path)})
        return path

    def _search(self,
                start: Coordinate,
                goal: Coordinate,
                grid_map: MapBase,
                debugger: IPlannerObserver) -> List[Coordinate]:
        # 节点池：arena[i] 的 parent 是池中下标
        root = SearchNode(start, 0, self.h_fn.estimate(start, goal))
        arena: List[SearchNode] = [root]

        # OpenSet: 堆项 (f, h, arena_index)，arena_index 即发现顺序
        open_heap: List[Tuple[float, float, int]] = [(root.f, root.h, 0)]
        open_index: Dict[Coordinate, int] = {start: 0}
        closed: Set[Coordinate] = set()

        while open_heap:
            f, _, current_idx = heapq.heappop(open_heap)
            current = arena[current_idx]

            # 已关闭，或该堆项在入堆后被更优的 g 值取代
            if current.coord in closed or f != current.f:
                continue

            del open_index[current.coord]
            closed.add(current.coord)
            debugger.record_current_expansion(current.coord)

            # A. 终止条件
            if current.coord == goal:
                return self._reconstruct_path(arena, current_idx)

            # B. 扩展邻居
            for direction in NEIGHBOR_ORDER:
                dx, dy = direction.delta
                neighbor = current.coord.offset(dx, dy)

                if not grid_map.in_bounds(neighbor) or not grid_map.is_walkable(neighbor):
                    continue
                if neighbor in closed:
                    continue

                tentative_g = current.g + 1
                existing_idx = open_index.get(neighbor)

                if existing_idx is None:
                    node = SearchNode(neighbor, tentative_g, self.h_fn.estimate(neighbor, goal), current_idx)
                    arena.append(node)
                    existing_idx = len(arena) - 1
                    open_index[neighbor] = existing_idx
                elif tentative_g < arena[existing_idx].g:
                    node = arena[existing_idx]
                    node.g = tentative_g
                    node.parent = current_idx
                else:
                    continue

                heapq.heappush(open_heap, (node.f, node.h, existing_idx))
                debugger.record_open_set_node(neighbor, node.f, node.h)

        logger.debug("[A*] Open set is empty, no path found from %s to %s", start, goal)
        return []

    @staticmethod
    def _reconstruct_path(arena: List[SearchNode], idx: int) -> List[Coordinate]:
        """沿 parent 下标回溯并反转为 起点 -> 终点"""
        coords: List[Coordinate] = []
        while idx != -1:
            node = arena[idx]
            coords.append(node.coord)
            idx = node.parent
        return coords[::-1]


def find_path(grid_map: MapBase, start: Coordinate, goal: Coordinate,
              heuristic: Optional[Heuristic] = None) -> List[PathStep]:
    """使用默认配置 (曼哈顿启发式) 规划一次"""
    return AStarPlanner(heuristic=heuristic).plan(start, goal, grid_map)
