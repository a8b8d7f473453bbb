# storenav/map/grid_map.py
import logging
from typing import Dict, Iterable, Optional, Sequence, Tuple

import numpy as np
from scipy.ndimage import label

from storenav.errors import DegenerateGridError, OutOfBoundsError
from storenav.types import Coordinate
from .base import MapBase

logger = logging.getLogger(__name__)


class GridMap(MapBase):
    """
    不可变的矩形栅格地图。
    构造完成后底层矩阵被设置为只读，可以在多个规划调用之间共享。
    """

    def __init__(self, data, zone_tags: Optional[Dict[Tuple[int, int], str]] = None):
        try:
            grid = np.array(data, dtype=np.int8)
        except ValueError as exc:
            # 不规则的嵌套列表 (各行长度不同)
            raise DegenerateGridError(f"Grid rows must all have the same length: {exc}") from exc

        if grid.ndim != 2:
            raise DegenerateGridError(f"Grid must be 2-D, got {grid.ndim}-D input")
        if grid.shape[0] <= 0 or grid.shape[1] <= 0:
            raise DegenerateGridError(f"Grid must have positive area, got shape {grid.shape}")

        grid = (grid != 0).astype(np.int8)  # 统一成 0/1
        grid.flags.writeable = False

        self._grid = grid
        self._height, self._width = grid.shape
        self._zone_tags: Dict[Coordinate, str] = {}
        for (x, y), zone_id in (zone_tags or {}).items():
            coord = Coordinate(x, y)
            self._check_bounds(coord)
            self._zone_tags[coord] = zone_id

        self._labels: Optional[np.ndarray] = None

    @classmethod
    def from_walkable(cls, rows: Sequence[Sequence[bool]],
                      zone_tags: Optional[Dict[Tuple[int, int], str]] = None) -> "GridMap":
        """从 "可通行" 布尔矩阵构造 (True = 可通行)"""
        if len(rows) == 0:
            raise DegenerateGridError("Grid must have at least one row")
        widths = {len(row) for row in rows}
        if len(widths) != 1:
            raise DegenerateGridError(f"Grid rows must all have the same length, got {sorted(widths)}")
        blocked = [[0 if walkable else 1 for walkable in row] for row in rows]
        return cls(blocked, zone_tags=zone_tags)

    @classmethod
    def empty(cls, width: int, height: int) -> "GridMap":
        if width <= 0 or height <= 0:
            raise DegenerateGridError(f"Grid dimensions must be positive, got {width}x{height}")
        return cls(np.zeros((height, width), dtype=np.int8))

    @classmethod
    def from_ascii(cls, lines: Iterable[str], blocked: str = "#") -> "GridMap":
        """测试辅助：'#' 为障碍，其余字符为空地"""
        rows = [line for line in lines if line]
        return cls.from_walkable([[ch != blocked for ch in row] for row in rows])

    @property
    def data(self) -> np.ndarray:
        return self._grid

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def zone_tags(self) -> Dict[Coordinate, str]:
        return dict(self._zone_tags)

    def in_bounds(self, coord: Coordinate) -> bool:
        return (0 <= coord.x < self._width) and (0 <= coord.y < self._height)

    def _check_bounds(self, coord: Coordinate) -> None:
        if not self.in_bounds(coord):
            raise OutOfBoundsError(coord, self._width, self._height)

    def is_walkable(self, coord: Coordinate) -> bool:
        self._check_bounds(coord)
        return self._grid[coord.y, coord.x] == 0

    def is_obstacle(self, coord: Coordinate) -> bool:
        return not self.is_walkable(coord)

    def zone_at(self, coord: Coordinate) -> Optional[str]:
        self._check_bounds(coord)
        return self._zone_tags.get(coord)

    def walkable_count(self) -> int:
        return int(np.count_nonzero(self._grid == 0))

    def component_of(self, coord: Coordinate) -> int:
        """
        4-连通区域编号 (障碍格为 0)。
        首次调用时用 scipy.ndimage.label 一次性计算，之后复用。
        """
        self._check_bounds(coord)
        if self._labels is None:
            # 默认结构元素是十字形，即 4-连通
            labels, num = label(self._grid == 0)
            labels.flags.writeable = False
            self._labels = labels
            logger.debug("Labelled %d walkable components on %dx%d grid", num, self._width, self._height)
        return int(self._labels[coord.y, coord.x])

    def connected(self, a: Coordinate, b: Coordinate) -> bool:
        """两点均可通行且位于同一连通区域"""
        comp_a = self.component_of(a)
        return comp_a != 0 and comp_a == self.component_of(b)

    def __repr__(self) -> str:
        return f"GridMap({self._width}x{self._height}, walkable={self.walkable_count()})"
