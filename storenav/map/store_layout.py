# storenav/map/store_layout.py
import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Mapping, Optional, Sequence

import numpy as np

from storenav.errors import InvalidZoneError
from storenav.types import Coordinate
from .grid_map import GridMap

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Zone:
    """
    商店区域 (货架/柜台) 的矩形占位
    (x, y) 为左上角格子，width/height 以格子数计。
    """
    id: str
    name: str
    x: int
    y: int
    width: int
    height: int

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise InvalidZoneError(
                f"Zone {self.id!r} must have positive size, got {self.width}x{self.height}"
            )

    @property
    def center(self) -> Coordinate:
        return Coordinate(self.x + self.width // 2, self.y + self.height // 2)

    def cells(self) -> Iterable[Coordinate]:
        for dy in range(self.height):
            for dx in range(self.width):
                yield Coordinate(self.x + dx, self.y + dy)


def build_store_grid(width: int, height: int, zones: Sequence[Zone],
                     blocked_zones: bool = True) -> GridMap:
    """
    根据区域矩形生成商店栅格：
    1. 全部初始化为空地 (通道)
    2. 区域矩形内部标记为障碍 (货架不可穿行) 并打上区域标签
    超出地图范围的部分被裁剪。
    """
    grid = np.zeros((height, width), dtype=np.int8)
    zone_tags: Dict[tuple, str] = {}

    for zone in zones:
        clipped = 0
        for cell in zone.cells():
            if not (0 <= cell.x < width and 0 <= cell.y < height):
                clipped += 1
                continue
            if blocked_zones:
                grid[cell.y, cell.x] = 1
            zone_tags[(cell.x, cell.y)] = zone.id
        if clipped:
            logger.warning("Zone %s: %d cell(s) outside the %dx%d store were clipped",
                           zone.id, clipped, width, height)

    return GridMap(grid, zone_tags=zone_tags)


def zones_for_items(item_ids: Iterable[str],
                    catalog: Mapping[str, str],
                    zones: Sequence[Zone]) -> List[Zone]:
    """
    将选中的商品映射为需要经过的区域。
    区域去重，按首次被选中的顺序排列；未知商品/区域记录日志后跳过。
    """
    by_id = {zone.id: zone for zone in zones}
    ordered: List[Zone] = []
    seen = set()
    for item_id in item_ids:
        zone_id: Optional[str] = catalog.get(item_id)
        if zone_id is None:
            logger.warning("Item %r is not in the catalog, skipping", item_id)
            continue
        zone = by_id.get(zone_id)
        if zone is None:
            logger.warning("Item %r refers to unknown zone %r, skipping", item_id, zone_id)
            continue
        if zone.id not in seen:
            seen.add(zone.id)
            ordered.append(zone)
    return ordered
