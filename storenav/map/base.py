# storenav/map/base.py
from abc import ABC, abstractmethod
from typing import Optional

import numpy as np

from storenav.types import Coordinate


class MapBase(ABC):
    """
    地图抽象基类 (只读)
    """

    @property
    @abstractmethod
    def data(self) -> np.ndarray:
        """
        返回地图数据矩阵，通常用于可视化或底层计算。
        约定：0 表示空闲，1 表示障碍物。形状为 (height, width)。
        """
        pass

    @property
    @abstractmethod
    def width(self) -> int:
        """网格宽度 (x方向数量)"""
        pass

    @property
    @abstractmethod
    def height(self) -> int:
        """网格高度 (y方向数量)"""
        pass

    @abstractmethod
    def in_bounds(self, coord: Coordinate) -> bool:
        """检查坐标是否在地图范围内"""
        pass

    @abstractmethod
    def is_walkable(self, coord: Coordinate) -> bool:
        """
        检查格子是否可通行。
        越界坐标抛出 OutOfBoundsError，调用方需先检查 in_bounds。
        """
        pass

    @abstractmethod
    def zone_at(self, coord: Coordinate) -> Optional[str]:
        """返回格子所属区域标签 (没有则为 None)"""
        pass

    def connected(self, a: Coordinate, b: Coordinate) -> bool:
        """
        a、b 是否位于同一连通区域。
        默认不做预判 (返回 True)，由搜索本身决定是否可达。
        """
        return True
