# storenav/planning/planners/base.py
from abc import ABC, abstractmethod
from typing import List, Optional

from storenav.map.base import MapBase
from storenav.planning.interfaces import IPlannerObserver
from storenav.types import Coordinate, PathStep


class PlannerBase(ABC):
    """
    所有栅格路径规划器的抽象基类
    """

    @abstractmethod
    def plan(self,
             start: Coordinate,
             goal: Coordinate,
             grid_map: MapBase,
             debugger: Optional[IPlannerObserver] = None) -> List[PathStep]:
        """
        执行路径规划
        :param start: 起点坐标
        :param goal: 目标坐标
        :param grid_map: 环境地图
        :param debugger: 观察者钩子 (用于可视化搜索过程)
        :return: 带方向和指令的路径 (如果失败返回空列表)
        """
        pass
