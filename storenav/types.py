# storenav/types.py
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional


@dataclass(frozen=True)
class Coordinate:
    """
    栅格坐标
    x 为列 (column)，y 为行 (row)，原点在左上角。
    """
    x: int
    y: int

    def __iter__(self) -> Iterator[int]:
        # 支持 x, y = coord 解包
        yield self.x
        yield self.y

    def manhattan(self, other: "Coordinate") -> int:
        return abs(self.x - other.x) + abs(self.y - other.y)

    def offset(self, dx: int, dy: int) -> "Coordinate":
        return Coordinate(self.x + dx, self.y + dy)


class Direction(Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def cardinal(self) -> str:
        return _CARDINALS[self]

    @property
    def delta(self):
        return _DELTAS[self]

    @classmethod
    def between(cls, prev: Coordinate, curr: Coordinate) -> "Direction":
        """
        由相邻两点推断移动方向。
        竖直方向优先于水平方向 (输出兼容性要求，不是几何必然)。
        """
        if curr.y < prev.y:
            return cls.UP
        if curr.y > prev.y:
            return cls.DOWN
        if curr.x < prev.x:
            return cls.LEFT
        return cls.RIGHT


_CARDINALS = {
    Direction.UP: "north",
    Direction.DOWN: "south",
    Direction.LEFT: "west",
    Direction.RIGHT: "east",
}

# 邻居扩展顺序固定为 上、下、左、右
_DELTAS = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}


@dataclass
class SearchNode:
    """搜索树节点，parent 为节点池 (arena) 中的下标，根节点为 -1"""
    coord: Coordinate
    g: int
    h: float
    parent: int = -1

    @property
    def f(self) -> float:
        return self.g + self.h


@dataclass(frozen=True)
class PathStep:
    coordinate: Coordinate
    direction: Optional[Direction] = None
    instruction: Optional[str] = None

    # 为了方便访问 x, y (绘图里常用 step.x)
    @property
    def x(self) -> int: return self.coordinate.x

    @property
    def y(self) -> int: return self.coordinate.y
