# storenav/errors.py
"""
统一异常定义
NoPathFound 不是异常：规划失败时返回空列表。
"""


class StoreNavError(Exception):
    """Base class for all store navigator errors."""


class DegenerateGridError(StoreNavError, ValueError):
    """Grid input has zero area, is not 2-D, or has ragged rows."""


class OutOfBoundsError(StoreNavError, IndexError):
    """A coordinate lies outside the grid."""

    def __init__(self, coord, width: int, height: int):
        self.coord = coord
        self.width = width
        self.height = height
        super().__init__(f"{tuple(coord)} out of bounds for {width}x{height} grid")


class InvalidZoneError(StoreNavError, ValueError):
    """Zone rectangle with a non-positive width or height."""


class RouteIncompleteError(StoreNavError, RuntimeError):
    """Raised by a strict RouteBuilder when part of the route could not be planned."""

    def __init__(self, message: str, skipped_zones=(), unreachable_segments=()):
        super().__init__(message)
        self.skipped_zones = list(skipped_zones)
        self.unreachable_segments = list(unreachable_segments)
