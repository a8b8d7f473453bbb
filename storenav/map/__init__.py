# storenav/map/__init__.py

from .base import MapBase
from .grid_map import GridMap
from .store_layout import Zone, build_store_grid, zones_for_items

__all__ = ["MapBase", "GridMap", "Zone", "build_store_grid", "zones_for_items"]
