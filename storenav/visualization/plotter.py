# 绘图逻辑 (Matplotlib)

# storenav/visualization/plotter.py
from typing import Optional, Sequence

import matplotlib.pyplot as plt
from matplotlib.patches import Rectangle

from storenav.map.grid_map import GridMap
from storenav.map.store_layout import Zone
from storenav.types import PathStep


class RoutePlotter:
    """
    绘制商店栅格、区域、搜索过程与最终路线。
    坐标系与栅格一致：x 向右，y 向下 (imshow 默认 origin='upper')。
    """

    def __init__(self, grid_map: GridMap, zones: Sequence[Zone] = ()):
        self.map = grid_map
        self.zones = list(zones)
        self.fig = None
        self.ax = None

    def draw(self, steps: Sequence[PathStep], observer=None, ax=None, title: Optional[str] = None):
        if ax is None:
            self.fig, ax = plt.subplots(figsize=(10, 8))
        else:
            self.fig = ax.figure
        self.ax = ax

        # A. 地图背景 (障碍为深色)
        ax.imshow(self.map.data, cmap='Greys', vmin=0, vmax=1, alpha=0.5,
                  extent=(-0.5, self.map.width - 0.5, self.map.height - 0.5, -0.5))

        # B. 区域矩形及名称
        for zone in self.zones:
            ax.add_patch(Rectangle((zone.x - 0.5, zone.y - 0.5), zone.width, zone.height,
                                   fill=False, edgecolor='tab:cyan', linewidth=1.5))
            ax.text(zone.x + zone.width / 2 - 0.5, zone.y + zone.height / 2 - 0.5, zone.name,
                    ha='center', va='center', fontsize=7)

        # C. 已探索节点 (来自 ExperimentObserver / DebugObserver)
        expanded = getattr(observer, 'expanded_nodes', None)
        if expanded:
            ax.scatter([c.x for c in expanded], [c.y for c in expanded],
                       c='red', s=4, alpha=0.3, label='Expanded Nodes')

        # D. 路线
        if steps:
            xs = [s.x for s in steps]
            ys = [s.y for s in steps]
            ax.plot(xs, ys, 'b-', linewidth=2.5, label='Route')
            ax.plot(xs[0], ys[0], 'go', markersize=10, label='Entrance')
            ax.plot(xs[-1], ys[-1], 'rx', markersize=10, label='Checkout')

        ax.set_title(title or "Store Route")
        ax.set_xlim(-0.5, self.map.width - 0.5)
        ax.set_ylim(self.map.height - 0.5, -0.5)
        ax.set_aspect('equal')
        ax.grid(True, linestyle=':', alpha=0.3)
        if steps or expanded:
            ax.legend(loc='upper right', fontsize=7)
        return ax

    def save(self, path: str):
        if self.fig is None:
            raise RuntimeError("Nothing drawn yet, call draw() first")
        self.fig.tight_layout()
        self.fig.savefig(path)
        plt.close(self.fig)

    def show(self):
        plt.show()
