# storenav/visualization/__init__.py
# plotter 依赖 matplotlib，按需从 storenav.visualization.plotter 导入

from .observers import EfficientObserver, ExperimentObserver, DebugObserver

__all__ = ["EfficientObserver", "ExperimentObserver", "DebugObserver"]
