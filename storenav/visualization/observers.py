import logging
import os
import time
from typing import Any, Dict, List, Optional, Tuple

from storenav.planning.interfaces import IPlannerObserver

DEBUG_LOGGER_NAME = "storenav.debug"


class EfficientObserver(IPlannerObserver):
    """默认模式：不记录搜索过程，只把 ERROR 转发到模块 logger"""
    def record_open_set_node(self, node: Any, f: float = 0.0, h: float = 0.0): pass
    def record_current_expansion(self, node: Any): pass
    def set_map_info(self, map_info: Any): pass
    def log(self, message: str, level: str = 'INFO', payload: Optional[Dict] = None):
        if level == 'ERROR':
            logging.getLogger(__name__).error(message)


class ExperimentObserver(IPlannerObserver):
    """
    实验模式
    收集入堆节点与扩展顺序，供 benchmark 统计和 RoutePlotter 叠加绘制。
    同一个观察者可以跨多段路线累积，reset() 清空。
    """
    def __init__(self):
        # (x, y, f, h)
        self.open_set_history: List[Tuple[int, int, float, float]] = []
        # 按扩展顺序排列的 Coordinate
        self.expanded_nodes: List[Any] = []
        self.map_info = None

    def record_open_set_node(self, node: Any, f: float = 0.0, h: float = 0.0):
        x, y = node
        self.open_set_history.append((x, y, f, h))

    def record_current_expansion(self, node: Any):
        self.expanded_nodes.append(node)

    def set_map_info(self, map_info: Any):
        self.map_info = map_info

    def log(self, message: str, level: str = 'INFO', payload: Optional[Dict] = None):
        pass

    def reset(self):
        self.open_set_history.clear()
        self.expanded_nodes.clear()


class _SessionFilter(logging.Filter):
    def __init__(self, session: str):
        super().__init__()
        self.session = session

    def filter(self, record: logging.LogRecord) -> bool:
        return getattr(record, "session", None) == self.session


class DebugObserver(IPlannerObserver):
    """
    Debug 模式：每个会话写一个独立的日志文件，并保留 ExperimentObserver 的数据用于绘图。

    所有会话共用 logger "storenav.debug"，每个会话挂一个只接收本会话记录的 FileHandler，
    close() (或 with 语句退出) 时卸下并关闭该 handler。
    """
    def __init__(self, log_dir: str = "logs/planning_debug"):
        self.viz_observer = ExperimentObserver()

        self.log_dir = log_dir
        os.makedirs(self.log_dir, exist_ok=True)

        timestamp = time.strftime("%Y%m%d_%H%M%S")
        self.session = f"{timestamp}_{id(self):x}"
        self.log_file = os.path.join(self.log_dir, f"plan_debug_{self.session}.log")

        base = logging.getLogger(DEBUG_LOGGER_NAME)
        base.setLevel(logging.DEBUG)
        base.propagate = False

        self._handler = logging.FileHandler(self.log_file, encoding='utf-8')
        self._handler.setLevel(logging.DEBUG)
        self._handler.setFormatter(logging.Formatter('%(asctime)s - %(levelname)s - %(message)s'))
        self._handler.addFilter(_SessionFilter(self.session))
        base.addHandler(self._handler)

        self.logger = logging.LoggerAdapter(base, {"session": self.session})
        self.closed = False
        self.logger.info("=== Debug Session Started ===")

    def __enter__(self) -> "DebugObserver":
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False

    def record_open_set_node(self, node: Any, f: float = 0.0, h: float = 0.0):
        self.viz_observer.record_open_set_node(node, f, h)
        self.logger.debug(f"OpenSet Push: {node} f={f:.1f} h={h:.1f}")

    def record_current_expansion(self, node: Any):
        self.viz_observer.record_current_expansion(node)
        self.logger.debug(f"Expanding: {node}")

    def set_map_info(self, map_info: Any):
        self.viz_observer.set_map_info(map_info)
        self.logger.info(f"Map Info set: {map_info}")

    def log(self, message: str, level: str = 'INFO', payload: Optional[Dict] = None):
        if payload:
            message = f"{message} | Payload: {payload}"

        if level == 'DEBUG':
            self.logger.debug(message)
        elif level == 'WARN':
            self.logger.warning(message)
        elif level == 'ERROR':
            self.logger.error(message)
        else:
            self.logger.info(message)

    def close(self):
        """刷新并释放日志文件句柄，可重复调用"""
        if self.closed:
            return
        self.logger.info("=== Debug Session Closed ===")
        self.logger.logger.removeHandler(self._handler)
        self._handler.close()
        self.closed = True

    @property
    def expanded_nodes(self): return self.viz_observer.expanded_nodes
    @property
    def open_set_history(self): return self.viz_observer.open_set_history
    @property
    def map_info(self): return self.viz_observer.map_info
