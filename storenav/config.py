# [关键] 全局配置定义

# storenav/config.py
from dataclasses import dataclass, field


@dataclass
class InstructionPhrases:
    """导航指令文案"""
    start: str = "Start from entrance"
    arrival: str = "Arrive at checkout"
    forward: str = "Continue forward"
    turn: str = "Turn {cardinal}"
    waypoint: str = "Arrive at {zone}"
    waypoint_turn: str = "Turn {cardinal} and arrive at {zone}"


@dataclass
class GlobalConfig:
    search_radius: int = 5          # 区域中心附近寻找可行走格子的最大半径
    minutes_per_step: float = 0.5   # 每一步的估计耗时 [min]
    strict: bool = False            # True: 任一路点/分段失败即抛出 RouteIncompleteError
    debug_mode: bool = False
    phrases: InstructionPhrases = field(default_factory=InstructionPhrases)
