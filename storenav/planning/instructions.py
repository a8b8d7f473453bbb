# storenav/planning/instructions.py
"""
路径 -> 导航指令

1. assign_directions: 由坐标序列推断每一步的移动方向
2. annotate: 根据方向变化生成 "Turn north" / "Continue forward" 等文案
"""
from dataclasses import replace
from typing import List, Mapping, Optional, Sequence

from storenav.config import InstructionPhrases
from storenav.types import Coordinate, Direction, PathStep


def assign_directions(coords: Sequence[Coordinate]) -> List[PathStep]:
    """第一步没有方向，其余每一步的方向由与上一步的坐标差决定"""
    steps: List[PathStep] = []
    for i, coord in enumerate(coords):
        direction = Direction.between(coords[i - 1], coord) if i > 0 else None
        steps.append(PathStep(coord, direction))
    return steps


def annotate(steps: Sequence[PathStep],
             phrases: Optional[InstructionPhrases] = None,
             landmarks: Optional[Mapping[int, str]] = None) -> List[PathStep]:
    """
    为每一步生成指令，返回新的 PathStep 列表 (输入不被修改)。

    :param steps: 已带方向的路径
    :param phrases: 文案模板，默认 InstructionPhrases()
    :param landmarks: {步序号: 区域名}，在这些位置输出 "Arrive at <zone>"

    到达地标后当前方向清空，下一步总是输出 "Turn <cardinal>"；
    进入地标的一步若改变方向，输出 "Turn <cardinal> and arrive at <zone>"。
    """
    phrases = phrases or InstructionPhrases()
    landmarks = landmarks or {}
    total = len(steps)
    current_direction: Optional[Direction] = None
    annotated: List[PathStep] = []

    for i, step in enumerate(steps):
        turned = step.direction is not None and step.direction != current_direction
        zone = landmarks.get(i)

        if i == 0:
            text = phrases.start
            if zone is not None:
                text = f"{text}; {phrases.waypoint.format(zone=zone)}"
        elif i == total - 1:
            text = phrases.arrival
            if zone is not None:
                text = f"{phrases.waypoint.format(zone=zone)}; {text}"
        elif zone is not None:
            if turned:
                text = phrases.waypoint_turn.format(cardinal=step.direction.cardinal, zone=zone)
            else:
                text = phrases.waypoint.format(zone=zone)
        elif step.direction is None:
            text = phrases.forward
        elif turned:
            text = phrases.turn.format(cardinal=step.direction.cardinal)
        else:
            text = phrases.forward

        annotated.append(replace(step, instruction=text))

        if zone is not None:
            current_direction = None
        elif step.direction is not None:
            current_direction = step.direction

    return annotated


def instruction_lines(steps: Sequence[PathStep]) -> List[str]:
    """只取出带指令的步骤文案 (供播报/打印使用)"""
    return [step.instruction for step in steps if step.instruction]


def count_turns(steps: Sequence[PathStep]) -> int:
    turns = 0
    previous: Optional[Direction] = None
    for step in steps:
        if step.direction is None:
            continue
        if previous is not None and step.direction != previous:
            turns += 1
        previous = step.direction
    return turns

