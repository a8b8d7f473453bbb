# storenav/simulation/narrator.py
import logging
from typing import Callable, List, Optional, Sequence

from storenav.planning.instructions import instruction_lines
from storenav.types import PathStep

logger = logging.getLogger(__name__)


class Narrator:
    """
    导航指令播报。
    静音状态只属于播报层，规划核心对此一无所知。
    speak 回调默认写入日志；接入语音合成时替换为 TTS 调用即可。
    """

    def __init__(self, speak: Optional[Callable[[str], None]] = None, muted: bool = False):
        self._speak = speak or (lambda text: logger.info("[Voice] %s", text))
        self.muted = muted

    def script(self, steps: Sequence[PathStep]) -> List[str]:
        """按顺序取出需要播报的文案 (没有指令的步骤跳过)"""
        return instruction_lines(steps)

    def play(self, steps: Sequence[PathStep]) -> int:
        """播报整条路线，返回实际播报的条数 (静音时为 0)"""
        if self.muted:
            return 0
        lines = self.script(steps)
        for text in lines:
            self._speak(text)
        return len(lines)

    def mute(self):
        self.muted = True

    def unmute(self):
        self.muted = False

    def toggle_mute(self) -> bool:
        self.muted = not self.muted
        return self.muted
