#!filepath: gaussclf/observability/timer.py
import time
from typing import Dict


class Timer:
    """
    命名计时器: start(name) / end(name) → 秒
    """

    def __init__(self, enabled: bool = True):
        self.enabled = enabled
        self._start: Dict[str, float] = {}

    def start(self, name: str) -> None:
        if self.enabled:
            self._start[name] = time.perf_counter()

    def end(self, name: str) -> float:
        if not self.enabled or name not in self._start:
            return 0.0
        return time.perf_counter() - self._start.pop(name)
