#!filepath: gaussclf/observability/instrumentation.py
from __future__ import annotations

from collections import OrderedDict
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Dict

from gaussclf import logs
from gaussclf.observability.metrics import MetricRecorder
from gaussclf.observability.timer import Timer


@dataclass
class Instrumentation:
    """
    Instrumentation（Leaf-only accounting + Parent scope）

    规则：
    1. timeline 只记录叶子节点（record=True）
    2. 父级 timer 仅作为时间边界（record=False），不产生副作用
    3. Instrumentation 本身不在热路径打日志
    """

    enabled: bool = True

    def __post_init__(self):
        self._timer = Timer(enabled=self.enabled)
        self.metrics = MetricRecorder(enabled=self.enabled)
        self.timeline: Dict[str, float] = OrderedDict()

    def timer(self, name: str, *, record: bool = True):
        inst = self

        @contextmanager
        def _ctx():
            if not inst.enabled:
                yield
                return

            inst._timer.start(name)
            try:
                yield
            finally:
                elapsed = inst._timer.end(name)
                if record:
                    inst.timeline[name] = elapsed

        return _ctx()

    def generate_timeline_report(self, title: str) -> None:
        if not self.enabled:
            return

        logs.info(f"[Timeline] ===== timeline for {title} =====")
        total = 0.0
        for name, sec in self.timeline.items():
            logs.info(f"[Timeline] {str(name):<30} {sec:>8.3f}s")
            total += sec
        logs.info(f"[Timeline] Total{'':<27} {total:>8.3f}s")


class NoOpInstrumentation:
    """Instrumentation disabled 时使用。"""

    enabled = False

    def __init__(self):
        self.metrics = MetricRecorder(enabled=False)
        self.timeline: Dict[str, float] = {}

    def timer(self, name: str, *, record: bool = True):
        return _NoOpTimer()

    def generate_timeline_report(self, title: str) -> None:
        pass


class _NoOpTimer:
    def __enter__(self):
        pass

    def __exit__(self, exc_type, exc, tb):
        pass
