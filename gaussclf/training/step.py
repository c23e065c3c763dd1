# gaussclf/training/step.py
from __future__ import annotations

from gaussclf.observability.instrumentation import (
    Instrumentation,
    NoOpInstrumentation,
)
from gaussclf.training.context import TrainingContext


class PipelineStep:
    """
    Pipeline Step 基类

    职责：
      1. 执行一段训练语义（读 ctx → 写 ctx）
      2. 提供 Step 级时间边界（parent scope，不进入 timeline）
    """

    stage: str = ""

    def __init__(self, inst: Instrumentation | None = None):
        self.inst: Instrumentation | NoOpInstrumentation = (
            inst if inst is not None else NoOpInstrumentation()
        )

    @property
    def step_name(self) -> str:
        return self.__class__.__name__

    def timed(self):
        return self.inst.timer(self.step_name, record=False)

    def run(self, ctx: TrainingContext) -> TrainingContext:
        raise NotImplementedError
