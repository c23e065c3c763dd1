# gaussclf/training/pipeline.py
from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import List

from gaussclf import logs
from gaussclf.config.training_config import TrainingConfig
from gaussclf.observability.instrumentation import Instrumentation
from gaussclf.training.context import TrainingContext
from gaussclf.training.step import PipelineStep
from gaussclf.training.steps import (
    ArtifactPersistStep,
    DatasetLoadStep,
    ModelEvaluateStep,
    ModelTrainStep,
    PriorAssignStep,
)


class TrainingPipeline:
    """
    TrainingPipeline（FINAL / FROZEN）

    Semantics:
    - Pipeline owns ordering and the context
    - Steps execute semantics
    - Any step exception aborts the run
    """

    def __init__(
            self,
            *,
            steps: List[PipelineStep],
            inst: Instrumentation,
            cfg: TrainingConfig,
    ):
        self.steps = steps
        self.inst = inst
        self.cfg = cfg

    @logs.catch(msg="training run failed")
    def run(self, run_id: str | None = None) -> TrainingContext:
        run_id = run_id or new_run_id(self.cfg.name)
        logs.info(f"[TrainingPipeline] START run_id={run_id}")

        ctx = TrainingContext(
            run_id=run_id,
            cfg=self.cfg,
            inst=self.inst,
            model_dir=Path(self.cfg.model.artifact_root) / run_id,
        )

        for step in self.steps:
            ctx = step.run(ctx)

        self.inst.generate_timeline_report(run_id)
        logs.info("[TrainingPipeline] DONE")
        return ctx


def new_run_id(name: str) -> str:
    return f"{name}-{datetime.now().strftime('%Y%m%d-%H%M%S')}"


def build_training_pipeline(
        cfg: TrainingConfig,
        inst: Instrumentation | None = None,
) -> TrainingPipeline:
    inst = inst if inst is not None else Instrumentation()

    steps: List[PipelineStep] = [
        DatasetLoadStep(inst),
        ModelTrainStep(inst),
        PriorAssignStep(inst),
        ModelEvaluateStep(inst),
        ArtifactPersistStep(inst),
    ]
    return TrainingPipeline(steps=steps, inst=inst, cfg=cfg)
