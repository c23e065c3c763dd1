# gaussclf/training/steps/model_train_step.py
from __future__ import annotations

from gaussclf import logs
from gaussclf.training.context import TrainingContext
from gaussclf.training.gaussian_train_engine import GaussianTrainEngine
from gaussclf.training.step import PipelineStep
from gaussclf.utils.errors import PipelineAbort, TrainingError


class ModelTrainStep(PipelineStep):
    """
    ModelTrainStep（FINAL）

    Contract:
    - consumes ctx.train_source
    - produces ctx.model
    - training failure aborts the run (no partial model)
    """

    stage = "model_train"

    def run(self, ctx: TrainingContext) -> TrainingContext:
        if ctx.train_source is None:
            raise PipelineAbort("ModelTrainStep requires ctx.train_source")

        engine = GaussianTrainEngine(ctx.cfg.model, inst=self.inst)

        with self.timed():
            try:
                ctx.model = engine.train(source=ctx.train_source)
            except TrainingError as e:
                logs.error(f"[ModelTrainStep] training failed: {e}")
                raise

        ctx.metrics["n_train"] = int(ctx.model.sample_counts.sum())
        return ctx
