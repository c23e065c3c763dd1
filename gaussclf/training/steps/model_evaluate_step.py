# gaussclf/training/steps/model_evaluate_step.py
from __future__ import annotations

from gaussclf import logs
from gaussclf.inference.gaussian_classifier import GaussianClassifier
from gaussclf.training.context import TrainingContext
from gaussclf.training.evaluate_engine import AccuracyEvaluateEngine
from gaussclf.training.step import PipelineStep


class ModelEvaluateStep(PipelineStep):
    """
    Accuracy on ctx.eval_source (falls back to ctx.train_source).
    """

    stage = "model_evaluate"

    def __init__(self, inst=None):
        super().__init__(inst)
        self.engine = AccuracyEvaluateEngine()

    def run(self, ctx: TrainingContext) -> TrainingContext:
        if not ctx.cfg.evaluation_enabled or ctx.model is None:
            return ctx

        source = ctx.eval_source if ctx.eval_source is not None else ctx.train_source
        split = "eval" if ctx.eval_source is not None else "train"

        with self.timed():
            with self.inst.timer("model_evaluate"):
                result = self.engine.evaluate(GaussianClassifier(ctx.model), source)

        ctx.metrics["eval_split"] = split
        ctx.metrics.update(result)
        self.inst.metrics.record("accuracy", result["accuracy"])

        logs.info(
            f"[ModelEvaluateStep] split={split} n={result['n_eval']} "
            f"accuracy={result['accuracy']:.4f}"
        )
        return ctx
