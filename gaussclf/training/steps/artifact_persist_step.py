# gaussclf/training/steps/artifact_persist_step.py
from __future__ import annotations

from gaussclf.artifact.model_artifact import ModelSpec, save_model_artifact
from gaussclf.training.context import TrainingContext
from gaussclf.training.step import PipelineStep
from gaussclf.utils.errors import PipelineAbort


class ArtifactPersistStep(PipelineStep):
    """
    ArtifactPersistStep（FINAL / FROZEN）

    Semantics:
    - Persist the run-scoped model into ctx.model_dir
    - Produces ModelArtifact bound to the run
    """

    stage = "artifact_persist"

    def run(self, ctx: TrainingContext) -> TrainingContext:
        if ctx.model is None:
            raise PipelineAbort("No model to persist")

        spec = ModelSpec(
            family=ctx.cfg.model.name,
            version=ctx.cfg.model.version,
        )

        with self.timed():
            ctx.model_artifact = save_model_artifact(
                ctx.model_dir,
                ctx.model,
                spec=spec,
                run_id=ctx.run_id,
                metrics=dict(ctx.metrics),
                feature_names=list(ctx.cfg.dataset.feature_columns),
            )

        return ctx
