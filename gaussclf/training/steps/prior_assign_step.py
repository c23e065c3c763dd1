# gaussclf/training/steps/prior_assign_step.py
from __future__ import annotations

from gaussclf import logs
from gaussclf.training.context import TrainingContext
from gaussclf.training.step import PipelineStep
from gaussclf.utils.errors import PipelineAbort, UserInputError


class PriorAssignStep(PipelineStep):
    """
    Apply configured priors (cfg.model.priors) to ctx.model.

    No priors configured -> model is left untouched.
    Priors are NOT normalized or checked for positivity.
    """

    stage = "prior_assign"

    def run(self, ctx: TrainingContext) -> TrainingContext:
        priors = ctx.cfg.model.priors
        if priors is None:
            return ctx

        if ctx.model is None:
            raise PipelineAbort("PriorAssignStep requires ctx.model")

        if len(priors) != ctx.model.label_count:
            raise UserInputError(
                f"model.priors has {len(priors)} entries "
                f"for {ctx.model.label_count} labels"
            )

        ctx.model = ctx.model.with_priors(priors)
        logs.info(f"[PriorAssignStep] priors={list(priors)}")
        return ctx
