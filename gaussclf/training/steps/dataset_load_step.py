# gaussclf/training/steps/dataset_load_step.py
from __future__ import annotations

from gaussclf import logs
from gaussclf.config.training_config import DatasetConfig
from gaussclf.features.dataframe_source import DataFrameFeatureSource
from gaussclf.features.loader import load_feature_frame
from gaussclf.training.context import TrainingContext
from gaussclf.training.step import PipelineStep
from gaussclf.utils.errors import PipelineAbort


class DatasetLoadStep(PipelineStep):
    """
    DatasetLoadStep（FINAL）

    Contract:
    - consumes ctx.cfg.dataset
    - produces ctx.train_source / ctx.eval_source
    - eval labels reuse the train label mapping
    """

    stage = "dataset_load"

    def run(self, ctx: TrainingContext) -> TrainingContext:
        cfg: DatasetConfig | None = getattr(ctx.cfg, "dataset", None)
        if cfg is None:
            raise PipelineAbort("TrainingConfig.dataset is required")

        with self.timed():
            with self.inst.timer("dataset_load.train"):
                ctx.train_source = DataFrameFeatureSource(
                    load_feature_frame(cfg.train_path),
                    feature_columns=cfg.feature_columns,
                    label_column=cfg.label_column,
                    drop_na=cfg.drop_na,
                )

            if cfg.eval_path and ctx.cfg.evaluation_enabled:
                with self.inst.timer("dataset_load.eval"):
                    ctx.eval_source = DataFrameFeatureSource(
                        load_feature_frame(cfg.eval_path),
                        feature_columns=cfg.feature_columns,
                        label_column=cfg.label_column,
                        drop_na=cfg.drop_na,
                        label_names=ctx.train_source.label_names,
                    )

        logs.info(
            f"[DatasetLoadStep] train={cfg.train_path} "
            f"eval={cfg.eval_path if ctx.eval_source is not None else None}"
        )
        return ctx
