#!filepath: tests/training/test_training_pipeline.py
from __future__ import annotations

import json
import math

import pandas as pd
import pytest

from gaussclf.artifact.model_artifact import load_model_artifact
from gaussclf.observability.instrumentation import Instrumentation
from gaussclf.training.context import TrainingContext
from gaussclf.training.pipeline import build_training_pipeline, new_run_id
from gaussclf.training.steps import (
    ArtifactPersistStep,
    ModelTrainStep,
    PriorAssignStep,
)
from gaussclf.utils.errors import (
    PipelineAbort,
    SingularCovarianceError,
    UserInputError,
)


def test_pipeline_end_to_end(training_cfg, tmp_path):
    inst = Instrumentation(enabled=True)
    ctx = build_training_pipeline(training_cfg, inst=inst).run("run-a")

    assert ctx.model_dir == tmp_path / "models" / "run-a"
    assert ctx.model.label_names == ["setosa", "versicolor", "virginica"]
    assert ctx.eval_source is not None

    assert ctx.metrics["eval_split"] == "eval"
    assert ctx.metrics["n_eval"] == 60
    assert ctx.metrics["n_train"] == 120
    assert ctx.metrics["accuracy"] > 0.95
    assert set(ctx.metrics["accuracy_by_label"]) <= {"setosa", "versicolor", "virginica"}

    artifact = load_model_artifact(ctx.model_artifact.path)
    assert artifact.run_id == "run-a"
    assert artifact.feature_names == ["x0", "x1"]
    assert artifact.metrics["accuracy"] == ctx.metrics["accuracy"]

    assert "dataset_load.train" in inst.timeline
    assert "gaussian_train.label_0" in inst.timeline


def test_pipeline_applies_priors(training_cfg):
    training_cfg.model.priors = [0.5, 0.25, 0.25]
    ctx = build_training_pipeline(training_cfg).run("run-p")

    assert ctx.model.log_priors[0] == pytest.approx(math.log(0.5))

    raw = json.loads((ctx.model_artifact.path / "model.json").read_text())
    assert raw["log_priors"][1] == pytest.approx(math.log(0.25))


def test_pipeline_without_eval_uses_train(training_cfg):
    training_cfg.dataset.eval_path = None
    ctx = build_training_pipeline(training_cfg).run("run-t")

    assert ctx.eval_source is None
    assert ctx.metrics["eval_split"] == "train"
    assert ctx.metrics["n_eval"] == 120


def test_pipeline_evaluation_disabled(training_cfg):
    training_cfg.evaluation_enabled = False
    ctx = build_training_pipeline(training_cfg).run("run-n")

    assert "accuracy" not in ctx.metrics
    assert ctx.model_artifact is not None


def test_pipeline_fails_without_artifact(training_cfg, tmp_path):
    df = pd.DataFrame(
        {
            "x0": [0.0, 1.0, 2.0, 9.0],
            "x1": [1.0, 0.0, 2.0, 9.0],
            "label": ["a", "a", "a", "b"],
        }
    )
    path = tmp_path / "single.csv"
    df.to_csv(path, index=False)
    training_cfg.dataset.train_path = str(path)
    training_cfg.dataset.eval_path = None

    with pytest.raises(SingularCovarianceError):
        build_training_pipeline(training_cfg).run("run-f")

    assert not (tmp_path / "models" / "run-f").exists()


def test_steps_require_inputs(training_cfg, tmp_path):
    ctx = TrainingContext(
        run_id="x", cfg=training_cfg, inst=None, model_dir=tmp_path / "x"
    )

    with pytest.raises(PipelineAbort):
        ModelTrainStep().run(ctx)
    with pytest.raises(PipelineAbort):
        ArtifactPersistStep().run(ctx)

    # 未配置 priors 时为 no-op
    assert PriorAssignStep().run(ctx).model is None


def test_new_run_id_prefix():
    assert new_run_id("exp").startswith("exp-")


def test_prior_count_mismatch_is_user_error(training_cfg, tmp_path):
    training_cfg.model.priors = [0.5, 0.5]

    with pytest.raises(UserInputError):
        build_training_pipeline(training_cfg).run("run-m")

    assert not (tmp_path / "models" / "run-m").exists()


def test_failed_run_is_logged(training_cfg):
    from loguru import logger

    training_cfg.model.priors = [1.0]
    captured = []
    sink_id = logger.add(lambda msg: captured.append(str(msg)))
    try:
        with pytest.raises(UserInputError):
            build_training_pipeline(training_cfg).run("run-l")
    finally:
        logger.remove(sink_id)

    assert "[ERROR] run: training run failed" in "".join(captured)
