#!filepath: tests/artifact/test_model_artifact.py
from __future__ import annotations

import json
import math

import numpy as np
import pytest

from gaussclf.artifact.model_artifact import (
    META_FILE,
    MODEL_FILE,
    ModelSpec,
    load_model_artifact,
    save_model_artifact,
)
from gaussclf.features.dataframe_source import DataFrameFeatureSource
from gaussclf.inference.gaussian_classifier import GaussianClassifier
from gaussclf.training.gaussian_train_engine import gaussian_train
from gaussclf.utils.errors import ModelArtifactError


@pytest.fixture
def named_model(blob_frame):
    source = DataFrameFeatureSource(
        blob_frame, feature_columns=["x0", "x1"], label_column="label"
    )
    return gaussian_train(source)


def test_save_and_load_preserves_model(tmp_path, named_model):
    model = named_model.with_priors([0.5, 0.3, 0.2])
    save_model_artifact(
        tmp_path / "run",
        model,
        spec=ModelSpec(version="v2"),
        run_id="run-1",
        metrics={"accuracy": 0.99},
        feature_names=["x0", "x1"],
    )

    loaded = load_model_artifact(tmp_path / "run")
    m = loaded.model

    assert loaded.run_id == "run-1"
    assert loaded.spec == ModelSpec(family="gaussian", task="classification", version="v2")
    assert loaded.metrics == {"accuracy": 0.99}
    assert loaded.feature_names == ["x0", "x1"]
    assert loaded.created_at is not None

    assert m.dim == model.dim
    assert m.label_names == ["setosa", "versicolor", "virginica"]
    np.testing.assert_array_equal(m.means, model.means)
    np.testing.assert_array_equal(m.precisions, model.precisions)
    np.testing.assert_array_equal(m.log_coefs, model.log_coefs)
    np.testing.assert_array_equal(m.log_priors, model.log_priors)
    np.testing.assert_array_equal(m.sample_counts, model.sample_counts)


def test_loaded_model_classifies_the_same(tmp_path, named_model, blobs):
    save_model_artifact(tmp_path, named_model, feature_names=["x0", "x1"])
    loaded = load_model_artifact(tmp_path)

    a = GaussianClassifier(named_model)
    b = GaussianClassifier(loaded.model)
    X = np.vstack(blobs)
    np.testing.assert_array_equal(a.classify_many(X), b.classify_many(X))


def test_infinite_log_prior_round_trip(tmp_path, one_dim_source):
    model = gaussian_train(one_dim_source).with_priors([0.0, 1.0])
    save_model_artifact(tmp_path, model)

    raw = json.loads((tmp_path / MODEL_FILE).read_text())
    assert raw["log_priors"][0] == "-inf"

    loaded = load_model_artifact(tmp_path).model
    assert loaded.log_priors[0] == -math.inf
    assert loaded.log_priors[1] == 0.0
    assert loaded.label_names is None


def test_missing_files(tmp_path, one_dim_source):
    with pytest.raises(ModelArtifactError):
        load_model_artifact(tmp_path)

    save_model_artifact(tmp_path, gaussian_train(one_dim_source))
    (tmp_path / META_FILE).unlink()
    with pytest.raises(ModelArtifactError):
        load_model_artifact(tmp_path)


def test_inconsistent_shapes(tmp_path, one_dim_source):
    save_model_artifact(tmp_path, gaussian_train(one_dim_source))

    path = tmp_path / MODEL_FILE
    raw = json.loads(path.read_text())
    raw["means"] = [[0.0]]
    path.write_text(json.dumps(raw))

    with pytest.raises(ModelArtifactError):
        load_model_artifact(tmp_path)


def test_missing_key_and_bad_json(tmp_path, one_dim_source):
    save_model_artifact(tmp_path, gaussian_train(one_dim_source))
    path = tmp_path / MODEL_FILE

    raw = json.loads(path.read_text())
    del raw["log_coefs"]
    path.write_text(json.dumps(raw))
    with pytest.raises(ModelArtifactError):
        load_model_artifact(tmp_path)

    path.write_text("{not json")
    with pytest.raises(ModelArtifactError):
        load_model_artifact(tmp_path)


def test_feature_names_must_match_dim(tmp_path, one_dim_source):
    save_model_artifact(
        tmp_path, gaussian_train(one_dim_source), feature_names=["a", "b"]
    )
    with pytest.raises(ModelArtifactError):
        load_model_artifact(tmp_path)


@pytest.mark.parametrize(
    "log_priors",
    [["oops", 0.0], [None, 0.0], [0.0], [0.0, 0.0, 0.0], 1.5],
)
def test_malformed_log_priors(tmp_path, one_dim_source, log_priors):
    save_model_artifact(tmp_path, gaussian_train(one_dim_source).with_priors([0.5, 0.5]))

    path = tmp_path / MODEL_FILE
    raw = json.loads(path.read_text())
    raw["log_priors"] = log_priors
    path.write_text(json.dumps(raw))

    with pytest.raises(ModelArtifactError):
        load_model_artifact(tmp_path)
