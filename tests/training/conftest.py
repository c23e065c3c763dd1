# tests/training/conftest.py
from __future__ import annotations

from pathlib import Path

import pytest

from gaussclf.config.training_config import (
    DatasetConfig,
    ModelConfig,
    TrainingConfig,
)


@pytest.fixture
def dataset_files(tmp_path: Path, blob_frame) -> dict:
    """
    train.csv / eval.parquet under tmp_path
    """
    train = blob_frame.iloc[:120]
    evaluation = blob_frame.iloc[120:]

    paths = {
        "train": tmp_path / "train.csv",
        "eval": tmp_path / "eval.parquet",
    }
    train.to_csv(paths["train"], index=False)
    evaluation.to_parquet(paths["eval"], index=False)
    return paths


@pytest.fixture
def training_cfg(tmp_path: Path, dataset_files) -> TrainingConfig:
    return TrainingConfig(
        name="unit",
        dataset=DatasetConfig(
            train_path=str(dataset_files["train"]),
            eval_path=str(dataset_files["eval"]),
            feature_columns=["x0", "x1"],
            label_column="label",
        ),
        model=ModelConfig(artifact_root=str(tmp_path / "models")),
    )
