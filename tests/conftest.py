# tests/conftest.py
from __future__ import annotations

import numpy as np
import pandas as pd
import pytest
from loguru import logger

from gaussclf.features.array_source import ArrayFeatureSource


@pytest.fixture(autouse=True)
def disable_file_logger():
    logger.remove()
    logger.add(lambda msg: None)
    yield


@pytest.fixture
def one_dim_source() -> ArrayFeatureSource:
    """
    dim=1, 2 labels:
      label 0: {-1, -1.1, -0.9}  mean -1, var 0.01
      label 1: { 1,  1.1,  0.9}  mean  1, var 0.01
    """
    return ArrayFeatureSource(
        [
            np.array([[-1.0], [-1.1], [-0.9]]),
            np.array([[1.0], [1.1], [0.9]]),
        ]
    )


@pytest.fixture
def blobs() -> list[np.ndarray]:
    """3 well separated, correlated 2-D clusters."""
    rng = np.random.default_rng(7)
    centers = [(-5.0, 0.0), (5.0, 0.0), (0.0, 6.0)]
    cov = np.array([[1.0, 0.3], [0.3, 0.5]])
    return [rng.multivariate_normal(c, cov, size=60) for c in centers]


@pytest.fixture
def blob_source(blobs) -> ArrayFeatureSource:
    return ArrayFeatureSource(blobs)


@pytest.fixture
def blob_frame(blobs) -> pd.DataFrame:
    names = ["setosa", "versicolor", "virginica"]
    frames = [
        pd.DataFrame({"x0": b[:, 0], "x1": b[:, 1], "label": name})
        for b, name in zip(blobs, names)
    ]
    # 打乱行顺序，标签映射不应依赖行顺序
    return pd.concat(frames, ignore_index=True).sample(frac=1.0, random_state=0)
