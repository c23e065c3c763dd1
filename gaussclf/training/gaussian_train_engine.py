# gaussclf/training/gaussian_train_engine.py
from __future__ import annotations

"""
GaussianTrainEngine (FINAL / FROZEN)

Per label l, with n = sample_count(l):

    mean[l]      = sum(x) / n                                   (pass 1)
    Sigma[l]     = sum((x - mean)(x - mean)^T) / (n - 1)        (pass 2, n > 1)
    precision[l] = -1/2 * inv(Sigma[l])
    log_coef[l]  = -1/2 * (dim * ln(2*pi) + ln(det Sigma[l]))

Inverse and determinant both come from one Cholesky factor Sigma = L L^T.

Failure policy:
- n == 0                        -> EmptyLabelError
- Cholesky fails (incl. n == 1) -> SingularCovarianceError
Any failure aborts the whole model.
"""

import math

import numpy as np

from gaussclf import logs
from gaussclf.core.interfaces import Classifier, FeatureSource, Trainer
from gaussclf.core.model import GaussianModel
from gaussclf.inference.gaussian_classifier import GaussianClassifier
from gaussclf.observability.instrumentation import (
    Instrumentation,
    NoOpInstrumentation,
)
from gaussclf.training.model_train_engine import ModelTrainEngine
from gaussclf.utils.errors import (
    EmptyLabelError,
    SingularCovarianceError,
    UserInputError,
)

_LOG_2PI = math.log(2.0 * math.pi)


def _label_mean(source: FeatureSource, label: int, n: int, x: np.ndarray) -> np.ndarray:
    total = np.zeros_like(x)
    for i in range(n):
        source.fetch(label, i, x)
        total += x
    return total / n


def _label_covariance(
    source: FeatureSource,
    label: int,
    n: int,
    mean: np.ndarray,
    x: np.ndarray,
) -> np.ndarray:
    dim = len(mean)
    rows, cols = np.triu_indices(dim)

    # 只累加上三角 (k <= j)
    upper = np.zeros(len(rows))
    for i in range(n):
        source.fetch(label, i, x)
        d = x - mean
        upper += d[rows] * d[cols]

    if n > 1:
        upper /= n - 1

    sigma = np.empty((dim, dim))
    sigma[rows, cols] = upper
    sigma[cols, rows] = upper
    return sigma


def _invert_covariance(sigma: np.ndarray, label: int, n: int):
    """
    Returns (inv(Sigma), ln(det Sigma)) from the Cholesky factor.
    """
    if not np.all(np.isfinite(sigma)):
        raise SingularCovarianceError(label, n)

    try:
        chol = np.linalg.cholesky(sigma)
    except np.linalg.LinAlgError as e:
        raise SingularCovarianceError(label, n) from e

    diag = np.diag(chol)
    if np.any(diag <= 0.0):
        raise SingularCovarianceError(label, n)

    log_det = 2.0 * float(np.sum(np.log(diag)))

    # inv(Sigma) = inv(L)^T inv(L)
    chol_inv = np.linalg.inv(chol)
    inv = chol_inv.T @ chol_inv

    rows, cols = np.triu_indices(len(sigma), k=1)
    inv[cols, rows] = inv[rows, cols]
    return inv, log_det


def gaussian_train(
    source: FeatureSource,
    inst: Instrumentation | NoOpInstrumentation | None = None,
) -> GaussianModel:
    """
    Fit one multivariate Gaussian per label of ``source``.

    Raises EmptyLabelError / SingularCovarianceError; never returns a
    partially fitted model.
    """
    inst = inst if inst is not None else NoOpInstrumentation()

    dim = source.dimension()
    if dim <= 0:
        raise UserInputError(f"feature dimension must be positive, got {dim}")

    label_count = source.label_count()

    means = np.zeros((label_count, dim))
    precisions = np.zeros((label_count, dim, dim))
    log_coefs = np.zeros(label_count)
    counts = np.zeros(label_count, dtype=np.int64)

    # fetch 缓冲区在所有 label 之间复用
    x = np.empty(dim)

    for lbl in range(label_count):
        n = source.sample_count(lbl)
        if n == 0:
            raise EmptyLabelError(lbl)

        with inst.timer(f"gaussian_train.label_{lbl}"):
            mean = _label_mean(source, lbl, n, x)
            sigma = _label_covariance(source, lbl, n, mean, x)
            inv, log_det = _invert_covariance(sigma, lbl, n)

        means[lbl] = mean
        precisions[lbl] = -0.5 * inv
        log_coefs[lbl] = -0.5 * (dim * _LOG_2PI + log_det)
        counts[lbl] = n

        logs.debug(
            f"[GaussianTrain] label={lbl} n={n} log_det={log_det:.6f}"
        )

    inst.metrics.record("gaussian_train.labels", label_count)
    inst.metrics.record("gaussian_train.samples", int(counts.sum()))

    return GaussianModel(
        dim=dim,
        means=means,
        precisions=precisions,
        log_coefs=log_coefs,
        sample_counts=counts,
        label_names=getattr(source, "label_names", None),
    )


class GaussianTrainEngine(ModelTrainEngine):
    """
    Batch-only engine: each call fits from scratch, no incremental state.
    """

    def __init__(self, cfg=None, inst: Instrumentation | None = None):
        super().__init__(cfg)
        self.inst = inst

    def train(self, *, source: FeatureSource) -> GaussianModel:
        logs.info(
            f"[GaussianTrainEngine] dim={source.dimension()} "
            f"labels={source.label_count()}"
        )
        return gaussian_train(source, inst=self.inst)


class GaussianTrainer(Trainer):
    """Trainer adapter: FeatureSource -> GaussianClassifier."""

    def __init__(self, inst: Instrumentation | None = None):
        self.engine = GaussianTrainEngine(inst=inst)

    def train(self, source: FeatureSource) -> Classifier:
        return GaussianClassifier(self.engine.train(source=source))
