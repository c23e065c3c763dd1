# gaussclf/inference/gaussian_classifier.py
from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence

import numpy as np

from gaussclf.core.interfaces import Classifier
from gaussclf.core.model import GaussianModel
from gaussclf.inference.inference_model import InferenceModel
from gaussclf.utils.errors import DimensionMismatchError


class GaussianClassifier(Classifier, InferenceModel):
    """
    Maximum-posterior classifier over a fitted GaussianModel.

    Pure reads of an immutable model: safe to share between callers.
    """

    def __init__(
        self,
        model: GaussianModel,
        feature_order: Optional[List[str]] = None,
    ):
        self.model = model
        self.feature_order = feature_order

    @property
    def dim(self) -> int:
        return self.model.dim

    @property
    def label_count(self) -> int:
        return self.model.label_count

    def set_priors(self, priors: Optional[Sequence[float]]) -> None:
        """
        Rebinds to a model with log_priors = ln(priors).

        Not validated: priors must be positive (see GaussianModel.with_priors).
        """
        self.model = self.model.with_priors(priors)

    # ------------------------------------------------------------------
    # Scoring
    # ------------------------------------------------------------------
    def _as_vector(self, x) -> np.ndarray:
        v = np.asarray(x, dtype=np.float64).reshape(-1)
        if len(v) != self.model.dim:
            raise DimensionMismatchError(expected=self.model.dim, actual=len(v))
        return v

    def _check_label(self, label: int) -> None:
        if not 0 <= label < self.model.label_count:
            raise IndexError(
                f"label {label} out of range [0, {self.model.label_count})"
            )

    def _log_likelihood(self, label: int, v: np.ndarray) -> float:
        d = v - self.model.means[label]
        # precision 已包含 -1/2
        return float(self.model.log_coefs[label] + d @ self.model.precisions[label] @ d)

    def _log_posterior(self, label: int, v: np.ndarray) -> float:
        logp = self._log_likelihood(label, v)
        if self.model.log_priors is None:
            return logp
        return logp + float(self.model.log_priors[label])

    def log_likelihood(self, label: int, x: Sequence[float]) -> float:
        self._check_label(label)
        return self._log_likelihood(label, self._as_vector(x))

    def log_posterior(self, label: int, x: Sequence[float]) -> float:
        self._check_label(label)
        return self._log_posterior(label, self._as_vector(x))

    def log_posteriors(self, x: Sequence[float]) -> np.ndarray:
        v = self._as_vector(x)
        return np.array(
            [self._log_posterior(lbl, v) for lbl in range(self.model.label_count)]
        )

    # ------------------------------------------------------------------
    # Classification
    # ------------------------------------------------------------------
    def classify(self, x: Sequence[float]) -> int:
        """
        Arg-max of log_posterior over labels 0..L-1.

        Strict '>' against the running best: the lowest label wins ties.
        Returns -1 for a model without labels.
        """
        v = self._as_vector(x)

        best_label = -1
        best_logp = 0.0
        for lbl in range(self.model.label_count):
            logp = self._log_posterior(lbl, v)
            if best_label < 0 or logp > best_logp:
                best_label, best_logp = lbl, logp

        return best_label

    def classify_many(self, X) -> np.ndarray:
        X = np.asarray(X, dtype=np.float64)
        if X.ndim != 2:
            raise ValueError(f"X must be 2-D, got ndim={X.ndim}")
        return np.array([self.classify(row) for row in X], dtype=np.int64)

    def label_name(self, label: int) -> Any:
        return self.model.label_name(label)

    def predict(
        self,
        *,
        features_by_key: Dict[str, Dict[str, Any]],
    ) -> Dict[str, Any]:
        if self.feature_order is None:
            raise ValueError("predict() requires feature_order")

        out: Dict[str, Any] = {}
        for key, features in features_by_key.items():
            missing = [f for f in self.feature_order if f not in features]
            if missing:
                raise DimensionMismatchError(
                    expected=len(self.feature_order),
                    actual=len(self.feature_order) - len(missing),
                )
            x = [features[f] for f in self.feature_order]
            out[key] = self.label_name(self.classify(x))
        return out
