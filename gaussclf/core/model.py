# gaussclf/core/model.py
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, List, Optional, Sequence

import numpy as np


def _frozen(a, dtype=np.float64) -> np.ndarray:
    arr = np.array(a, dtype=dtype, copy=True)
    arr.setflags(write=False)
    return arr


@dataclass(frozen=True)
class GaussianModel:
    """
    GaussianModel（FINAL / FROZEN）

    One multivariate Gaussian per label:

        log p(x | l) = log_coefs[l] + (x - means[l])^T precisions[l] (x - means[l])

    Fields (label axis first, dense 0..label_count-1):
    - means        (L, dim)
    - precisions   (L, dim, dim)  == -1/2 * inv(Sigma[l]), exactly symmetric
    - log_coefs    (L,)           == -1/2 * (dim * ln(2*pi) + ln(det Sigma[l]))
    - log_priors   (L,) or None   == ln(prior[l]); None means no prior
    - sample_counts (L,)          training sizes

    All arrays are read-only. Assigning priors creates a new model.
    """

    dim: int
    means: np.ndarray
    precisions: np.ndarray
    log_coefs: np.ndarray
    sample_counts: np.ndarray
    log_priors: Optional[np.ndarray] = None
    label_names: Optional[List[Any]] = None

    def __post_init__(self):
        if self.dim <= 0:
            raise ValueError(f"dim must be positive, got {self.dim}")

        n = len(self.log_coefs)
        means = _frozen(self.means).reshape(n, self.dim)
        precisions = _frozen(self.precisions).reshape(n, self.dim, self.dim)
        log_coefs = _frozen(self.log_coefs).reshape(n)
        counts = _frozen(self.sample_counts, dtype=np.int64).reshape(n)

        # frozen dataclass: 只能通过 object.__setattr__ 规范化字段
        object.__setattr__(self, "means", means)
        object.__setattr__(self, "precisions", precisions)
        object.__setattr__(self, "log_coefs", log_coefs)
        object.__setattr__(self, "sample_counts", counts)

        if self.log_priors is not None:
            log_priors = _frozen(self.log_priors).reshape(-1)
            if len(log_priors) != n:
                raise ValueError(
                    f"log_priors has {len(log_priors)} entries, expected {n}"
                )
            object.__setattr__(self, "log_priors", log_priors)

        if self.label_names is not None:
            if len(self.label_names) != n:
                raise ValueError(
                    f"label_names has {len(self.label_names)} entries, expected {n}"
                )
            object.__setattr__(self, "label_names", list(self.label_names))

    @property
    def label_count(self) -> int:
        return len(self.log_coefs)

    def with_priors(self, priors: Optional[Sequence[float]]) -> "GaussianModel":
        """
        Returns a copy with log_priors = ln(priors); None removes them.

        Values are not validated: priors must be > 0 and sum to 1.
        ln(0) gives -inf and a negative prior gives NaN for that label.
        """
        if priors is None:
            return replace(self, log_priors=None)

        priors = np.asarray(priors, dtype=np.float64).reshape(-1)
        if len(priors) != self.label_count:
            raise ValueError(
                f"got {len(priors)} priors for {self.label_count} labels"
            )

        with np.errstate(divide="ignore", invalid="ignore"):
            log_priors = np.log(priors)

        return replace(self, log_priors=log_priors)

    def label_name(self, label: int) -> Any:
        if label < 0:
            return None
        if self.label_names is None:
            return label
        return self.label_names[label]
