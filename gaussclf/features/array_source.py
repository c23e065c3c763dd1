# gaussclf/features/array_source.py
from __future__ import annotations

from typing import List, Sequence

import numpy as np

from gaussclf.core.interfaces import FeatureSource
from gaussclf.utils.errors import DimensionMismatchError


class ArrayFeatureSource(FeatureSource):
    """
    In-memory FeatureSource.

    samples[label] is a 2-D block of shape (n_label, dim).
    """

    def __init__(self, samples: Sequence[np.ndarray], dim: int | None = None):
        blocks: List[np.ndarray] = []
        for block in samples:
            arr = np.asarray(block, dtype=np.float64)
            if arr.ndim == 1:
                # 一维输入视为 dim=1 的样本序列
                arr = arr.reshape(-1, 1)
            if arr.ndim != 2:
                raise ValueError(f"expected a 2-D sample block, got ndim={arr.ndim}")
            blocks.append(arr)

        if dim is None:
            if not blocks:
                raise ValueError("dim is required when there are no labels")
            dim = blocks[0].shape[1]

        for block in blocks:
            if block.shape[1] != dim:
                raise DimensionMismatchError(expected=dim, actual=block.shape[1])

        self._dim = int(dim)
        self._blocks = blocks

    @classmethod
    def from_arrays(cls, X, y, label_count: int | None = None) -> "ArrayFeatureSource":
        """
        Group rows of X by integer label y (0 .. label_count-1).

        Labels without rows become empty blocks, which training rejects.
        """
        X = np.asarray(X, dtype=np.float64)
        y = np.asarray(y)
        if X.ndim != 2:
            raise ValueError(f"X must be 2-D, got ndim={X.ndim}")
        if len(X) != len(y):
            raise ValueError(f"X has {len(X)} rows but y has {len(y)}")
        if len(y) and y.min() < 0:
            raise ValueError("labels must be non-negative integers")

        if label_count is None:
            label_count = int(y.max()) + 1 if len(y) else 0

        blocks = [X[y == lbl] for lbl in range(label_count)]
        return cls(blocks, dim=X.shape[1])

    def dimension(self) -> int:
        return self._dim

    def label_count(self) -> int:
        return len(self._blocks)

    def sample_count(self, label: int) -> int:
        return len(self._block(label))

    def fetch(self, label: int, index: int, out: np.ndarray) -> None:
        block = self._block(label)
        if not 0 <= index < len(block):
            raise IndexError(f"index {index} out of range for label {label}")
        out[:] = block[index]

    def _block(self, label: int) -> np.ndarray:
        if not 0 <= label < len(self._blocks):
            raise IndexError(f"label {label} out of range [0, {len(self._blocks)})")
        return self._blocks[label]
