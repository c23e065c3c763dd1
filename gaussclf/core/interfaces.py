from __future__ import annotations

"""
Capability interfaces (FINAL / FROZEN)

FeatureSource
    Labeled feature vectors behind a narrow read-only contract.
    Labels are dense integers 0 .. label_count()-1.

Classifier
    Maps one feature vector to a label.

Trainer
    Produces a Classifier from a FeatureSource.
"""

from abc import ABC, abstractmethod
from typing import Sequence

import numpy as np


class FeatureSource(ABC):
    """
    Read-only access to feature vectors grouped by label.

    Implementations may be in-memory, streaming or file-backed.
    The trainer reads each label twice (mean pass, covariance pass),
    so fetch() must be repeatable.
    """

    @abstractmethod
    def dimension(self) -> int:
        """Length of every feature vector (> 0)."""
        raise NotImplementedError

    @abstractmethod
    def label_count(self) -> int:
        raise NotImplementedError

    @abstractmethod
    def sample_count(self, label: int) -> int:
        """Number of feature vectors stored for ``label``."""
        raise NotImplementedError

    @abstractmethod
    def fetch(self, label: int, index: int, out: np.ndarray) -> None:
        """
        Write the ``index``-th vector of ``label`` into ``out``.

        ``out`` is caller-owned and has length dimension().
        """
        raise NotImplementedError


class Classifier(ABC):
    @abstractmethod
    def classify(self, x: Sequence[float]) -> int:
        """Returns the predicted label, or -1 when there is no label."""
        raise NotImplementedError


class Trainer(ABC):
    @abstractmethod
    def train(self, source: FeatureSource) -> Classifier:
        raise NotImplementedError
