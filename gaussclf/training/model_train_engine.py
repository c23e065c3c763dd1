# gaussclf/training/model_train_engine.py
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from gaussclf.core.interfaces import FeatureSource


class ModelTrainEngine(ABC):
    """
    Abstract ModelTrainEngine (FINAL)

    A train engine defines COMPLETE training semantics for one model family.
    It reads a FeatureSource and returns a fitted, immutable model.
    """

    def __init__(self, cfg=None):
        self.cfg = cfg

    @abstractmethod
    def train(self, *, source: FeatureSource) -> Any:
        """
        Returns fitted model
        """
        raise NotImplementedError
