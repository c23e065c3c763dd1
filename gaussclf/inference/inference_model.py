from __future__ import annotations

"""
InferenceModel (FINAL / FROZEN)

Runtime-only model abstraction.

Responsibilities:
- Consume named features (per key: sample id, symbol, ...)
- Perform inference only (no training, no evaluation)
- Output one label per key
"""

from abc import ABC, abstractmethod
from typing import Any, Dict


class InferenceModel(ABC):
    @abstractmethod
    def predict(
        self,
        *,
        features_by_key: Dict[str, Dict[str, Any]],
    ) -> Dict[str, Any]:
        """
        Inputs:
        - features_by_key: {key -> {feature_name -> value}}

        Outputs:
        - {key -> label}
        """
        raise NotImplementedError
