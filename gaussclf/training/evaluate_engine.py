# gaussclf/training/evaluate_engine.py
from __future__ import annotations

from typing import Any, Dict

import numpy as np
import pandas as pd

from gaussclf.core.interfaces import FeatureSource
from gaussclf.inference.gaussian_classifier import GaussianClassifier


class AccuracyEvaluateEngine:
    """
    Accuracy of a classifier on a labeled FeatureSource.

    Output:
    - accuracy            overall hit ratio
    - accuracy_by_label   {label_name -> hit ratio}
    - n_eval              number of evaluated vectors
    """

    def evaluate(self, clf: GaussianClassifier, source: FeatureSource) -> Dict[str, Any]:
        x = np.empty(source.dimension())
        truth, pred = [], []

        for lbl in range(source.label_count()):
            for i in range(source.sample_count(lbl)):
                source.fetch(lbl, i, x)
                truth.append(lbl)
                pred.append(clf.classify(x))

        if not truth:
            return {"accuracy": float("nan"), "accuracy_by_label": {}, "n_eval": 0}

        df = pd.DataFrame({"truth": truth, "pred": pred})
        df["hit"] = df["truth"] == df["pred"]

        by_label = df.groupby("truth")["hit"].mean()
        return {
            "accuracy": float(df["hit"].mean()),
            "accuracy_by_label": {
                str(clf.label_name(int(lbl))): float(v) for lbl, v in by_label.items()
            },
            "n_eval": len(df),
        }
