# gaussclf/training/context.py
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

from gaussclf.artifact.model_artifact import ModelArtifact
from gaussclf.core.model import GaussianModel
from gaussclf.features.dataframe_source import DataFrameFeatureSource


@dataclass
class TrainingContext:
    """
    TrainingContext（FINAL / FROZEN）

    Semantics:
    - One context == one training run
    - run_id is immutable and mandatory
    """

    # -------------------------
    # Identity (FROZEN)
    # -------------------------
    run_id: str

    # -------------------------
    # Static bindings
    # -------------------------
    cfg: Any
    inst: Any
    model_dir: Path

    # -------------------------
    # Produced by steps
    # -------------------------
    train_source: Optional[DataFrameFeatureSource] = None
    eval_source: Optional[DataFrameFeatureSource] = None

    model: Optional[GaussianModel] = None
    metrics: Dict[str, Any] = field(default_factory=dict)

    model_artifact: Optional[ModelArtifact] = None
