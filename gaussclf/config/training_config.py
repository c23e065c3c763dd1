# gaussclf/config/training_config.py
from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import BaseModel, Field, field_validator


class DatasetConfig(BaseModel):
    train_path: str
    eval_path: Optional[str] = None
    feature_columns: List[str] = Field(..., min_length=1)
    label_column: str
    drop_na: bool = True


class ModelConfig(BaseModel):
    name: Literal["gaussian"] = "gaussian"
    version: str = "v1"
    # 先验概率：由调用方保证 > 0 且和为 1（不做归一化）
    priors: Optional[List[float]] = None
    artifact_root: str = "models/"

    @field_validator("priors")
    @classmethod
    def _non_empty(cls, v):
        if v is not None and len(v) == 0:
            raise ValueError("priors must be omitted or non-empty")
        return v


class TrainingConfig(BaseModel):
    """
    TrainingConfig（FINAL / FROZEN）
    """

    # experiment
    name: str = "default"

    dataset: DatasetConfig
    model: ModelConfig = Field(default_factory=ModelConfig)

    # evaluation
    evaluation_enabled: bool = True
