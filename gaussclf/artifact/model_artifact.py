# gaussclf/artifact/model_artifact.py
from __future__ import annotations

import json
import math
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Literal

import numpy as np

from gaussclf import logs
from gaussclf.core.model import GaussianModel
from gaussclf.utils.errors import ModelArtifactError

MODEL_FILE = "model.json"
META_FILE = "artifact.json"


# ============================================================
# Model Spec (FROZEN)
# ============================================================
@dataclass(frozen=True)
class ModelSpec:
    family: Literal["gaussian"] = "gaussian"
    task: Literal["classification"] = "classification"
    version: str = "v1"


# ============================================================
# Model Artifact
# ============================================================
@dataclass(frozen=True)
class ModelArtifact:
    """
    ModelArtifact（FINAL / FROZEN）

    Semantics:
    - path always points to an artifact ROOT directory
      (model.json + artifact.json)
    """
    path: Path
    spec: ModelSpec
    model: GaussianModel
    run_id: str | None = None
    metrics: dict[str, Any] | None = None
    created_at: datetime | None = None
    feature_names: list[str] | None = None


# ------------------------------------------------------------
# JSON encoding of floats (-inf / NaN log-priors are legal)
# ------------------------------------------------------------
def _encode_float(v: float):
    if math.isnan(v):
        return "nan"
    if math.isinf(v):
        return "inf" if v > 0 else "-inf"
    return v


def model_to_dict(model: GaussianModel) -> dict[str, Any]:
    return {
        "dim": model.dim,
        "label_count": model.label_count,
        "means": model.means.tolist(),
        "precisions": model.precisions.tolist(),
        "log_coefs": model.log_coefs.tolist(),
        "log_priors": (
            None if model.log_priors is None
            else [_encode_float(float(v)) for v in model.log_priors]
        ),
        "sample_counts": model.sample_counts.tolist(),
        "label_names": model.label_names,
    }


def model_from_dict(raw: dict[str, Any]) -> GaussianModel:
    try:
        dim = int(raw["dim"])
        label_count = int(raw["label_count"])
        means = np.asarray(raw["means"], dtype=np.float64)
        precisions = np.asarray(raw["precisions"], dtype=np.float64)
        log_coefs = np.asarray(raw["log_coefs"], dtype=np.float64)
        counts = np.asarray(raw["sample_counts"], dtype=np.int64)
        log_priors = raw.get("log_priors")
        if log_priors is not None:
            log_priors = np.array([float(v) for v in log_priors], dtype=np.float64)
        label_names = raw.get("label_names")
    except (KeyError, TypeError, ValueError) as e:
        raise ModelArtifactError(f"[ModelArtifact] malformed model: {e}") from e

    expected = {
        "means": (means, (label_count, dim)),
        "precisions": (precisions, (label_count, dim, dim)),
        "log_coefs": (log_coefs, (label_count,)),
        "sample_counts": (counts, (label_count,)),
    }
    for name, (arr, shape) in expected.items():
        if arr.size != int(np.prod(shape)):
            raise ModelArtifactError(
                f"[ModelArtifact] {name} has shape {arr.shape}, expected {shape}"
            )

    if log_priors is not None and log_priors.shape != (label_count,):
        raise ModelArtifactError(
            f"[ModelArtifact] log_priors has shape {log_priors.shape}, "
            f"expected {(label_count,)}"
        )

    try:
        return GaussianModel(
            dim=dim,
            means=means,
            precisions=precisions,
            log_coefs=log_coefs,
            sample_counts=counts,
            log_priors=log_priors,
            label_names=label_names,
        )
    except ValueError as e:
        raise ModelArtifactError(f"[ModelArtifact] inconsistent model: {e}") from e


def save_model_artifact(
    artifact_dir: str | Path,
    model: GaussianModel,
    *,
    spec: ModelSpec | None = None,
    run_id: str | None = None,
    metrics: dict[str, Any] | None = None,
    feature_names: list[str] | None = None,
) -> ModelArtifact:
    artifact_dir = Path(artifact_dir)
    artifact_dir.mkdir(parents=True, exist_ok=True)

    spec = spec or ModelSpec()
    created_at = datetime.now(timezone.utc)

    (artifact_dir / MODEL_FILE).write_text(
        json.dumps(model_to_dict(model), indent=2)
    )

    meta = {
        "run_id": run_id,
        "created_at": created_at.isoformat(),
        "spec": {
            "family": spec.family,
            "task": spec.task,
            "version": spec.version,
        },
        "metrics": dict(metrics or {}),
        "feature_names": feature_names,
    }
    (artifact_dir / META_FILE).write_text(json.dumps(meta, indent=2, default=float))

    artifact = ModelArtifact(
        path=artifact_dir,
        spec=spec,
        model=model,
        run_id=run_id,
        metrics=dict(metrics or {}),
        created_at=created_at,
        feature_names=feature_names,
    )
    logs.info(f"[ModelArtifact] saved -> {artifact_dir}")
    return artifact


def load_model_artifact(artifact_dir: str | Path) -> ModelArtifact:
    """
    Resolve a ModelArtifact from directory.

    Hard rules:
    - artifact_dir MUST contain model.json and artifact.json
    """
    artifact_dir = Path(artifact_dir)
    model_path = artifact_dir / MODEL_FILE
    meta_path = artifact_dir / META_FILE

    for p in (model_path, meta_path):
        if not p.exists():
            raise ModelArtifactError(f"[ModelArtifact] {p.name} not found in {artifact_dir}")

    try:
        raw_model = json.loads(model_path.read_text())
        meta = json.loads(meta_path.read_text())
    except json.JSONDecodeError as e:
        raise ModelArtifactError(f"[ModelArtifact] invalid JSON: {e}") from e

    model = model_from_dict(raw_model)

    raw_spec = meta.get("spec") or {}
    spec = ModelSpec(
        family=raw_spec.get("family", "gaussian"),
        task=raw_spec.get("task", "classification"),
        version=raw_spec.get("version", "v1"),
    )

    created_at = meta.get("created_at")
    feature_names = meta.get("feature_names")
    if feature_names is not None and len(feature_names) != model.dim:
        raise ModelArtifactError(
            f"[ModelArtifact] {len(feature_names)} feature names for dim={model.dim}"
        )

    return ModelArtifact(
        path=artifact_dir,
        spec=spec,
        model=model,
        run_id=meta.get("run_id"),
        metrics=meta.get("metrics"),
        created_at=datetime.fromisoformat(created_at) if created_at else None,
        feature_names=feature_names,
    )
