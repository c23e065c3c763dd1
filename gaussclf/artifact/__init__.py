from .model_artifact import (
    ModelArtifact,
    ModelSpec,
    load_model_artifact,
    save_model_artifact,
)

__all__ = [
    "ModelArtifact",
    "ModelSpec",
    "load_model_artifact",
    "save_model_artifact",
]
