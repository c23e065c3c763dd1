from .dataset_load_step import DatasetLoadStep
from .model_train_step import ModelTrainStep
from .prior_assign_step import PriorAssignStep
from .model_evaluate_step import ModelEvaluateStep
from .artifact_persist_step import ArtifactPersistStep

__all__ = [
    "DatasetLoadStep",
    "ModelTrainStep",
    "PriorAssignStep",
    "ModelEvaluateStep",
    "ArtifactPersistStep",
]
