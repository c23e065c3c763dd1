#!filepath: gaussclf/__init__.py

from .utils.logger import Logging, logs, init_logging
from .config.app_config import AppConfig
from .core.interfaces import Classifier, FeatureSource, Trainer
from .core.model import GaussianModel
from .features import ArrayFeatureSource, DataFrameFeatureSource
from .inference.gaussian_classifier import GaussianClassifier
from .training.gaussian_train_engine import (
    GaussianTrainEngine,
    GaussianTrainer,
    gaussian_train,
)
from .utils.errors import (
    DimensionMismatchError,
    EmptyLabelError,
    SingularCovarianceError,
    TrainingError,
    UserInputError,
)

__version__ = "0.1.0"

# alias 简化调用
train = gaussian_train

__all__ = [
    "logs", "Logging", "init_logging",
    "AppConfig",
    "FeatureSource", "Classifier", "Trainer",
    "ArrayFeatureSource", "DataFrameFeatureSource",
    "GaussianModel", "GaussianClassifier",
    "GaussianTrainEngine", "GaussianTrainer",
    "gaussian_train", "train",
    "TrainingError", "EmptyLabelError", "SingularCovarianceError",
    "DimensionMismatchError", "UserInputError",
]
