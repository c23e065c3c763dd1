from .app_config import AppConfig
from .log_config import LogConfig
from .training_config import DatasetConfig, ModelConfig, TrainingConfig

__all__ = [
    "AppConfig",
    "LogConfig",
    "DatasetConfig",
    "ModelConfig",
    "TrainingConfig",
]
