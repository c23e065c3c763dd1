#!filepath: gaussclf/config/app_config.py
import os

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel

from .log_config import LogConfig
from .training_config import TrainingConfig


def project_root() -> str:
    """
    返回项目根目录（基于当前文件位置推导）:
    gaussclf/config/app_config.py → gaussclf/config → gaussclf → project_root
    """
    return os.path.abspath(os.path.join(os.path.dirname(__file__), "../../"))


def default_config_path() -> str:
    return os.path.join(os.path.dirname(__file__), "base.yml")


class AppConfig(BaseModel):
    log: LogConfig = LogConfig()
    training: TrainingConfig

    @classmethod
    def load(cls, path: str | None = None) -> "AppConfig":
        """
        加载 YAML 配置 + .env
        - 默认使用 gaussclf/config/base.yml
        - GAUSSCLF_LOG_LEVEL 覆盖 log.level
        """
        load_dotenv(os.path.join(project_root(), ".env"))

        if path is None:
            path = default_config_path()

        if not os.path.exists(path):
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}

        level = os.getenv("GAUSSCLF_LOG_LEVEL")
        if level:
            raw.setdefault("log", {})
            raw["log"]["level"] = level

        return cls(**raw)
