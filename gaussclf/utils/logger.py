#!filepath: gaussclf/utils/logger.py
import os
import sys
import json
from functools import wraps
from time import perf_counter
from loguru import logger
from typing import Callable, Optional


class Logging:
    """
    项目日志模块
    ---------------------------------------
    - 默认输出到 stderr
    - configure_file() 追加按日期切割的文件日志
    - 支持日志保留周期
    - 包含函数级日志装饰器
    ---------------------------------------
    """

    def __init__(
        self,
        log_dir: Optional[str] = None,
        rotation: str = "1 day",
        retention: str = "30 days",
        log_level: str = "INFO",
    ):
        self.log_dir = log_dir
        self.rotation = rotation
        self.retention = retention
        self.level = log_level

        self._configure()

    def _configure(self) -> None:
        """
        配置全局 logger
        """
        logger.remove()

        logger.add(
            sink=sys.stderr,
            level=self.level,
            format="{time:YYYY-MM-DD HH:mm:ss} | {level} | {message}",
        )

        if self.log_dir is not None:
            self.configure_file(self.log_dir)

    def configure_file(self, log_dir: str) -> None:
        os.makedirs(log_dir, exist_ok=True)
        self.log_dir = log_dir

        logger.add(
            sink=f"{log_dir}/{{time:YYYY-MM-DD}}.log",
            rotation=self.rotation,
            retention=self.retention,
            level=self.level,
            format="{time:YYYY-MM-DD HH:mm:ss} | {level} | {message}",
            enqueue=True,  # 多进程安全
            backtrace=True,
            diagnose=True,
        )
        logger.info(f"[Logging] file sink -> {log_dir}")

    # ---------- 日志方法 ----------
    def debug(self, msg: str, *args, **kwargs):
        logger.debug(msg, *args, **kwargs)

    def info(self, msg: str, *args, **kwargs):
        logger.info(msg, *args, **kwargs)

    def warning(self, msg: str, *args, **kwargs):
        logger.warning(msg, *args, **kwargs)

    def error(self, msg: str, *args, **kwargs):
        logger.error(msg, *args, **kwargs)

    def exception(self, msg: str, *args, **kwargs):
        logger.exception(msg, *args, **kwargs)

    # ---------- 日志装饰器 ----------
    def catch(
        self,
        msg: str = "Exception occurred",
        log_inputs: bool = False,
        log_outputs: bool = False,
        log_time: bool = True,
    ) -> Callable:

        def decorator(func: Callable):
            @wraps(func)
            def wrapper(*args, **kwargs):

                if log_inputs:
                    logger.info(
                        f"[CALL] {func.__name__} args={args}, "
                        f"kwargs={json.dumps(kwargs, ensure_ascii=False, default=str)}"
                    )

                start = perf_counter()

                try:
                    result = func(*args, **kwargs)
                except Exception:
                    logger.exception(f"[ERROR] {func.__name__}: {msg}")
                    raise

                if log_outputs:
                    logger.info(f"[RETURN] {func.__name__} result={result}")

                if log_time:
                    cost = perf_counter() - start
                    logger.info(f"[TIME] {func.__name__} took {cost:.4f}s")

                return result

            return wrapper

        return decorator


def init_logging(cfg) -> Logging:
    """
    用 LogConfig 替换默认全局 logs（就地更新，已导入的引用仍然有效）
    """
    logs.rotation = cfg.rotation
    logs.retention = cfg.retention
    logs.level = cfg.level
    logs.log_dir = cfg.dir
    logs._configure()
    return logs


# 默认全局 logs（可被 init_logging 重新配置）
logs = Logging()
