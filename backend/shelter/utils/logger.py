"""
日志配置
所有模块通过 get_logger(__name__) 获取 logger
日志写到 stderr，避免与控制台菜单的 stdout 输出混在一起
"""

import logging
import os
import sys

_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
_initialized = False


def _init_logging() -> None:
    """只配置一次项目根 logger"""
    global _initialized
    if _initialized:
        return
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT, _DATE_FORMAT))
    root = logging.getLogger("shelter")
    root.setLevel(os.environ.get("LOG_LEVEL", "WARNING").upper())
    root.addHandler(handler)
    _initialized = True


def get_logger(name: str) -> logging.Logger:
    """
    获取命名 logger

    Args:
        name: 通常为调用模块的 __name__

    Returns:
        配置好的 logging.Logger
    """
    _init_logging()
    return logging.getLogger(name)
