"""
异常定义
所有数据访问失败统一包装为 StorageError
"""

from typing import Optional


class ShelterError(Exception):
    """本项目异常基类"""


class StorageError(ShelterError):
    """
    数据访问失败

    Repository 在回滚事务之后抛出，保留可读的错误信息和底层异常
    """

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.message = message
        self.cause = cause

    def __str__(self) -> str:
        if self.cause is None:
            return self.message
        return f"{self.message} ({self.cause.__class__.__name__}: {self.cause})"
