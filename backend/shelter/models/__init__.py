"""
数据库模型模块
导出所有表模型和枚举类型
"""

from .animal import Animal, AnimalStatus, Species
from .family import Family
from .base import TimestampModel

__all__ = [
    "Animal", "AnimalStatus", "Species",
    "Family",
    "TimestampModel"
]
