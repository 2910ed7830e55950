"""
Repository (DAO) 模块
提供数据库操作的抽象层，封装 CRUD 逻辑
"""

from .animal_repository import AnimalRepository
from .family_repository import FamilyRepository

__all__ = [
    "AnimalRepository",
    "FamilyRepository"
]
