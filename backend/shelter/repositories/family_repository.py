"""
领养家庭 Repository
提供 familias 表的查询和事务性增删改操作
"""

from typing import List, Optional

from sqlalchemy import inspect
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from shelter.exceptions import StorageError
from shelter.models.family import Family
from shelter.utils.logger import get_logger

logger = get_logger(__name__)


def _primary_key(instance):
    # 不触发懒加载
    identity = inspect(instance).identity
    return identity[0] if identity else None


class FamilyRepository:
    """
    领养家庭数据访问对象
    每个操作失败时先回滚，再抛出 StorageError
    """

    def __init__(self, session: Session):
        self.session = session

    def _fail(self, message: str, error: SQLAlchemyError) -> StorageError:
        self.session.rollback()
        logger.error("%s: %s", message, error)
        return StorageError(message, error)

    def _query(self, statement, error_message: str) -> List[Family]:
        try:
            return list(self.session.exec(statement).all())
        except SQLAlchemyError as e:
            raise self._fail(error_message, e) from e

    def get_all(self) -> List[Family]:
        return self._query(select(Family), "Could not load families")

    def get_by_id(self, family_id: int) -> Optional[Family]:
        """
        根据 ID 获取家庭

        Returns:
            Family 对象，不存在则返回 None
        """
        try:
            return self.session.get(Family, family_id)
        except SQLAlchemyError as e:
            raise self._fail(f"Could not find family with ID: {family_id}", e) from e

    def find_by_city(self, city: str) -> List[Family]:
        """
        按城市查询（精确匹配）

        Args:
            city: 城市名

        Returns:
            该城市的 Family 列表
        """
        statement = select(Family).where(Family.city == city)
        return self._query(statement, f"Could not load families from city: {city}")

    def register(self, family: Family) -> Family:
        """
        登记新家庭

        Args:
            family: 待保存的 Family 对象

        Returns:
            保存后的 Family 对象（已分配 id）

        Raises:
            StorageError: 写入失败，事务已回滚
        """
        try:
            self.session.add(family)
            self.session.commit()
            self.session.refresh(family)
        except SQLAlchemyError as e:
            raise self._fail("Could not register the family", e) from e
        logger.info("Registered family %s (ID: %s)", family.name, family.id)
        return family

    def modify(self, family: Family) -> Family:
        """
        更新家庭信息

        对象可以来自其他会话，通过 merge 合并到当前会话

        Returns:
            当前会话中的 Family 对象
        """
        family_id = _primary_key(family)
        try:
            merged = self.session.merge(family)
            self.session.commit()
            self.session.refresh(merged)
        except SQLAlchemyError as e:
            raise self._fail(f"Could not update the family with ID: {family_id}", e) from e
        logger.info("Modified family %s", family_id)
        return merged

    def delete_by_id(self, family_id: int) -> bool:
        """
        删除家庭，其名下的动物级联删除

        Args:
            family_id: 家庭 ID

        Returns:
            删除成功返回 True，家庭不存在返回 False
        """
        try:
            family = self.session.get(Family, family_id)
            if family is None:
                return False
            self.session.delete(family)
            self.session.commit()
        except SQLAlchemyError as e:
            raise self._fail(f"Could not delete the family with ID: {family_id}", e) from e
        logger.info("Deleted family %s", family_id)
        return True
