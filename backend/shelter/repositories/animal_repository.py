"""
动物 Repository
提供 animales 表的查询和事务性增删改操作
"""

from typing import List, Optional

from sqlalchemy import inspect
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select, col

from shelter.exceptions import StorageError
from shelter.models.animal import Animal
from shelter.utils.logger import get_logger

logger = get_logger(__name__)


def _primary_key(instance):
    # 不触发懒加载
    identity = inspect(instance).identity
    return identity[0] if identity else None


class AnimalRepository:
    """
    动物数据访问对象
    封装所有与 animales 表相关的数据库操作

    任何操作失败时先回滚会话，再抛出 StorageError
    """

    def __init__(self, session: Session):
        """
        初始化 Repository

        Args:
            session: SQLModel 数据库会话
        """
        self.session = session

    def _fail(self, message: str, error: SQLAlchemyError) -> StorageError:
        # 先回滚，之后才能访问对象属性
        self.session.rollback()
        logger.error("%s: %s", message, error)
        return StorageError(message, error)

    def _query(self, statement, error_message: str) -> List[Animal]:
        try:
            return list(self.session.exec(statement).all())
        except SQLAlchemyError as e:
            raise self._fail(error_message, e) from e

    def get_all(self) -> List[Animal]:
        """
        获取所有动物

        Returns:
            Animal 对象列表
        """
        return self._query(select(Animal), "Could not load animals")

    def get_by_id(self, animal_id: int) -> Optional[Animal]:
        """
        根据 ID 获取动物

        Args:
            animal_id: 动物 ID

        Returns:
            Animal 对象，不存在则返回 None
        """
        try:
            return self.session.get(Animal, animal_id)
        except SQLAlchemyError as e:
            raise self._fail(f"Could not load animal with ID {animal_id}", e) from e

    def find_by_species(self, species: str) -> List[Animal]:
        """
        按物种查询（精确匹配，区分大小写）

        Args:
            species: 物种名称

        Returns:
            物种完全相同的 Animal 列表
        """
        statement = select(Animal).where(Animal.species == species)
        return self._query(statement, f"Could not search animals by species: {species}")

    def find_by_age(self, age: int) -> List[Animal]:
        """
        按年龄查询（精确匹配）

        Args:
            age: 年龄

        Returns:
            年龄相同的 Animal 列表
        """
        statement = select(Animal).where(Animal.age == age)
        return self._query(statement, f"Could not search animals by age: {age}")

    def find_by_description(self, text: str) -> List[Animal]:
        """
        按描述子串查询

        % 和 _ 按字面量处理

        Args:
            text: 描述中应包含的文本

        Returns:
            描述包含该文本的 Animal 列表
        """
        statement = select(Animal).where(col(Animal.description).contains(text, autoescape=True))
        return self._query(statement, f"Could not search animals by description: {text}")

    def save(self, animal: Animal) -> Animal:
        """
        保存新动物

        Args:
            animal: 待保存的 Animal 对象

        Returns:
            保存后的 Animal 对象（已分配 id）

        Raises:
            StorageError: 写入失败，事务已回滚
        """
        try:
            self.session.add(animal)
            self.session.commit()
            self.session.refresh(animal)
        except SQLAlchemyError as e:
            raise self._fail("Error saving the animal", e) from e
        logger.info("Saved animal %s (ID: %s)", animal.name, animal.id)
        return animal

    def update(self, animal: Animal) -> Animal:
        """
        更新动物

        Args:
            animal: 已修改的 Animal 对象

        Returns:
            更新后的 Animal 对象

        Raises:
            StorageError: 写入失败，事务已回滚
        """
        animal_id = _primary_key(animal)
        try:
            self.session.add(animal)
            self.session.commit()
            self.session.refresh(animal)
        except SQLAlchemyError as e:
            raise self._fail(f"Error updating the animal with ID {animal_id}", e) from e
        logger.info("Updated animal %s", animal_id)
        return animal

    def delete_by_id(self, animal_id: int) -> bool:
        """
        删除动物

        Args:
            animal_id: 动物 ID

        Returns:
            删除成功返回 True，动物不存在返回 False
        """
        try:
            animal = self.session.get(Animal, animal_id)
            if animal is None:
                return False
            self.session.delete(animal)
            self.session.commit()
        except SQLAlchemyError as e:
            raise self._fail(f"Error deleting the animal with ID {animal_id}", e) from e
        logger.info("Deleted animal %s", animal_id)
        return True
