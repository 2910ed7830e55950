"""
收容所服务层

封装菜单背后的业务逻辑：
1. 动物登记与检索
2. 领养登记：按物种挑选第一只动物，登记家庭并建立关联
"""

from typing import List, Optional

from sqlmodel import Session

from shelter.models.animal import Animal, AnimalStatus
from shelter.models.family import Family
from shelter.repositories.animal_repository import AnimalRepository
from shelter.repositories.family_repository import FamilyRepository
from shelter.utils.logger import get_logger

logger = get_logger(__name__)


class ShelterService:
    """
    收容所服务类

    两个 Repository 共用同一个会话，领养登记中的家庭和动物在同一会话内关联

    使用示例：
        with get_session(engine) as session:
            service = ShelterService(session)
            service.register_animal("Luna", "cat", 2, "Very calm")
    """

    def __init__(self, session: Session):
        self.animals = AnimalRepository(session)
        self.families = FamilyRepository(session)

    def register_animal(
        self,
        name: str,
        species: str,
        age: int,
        description: Optional[str] = None,
        status: Optional[AnimalStatus] = None
    ) -> Animal:
        """
        登记新动物

        Args:
            name: 名字
            species: 物种
            age: 年龄
            description: 描述（可选）
            status: 状态，缺省为 IN_SHELTER

        Returns:
            已保存的 Animal 对象
        """
        animal = Animal(
            name=name,
            species=species,
            age=age,
            description=description,
            status=status or AnimalStatus.IN_SHELTER
        )
        return self.animals.save(animal)

    def list_animals(self) -> List[Animal]:
        return self.animals.get_all()

    def search_by_species(self, species: str) -> List[Animal]:
        return self.animals.find_by_species(species)

    def search_by_age(self, age: int) -> List[Animal]:
        return self.animals.find_by_age(age)

    def search_by_description(self, text: str) -> List[Animal]:
        return self.animals.find_by_description(text)

    def find_first_by_species(self, species: str) -> Optional[Animal]:
        """
        在全部动物中按物种挑选第一只（忽略大小写，在客户端过滤）

        Returns:
            第一只匹配的 Animal，没有则返回 None
        """
        wanted = species.strip().lower()
        for animal in self.list_animals():
            if animal.species.lower() == wanted:
                return animal
        return None

    def register_adopting_family(
        self,
        species: str,
        name: str,
        age: int,
        city: str
    ) -> Optional[Family]:
        """
        登记领养家庭

        流程：
        1. 按物种找到第一只动物，找不到直接返回 None
        2. 登记新家庭
        3. 将动物关联到家庭，状态改为 SOON_TO_BE_FOSTERED 并保存

        家庭和动物分两次提交：第 3 步失败时，已登记的家庭保留（名下没有动物）

        Raises:
            ValueError: 家庭字段非法（此时不会写入任何数据）
            StorageError: 写入失败
        """
        animal = self.find_first_by_species(species)
        if animal is None:
            return None

        family = self.families.register(Family(name=name, age=age, city=city))

        animal.family = family
        animal.status = AnimalStatus.SOON_TO_BE_FOSTERED
        self.animals.update(animal)
        logger.info("Family %s adopted animal %s", family.id, animal.id)
        return family
