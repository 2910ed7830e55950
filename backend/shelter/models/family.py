"""
领养域模型 - 领养家庭表
对应数据库中的 familias 表
"""

from typing import TYPE_CHECKING, List, Optional

from sqlalchemy.orm import validates
from sqlmodel import Field, Relationship

from .base import TimestampModel

if TYPE_CHECKING:
    from .animal import Animal


class Family(TimestampModel, table=True):
    """
    领养家庭表
    name/age/city 在赋值时校验（包括构造时），校验失败不会修改原值
    """
    __tablename__ = "familias"

    id: Optional[int] = Field(default=None, primary_key=True)

    name: str = Field(nullable=False)

    age: int = Field(nullable=False)

    # 城市：按城市精确查询
    city: str = Field(index=True, nullable=False)

    # 一对多：删除家庭时级联删除其名下的动物
    animals: List["Animal"] = Relationship(
        back_populates="family",
        sa_relationship_kwargs={"cascade": "all"}
    )

    @validates("name")
    def validate_name(self, key, name):
        if name is None or not str(name).strip():
            raise ValueError("Family name cannot be empty.")
        return name

    @validates("city")
    def validate_city(self, key, city):
        if city is None or not str(city).strip():
            raise ValueError("City cannot be empty.")
        return city

    @validates("age")
    def validate_age(self, key, age):
        if isinstance(age, bool) or not isinstance(age, int) or age <= 0:
            raise ValueError("Age must be a positive integer.")
        return age

    def add_animal(self, animal: Optional["Animal"]) -> None:
        if animal is not None:
            self.animals.append(animal)

    def remove_animal(self, animal: Optional["Animal"]) -> None:
        if animal is not None and animal in self.animals:
            self.animals.remove(animal)

    @property
    def animal_count(self) -> int:
        return len(self.animals)

    def __str__(self) -> str:
        return (
            f"Family [Name: {self.name}, Age: {self.age}, City: {self.city}, "
            f"Adopted animals: {self.animal_count}]"
        )
