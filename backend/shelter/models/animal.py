"""
动物域模型 - 动物登记表
对应数据库中的 animales 表
"""

from enum import Enum
from typing import TYPE_CHECKING, Optional

from sqlmodel import Field, Relationship

from .base import TimestampModel

if TYPE_CHECKING:
    from .family import Family


class AnimalStatus(str, Enum):
    """动物状态枚举，值同时作为展示用描述"""
    RECENTLY_ABANDONED = "recently_abandoned"
    IN_SHELTER = "in_shelter"
    SOON_TO_BE_FOSTERED = "soon_to_be_fostered"

    @property
    def description(self) -> str:
        return _STATUS_DESCRIPTIONS[self]

    @classmethod
    def valid_descriptions(cls) -> str:
        return ", ".join(status.description for status in cls)

    @classmethod
    def parse(cls, text: str) -> "AnimalStatus":
        """
        将用户输入解析为状态枚举

        依次匹配成员名、存储值和描述，忽略大小写及首尾空白

        Args:
            text: 用户输入，例如 "IN_SHELTER"、"in_shelter" 或 "In shelter"

        Returns:
            对应的 AnimalStatus

        Raises:
            ValueError: 无法匹配任何状态时，错误信息中列出所有合法值
        """
        wanted = (text or "").strip().lower()
        for status in cls:
            if wanted in (status.name.lower(), status.value, status.description.lower()):
                return status
        raise ValueError(f"Invalid status. Valid values are: {cls.valid_descriptions()}")

    def __str__(self) -> str:
        return self.description


_STATUS_DESCRIPTIONS = {
    AnimalStatus.RECENTLY_ABANDONED: "Recently abandoned",
    AnimalStatus.IN_SHELTER: "In shelter",
    AnimalStatus.SOON_TO_BE_FOSTERED: "Soon to be fostered",
}


class Species(str, Enum):
    """控制台提示中列出的常见物种，species 列本身仍是自由文本"""
    CAT = "cat"
    DOG = "dog"
    BIRD = "bird"
    SNAKE = "snake"
    CHAMELEON = "chameleon"
    VIETNAMESE_PIG = "vietnamese pig"
    SPIDER = "spider"

    @classmethod
    def prompt_hint(cls) -> str:
        return ", ".join(species.value for species in cls)


class Animal(TimestampModel, table=True):
    """
    动物登记表
    每条记录对应收容所中的一只动物，被领养后通过 family_id 关联到家庭
    """
    __tablename__ = "animales"

    # 主键，由数据库生成
    id: Optional[int] = Field(default=None, primary_key=True)

    name: str = Field(nullable=False)

    # 物种：精确匹配查询的热点列
    species: str = Field(index=True, nullable=False)

    age: int = Field(nullable=False)

    # 自由文本描述，按子串检索
    description: Optional[str] = Field(default=None)

    status: Optional[AnimalStatus] = Field(default=None)

    # 外键：领养家庭，引用完整性由数据库保证
    family_id: Optional[int] = Field(default=None, foreign_key="familias.id", index=True)

    family: Optional["Family"] = Relationship(back_populates="animals")

    def __setattr__(self, name, value):
        # 字符串状态在进入 SQLAlchemy 之前转换为枚举
        if name == "status" and value is not None and not isinstance(value, AnimalStatus):
            value = AnimalStatus.parse(value)
        super().__setattr__(name, value)

    def set_status(self, status: str) -> None:
        """
        按字符串设置状态

        Raises:
            ValueError: 状态非法，原状态保持不变
        """
        self.status = status

    def __str__(self) -> str:
        return (
            f"Name: {self.name}, Species: {self.species}, "
            f"Age: {self.age}, Description: {self.description}"
        )
