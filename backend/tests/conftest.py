"""
Pytest 测试配置
提供测试数据库、样例数据和 Repository/Service 实例
"""

import sys
from pathlib import Path
from typing import Generator

import pytest
from sqlmodel import Session

# 添加 backend 目录到 sys.path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from shelter.db.init_db import create_tables, get_engine
from shelter.models import Animal, AnimalStatus, Family


# ==================== 数据库 Fixtures ====================

@pytest.fixture(scope="function")
def test_db_engine():
    """
    创建测试用的内存数据库引擎
    每个测试函数都会获得一个全新的数据库（外键检查已开启）
    """
    engine = get_engine("sqlite:///:memory:")
    create_tables(engine)

    yield engine

    engine.dispose()


@pytest.fixture(scope="function")
def test_db_session(test_db_engine) -> Generator[Session, None, None]:
    with Session(test_db_engine) as session:
        yield session


# ==================== 测试数据 Fixtures ====================

@pytest.fixture(scope="function")
def test_family(test_db_session: Session) -> Family:
    family = Family(name="Gomez", age=45, city="Madrid")
    test_db_session.add(family)
    test_db_session.commit()
    test_db_session.refresh(family)
    return family


@pytest.fixture(scope="function")
def test_animals(test_db_session: Session) -> list[Animal]:
    """
    创建一组测试动物（物种、年龄、描述各不相同）
    """
    animals = [
        Animal(name="Luna", species="cat", age=2, description="Calm cat, recently abandoned",
               status=AnimalStatus.RECENTLY_ABANDONED),
        Animal(name="Max", species="dog", age=5, description="Energetic dog, loves to run",
               status=AnimalStatus.IN_SHELTER),
        Animal(name="Rocky", species="Dog", age=2, description="Shy, needs a quiet home",
               status=AnimalStatus.IN_SHELTER),
        Animal(name="Kiwi", species="bird", age=1, description=None),
    ]
    for animal in animals:
        test_db_session.add(animal)
    test_db_session.commit()
    for animal in animals:
        test_db_session.refresh(animal)
    return animals


# ==================== Repository Fixtures ====================

@pytest.fixture(scope="function")
def animal_repository(test_db_session: Session):
    from shelter.repositories.animal_repository import AnimalRepository
    return AnimalRepository(test_db_session)


@pytest.fixture(scope="function")
def family_repository(test_db_session: Session):
    from shelter.repositories.family_repository import FamilyRepository
    return FamilyRepository(test_db_session)


@pytest.fixture(scope="function")
def shelter_service(test_db_session: Session):
    from shelter.services.shelter_service import ShelterService
    return ShelterService(test_db_session)
