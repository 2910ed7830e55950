"""
数据库模型单元测试
验证动物、家庭模型及状态枚举的行为
"""

from datetime import datetime

import pytest

from shelter.models.animal import Animal, AnimalStatus, Species
from shelter.models.family import Family


class TestAnimalStatus:
    """测试动物状态枚举"""

    @pytest.mark.parametrize("text", ["IN_SHELTER", "in_shelter", "In shelter", "  in SHELTER "])
    def test_parse_accepts_name_value_and_description(self, text):
        assert AnimalStatus.parse(text) == AnimalStatus.IN_SHELTER

    def test_parse_invalid_lists_valid_values(self):
        with pytest.raises(ValueError) as exc_info:
            AnimalStatus.parse("adopted")

        message = str(exc_info.value)
        assert "Recently abandoned" in message
        assert "In shelter" in message
        assert "Soon to be fostered" in message

    def test_description(self):
        assert AnimalStatus.SOON_TO_BE_FOSTERED.description == "Soon to be fostered"
        assert str(AnimalStatus.RECENTLY_ABANDONED) == "Recently abandoned"


class TestAnimalModel:
    """测试动物模型"""

    def test_animal_creation(self):
        animal = Animal(name="Luna", species="cat", age=2, description="Calm")

        assert animal.name == "Luna"
        assert animal.species == "cat"
        assert animal.id is None  # 尚未保存到数据库
        assert animal.status is None
        assert animal.family_id is None
        assert isinstance(animal.created_at, datetime)

    def test_set_status_from_string(self):
        animal = Animal(name="Luna", species="cat", age=2)

        animal.set_status("recently abandoned")

        assert animal.status == AnimalStatus.RECENTLY_ABANDONED

    def test_string_status_assignment_is_converted(self):
        animal = Animal(name="Luna", species="cat", age=2, status="recently abandoned")

        assert animal.status is AnimalStatus.RECENTLY_ABANDONED

        animal.status = "In shelter"

        assert animal.status is AnimalStatus.IN_SHELTER

    def test_invalid_string_status_assignment_keeps_previous(self):
        animal = Animal(name="Luna", species="cat", age=2, status=AnimalStatus.IN_SHELTER)

        with pytest.raises(ValueError) as exc_info:
            animal.status = "bogus"

        assert "Valid values are" in str(exc_info.value)
        assert animal.status is AnimalStatus.IN_SHELTER

    def test_invalid_string_status_at_construction(self):
        with pytest.raises(ValueError):
            Animal(name="Luna", species="cat", age=2, status="adopted")

    def test_set_invalid_status_keeps_previous(self):
        animal = Animal(name="Luna", species="cat", age=2, status=AnimalStatus.IN_SHELTER)

        with pytest.raises(ValueError):
            animal.set_status("lost")

        assert animal.status == AnimalStatus.IN_SHELTER

    def test_str(self):
        animal = Animal(name="Max", species="dog", age=5, description="Energetic")

        assert str(animal) == "Name: Max, Species: dog, Age: 5, Description: Energetic"

    def test_species_prompt_hint(self):
        hint = Species.prompt_hint()

        assert "cat" in hint
        assert "vietnamese pig" in hint


class TestFamilyModel:
    """测试家庭模型的赋值校验"""

    def test_family_creation(self):
        family = Family(name="Gomez", age=45, city="Madrid")

        assert family.name == "Gomez"
        assert family.age == 45
        assert family.city == "Madrid"
        assert family.animal_count == 0

    @pytest.mark.parametrize("kwargs", [
        {"name": "", "age": 45, "city": "Madrid"},
        {"name": "Gomez", "age": 45, "city": "   "},
        {"name": "Gomez", "age": 0, "city": "Madrid"},
        {"name": "Gomez", "age": -3, "city": "Madrid"},
    ])
    def test_invalid_construction(self, kwargs):
        with pytest.raises(ValueError):
            Family(**kwargs)

    @pytest.mark.parametrize("value", ["", "   ", None])
    def test_blank_name_keeps_previous(self, value):
        family = Family(name="Gomez", age=45, city="Madrid")

        with pytest.raises(ValueError):
            family.name = value

        assert family.name == "Gomez"

    @pytest.mark.parametrize("value", ["", "\t"])
    def test_blank_city_keeps_previous(self, value):
        family = Family(name="Gomez", age=45, city="Madrid")

        with pytest.raises(ValueError):
            family.city = value

        assert family.city == "Madrid"

    def test_non_positive_age_keeps_previous(self):
        family = Family(name="Gomez", age=45, city="Madrid")

        with pytest.raises(ValueError):
            family.age = 0

        assert family.age == 45

    def test_valid_assignment(self):
        family = Family(name="Gomez", age=45, city="Madrid")

        family.city = "Valencia"
        family.age = 46

        assert family.city == "Valencia"
        assert family.age == 46

    def test_add_and_remove_animal(self):
        family = Family(name="Gomez", age=45, city="Madrid")
        animal = Animal(name="Luna", species="cat", age=2)

        family.add_animal(animal)
        family.add_animal(None)

        assert family.animal_count == 1
        assert animal.family is family

        family.remove_animal(animal)

        assert family.animal_count == 0

    def test_str(self):
        family = Family(name="Gomez", age=45, city="Madrid")

        assert str(family) == "Family [Name: Gomez, Age: 45, City: Madrid, Adopted animals: 0]"
