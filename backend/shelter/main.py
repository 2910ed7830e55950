"""
收容所控制台 - 主循环入口

功能：
1. 数据库初始化（建表）
2. 菜单循环：登记动物 / 按物种、年龄、描述检索 / 登记领养家庭 / 退出

使用示例：
    python -m shelter.main
"""

from typing import List

from shelter.db.init_db import get_session, init_db
from shelter.exceptions import StorageError
from shelter.models.animal import Animal, AnimalStatus, Species
from shelter.services.shelter_service import ShelterService

MENU_OPTIONS = [
    "Register new animal",
    "Search animals by species",
    "Search animals by age",
    "Search animals by description",
    "Register a family adopting an animal",
    "Exit",
]
EXIT_OPTION = len(MENU_OPTIONS)


def print_menu() -> None:
    print("\n=== Animal Shelter Menu ===")
    for number, label in enumerate(MENU_OPTIONS, start=1):
        print(f"{number}. {label}")


def read_int(prompt: str) -> int:
    """读取整数，输入非法时重新提示"""
    while True:
        raw = input(prompt).strip()
        try:
            return int(raw)
        except ValueError:
            print("Please enter a whole number.")


def print_animals(animals: List[Animal], empty_message: str) -> None:
    if not animals:
        print(empty_message)
        return
    for animal in animals:
        print(animal)


def register_animal(service: ShelterService) -> None:
    print("Enter the new animal's details:")
    name = input("Name: ").strip()
    species = input(f"Species ({Species.prompt_hint()}): ").strip()
    age = read_int("Age: ")
    description = input("Description: ").strip()
    raw_status = input(f"Status ({AnimalStatus.valid_descriptions()}) [In shelter]: ").strip()

    # 先解析状态，非法时不写库
    status = AnimalStatus.parse(raw_status) if raw_status else None
    service.register_animal(name, species, age, description or None, status)
    print("Animal registered successfully.")


def search_by_species(service: ShelterService) -> None:
    species = input(f"Species to search for ({Species.prompt_hint()}): ").strip()
    print_animals(service.search_by_species(species), "No animals found for that species.")


def search_by_age(service: ShelterService) -> None:
    age = read_int("Age of the animals to search for: ")
    print_animals(service.search_by_age(age), "No animals found with that age.")


def search_by_description(service: ShelterService) -> None:
    text = input("Text to look for in the description: ").strip()
    print_animals(service.search_by_description(text), "No animals found with that description.")


def register_family(service: ShelterService) -> None:
    animals = service.list_animals()
    if not animals:
        print("There are no animals available in the shelter.")
        return

    print("Animals available for adoption:")
    print_animals(animals, "")

    species = input("Species of the animal to adopt: ").strip()
    if service.find_first_by_species(species) is None:
        print("No animal found with that species.")
        return

    print("Enter the family's details:")
    name = input("Family name: ").strip()
    age = read_int("Family age: ")
    city = input("Family city: ").strip()

    service.register_adopting_family(species, name, age, city)
    print("The family has adopted the animal successfully.")


ACTIONS = {
    1: register_animal,
    2: search_by_species,
    3: search_by_age,
    4: search_by_description,
    5: register_family,
}


def run_menu(service: ShelterService) -> None:
    """
    菜单循环

    ValueError 和 StorageError 只打印错误并回到菜单
    Ctrl+C 或输入结束时退出
    """
    while True:
        try:
            print_menu()
            option = read_int("Select an option: ")

            if option == EXIT_OPTION:
                print("Exiting the program...")
                break

            action = ACTIONS.get(option)
            if action is None:
                print("Invalid option, please try again.")
                continue

            action(service)

        except (ValueError, StorageError) as e:
            print(f"[Error] {e}")
        except (KeyboardInterrupt, EOFError):
            print("\nExiting the program...")
            break


def main() -> None:
    engine = init_db()
    with get_session(engine) as session:
        run_menu(ShelterService(session))


if __name__ == "__main__":
    main()
