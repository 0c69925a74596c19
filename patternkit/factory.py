"""Factory functions, factory generators and a role-based factory."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable


@dataclass
class Person:
    name: str
    age: int
    eye_count: int = 2


def new_person(name: str, age: int) -> Person:
    """Create a person with the default number of eyes."""
    return Person(name=name, age=age, eye_count=2)


@dataclass
class Employee:
    name: str = ""
    position: str = ""
    annual_income: int = 0


def new_employee_factory(position: str, annual_income: int) -> Callable[[str], Employee]:
    """Return a function that creates employees with a fixed position and income."""

    def create(name: str) -> Employee:
        return Employee(name=name, position=position, annual_income=annual_income)

    return create


@dataclass
class EmployeeFactory:
    """Creates employees with a fixed position and income."""

    position: str
    annual_income: int

    def create(self, name: str) -> Employee:
        return Employee(name=name, position=self.position, annual_income=self.annual_income)


@dataclass
class Greeter:
    """A person who can say hello."""

    name: str
    age: int

    def say_hello(self) -> str:
        text = f"Hi, my name is {self.name} and I am {self.age} years old"
        print(text)
        return text


def new_greeter(name: str, age: int) -> Greeter:
    return Greeter(name=name, age=age)


class Role(Enum):
    DEVELOPER = 0
    MANAGER = 1


_ROLE_TEMPLATES = {
    Role.DEVELOPER: ("Developer", 60000),
    Role.MANAGER: ("Manager", 80000),
}


def new_employee_for_role(role: Role | int) -> Employee:
    """Create an unnamed employee preset for the given role."""
    try:
        position, income = _ROLE_TEMPLATES[Role(role)]
    except (ValueError, KeyError):
        raise ValueError("No such role") from None
    return Employee(position=position, annual_income=income)


def demo() -> None:
    """Exercise each kind of factory."""
    print(Person("Shreyash", 24, 2))
    print(new_person("Shreyash", 24))

    new_greeter("Shreyash", 24).say_hello()

    developer_factory = new_employee_factory("Developer", 60000)
    manager_factory = new_employee_factory("Manager", 80000)
    print(developer_factory("Shreyash"))
    print(manager_factory("Adam"))

    print(EmployeeFactory("Developer", 60000).create("Shreyash"))
    print(EmployeeFactory("QA Engineer", 40000).create("Christy"))

    manager = new_employee_for_role(Role.MANAGER)
    manager.name = "Sam"
    print(manager)