"""Employees created from per-office prototypes."""

from __future__ import annotations

import pickle
from dataclasses import dataclass, field
from enum import Enum


@dataclass
class OfficeAddress:
    suite: int = 0
    street_address: str = ""
    city: str = ""


@dataclass
class Employee:
    name: str = ""
    office: OfficeAddress = field(default_factory=OfficeAddress)

    def deep_copy(self) -> Employee:
        """Copy the employee by serialising and deserialising it."""
        return pickle.loads(pickle.dumps(self))


class Office(Enum):
    MAIN_OFFICE = 0
    AUX_OFFICE = 1


_PROTOTYPES = {
    Office.MAIN_OFFICE: Employee(
        office=OfficeAddress(street_address="123 East Drive", city="London")
    ),
    Office.AUX_OFFICE: Employee(
        office=OfficeAddress(street_address="456 West Drive", city="London")
    ),
}


def new_employee(office: Office | int, name: str, suite: int) -> Employee:
    """Create an employee from the prototype of the given office."""
    try:
        proto = _PROTOTYPES[Office(office)]
    except (ValueError, KeyError):
        raise ValueError("No such office") from None
    employee = proto.deep_copy()
    employee.name = name
    employee.office.suite = suite
    return employee


def demo() -> None:
    """Create one employee at each office."""
    john = new_employee(Office.MAIN_OFFICE, "John", 102)
    mark = new_employee(Office.AUX_OFFICE, "Mark", 205)
    print(john.name, john.office)
    print(mark.name, mark.office)