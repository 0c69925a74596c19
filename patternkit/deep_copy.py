"""Copying people and their addresses deeply."""

from __future__ import annotations

import pickle
from dataclasses import dataclass, field, replace


@dataclass
class Address:
    street_address: str = ""
    city: str = ""
    country: str = ""

    def deep_copy(self) -> Address:
        return replace(self)


@dataclass
class Person:
    name: str = ""
    address: Address | None = None
    friends: list[str] = field(default_factory=list)

    def deep_copy(self) -> Person:
        """Copy the person along with their address and friends."""
        address = self.address.deep_copy() if self.address is not None else None
        return Person(name=self.name, address=address, friends=list(self.friends))

    def deep_copy_through_serialization(self) -> Person:
        """Copy the person by serialising and deserialising it."""
        return pickle.loads(pickle.dumps(self))


def demo() -> None:
    """Compare sharing, manual copying and serialised copying."""
    john = Person(
        name="John",
        address=Address("123 London Rd", "London", "UK"),
        friends=["Jane", "Mark", "Adam"],
    )

    jane = replace(john, name="Jane", address=Address("212 Baker Street", "London", "UK"))
    print(john)
    print(jane)

    print()
    mark = john.deep_copy()
    mark.name = "Mark"
    mark.address.street_address = "414 Capybara Street"
    mark.friends.append("Angela")
    print(john.name, john.address, john.friends)
    print(mark.name, mark.address, mark.friends)

    print()
    adam = john.deep_copy_through_serialization()
    adam.name = "Adam"
    adam.address.street_address = "Garden Of Eve"
    adam.friends.append("Eve")
    print(john.name, john.address, john.friends)
    print(adam.name, adam.address, adam.friends)