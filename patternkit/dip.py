"""Relationships between people, browsed through an abstraction."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Protocol


class Relationship(Enum):
    PARENT = 0
    CHILD = 1
    SIBLING = 2


@dataclass(eq=False)
class Person:
    name: str


@dataclass(frozen=True)
class Info:
    """A directed relationship from one person to another."""

    from_: Person
    relationship: Relationship
    to: Person


class RelationshipBrowser(Protocol):
    """Anything that can list the children of a person."""

    def find_all_children_of(self, name: str) -> list[Person]: ...


@dataclass
class Relationships:
    """Low-level storage of relationships."""

    relations: list[Info] = field(default_factory=list)

    def add_parent_and_child(self, parent: Person, child: Person) -> None:
        """Record the relationship in both directions."""
        self.relations.append(Info(parent, Relationship.PARENT, child))
        self.relations.append(Info(child, Relationship.CHILD, parent))

    def find_all_children_of(self, name: str) -> list[Person]:
        """All people recorded as children of the person called ``name``."""
        return [
            info.to
            for info in self.relations
            if info.relationship is Relationship.PARENT and info.from_.name == name
        ]


@dataclass
class Research:
    """High-level module depending only on a relationship browser."""

    browser: RelationshipBrowser

    def investigate(self) -> list[str]:
        """Report John's children, printing and returning one line each."""
        lines = [
            f"John has a child called {child.name}"
            for child in self.browser.find_all_children_of("John")
        ]
        for line in lines:
            print(line)
        return lines


def demo() -> None:
    """Investigate a small family tree."""
    rels = Relationships()
    rels.add_parent_and_child(Person("John"), Person("Mark"))
    rels.add_parent_and_child(Person("Mark"), Person("Chris"))
    Research(rels).investigate()