"""A builder that records modifications and applies them on build."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable


@dataclass
class NamedPerson:
    name: str = ""
    position: str = ""


class FunctionalPersonBuilder:
    """Queues changes to a person and applies them in order on build()."""

    def __init__(self) -> None:
        self._actions: list[Callable[[NamedPerson], None]] = []

    def called(self, name: str) -> FunctionalPersonBuilder:
        def set_name(person: NamedPerson) -> None:
            person.name = name

        self._actions.append(set_name)
        return self

    def is_(self, position: str) -> FunctionalPersonBuilder:
        def set_position(person: NamedPerson) -> None:
            person.position = position

        self._actions.append(set_position)
        return self

    def build(self) -> NamedPerson:
        person = NamedPerson()
        for action in self._actions:
            action(person)
        return person


def introduce(action: Callable[[FunctionalPersonBuilder], object]) -> str:
    """Let ``action`` configure a builder, then print and return an introduction."""
    builder = FunctionalPersonBuilder()
    action(builder)
    person = builder.build()
    text = f"Hi, My name is {person.name}, and I work as a {person.position}"
    print(text)
    return text


def demo() -> None:
    """Build a person directly and through introduce()."""
    person = FunctionalPersonBuilder().called("Dmitri").is_("Technician").build()
    print(person.name, person.position)
    introduce(lambda b: b.called("Shreyash").is_("Developer"))