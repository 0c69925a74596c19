"""A dragon built by aggregating a bird and a lizard."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Bird:
    age: int = 0

    def fly(self) -> None:
        if self.age >= 10:
            print("Flying!")


@dataclass
class Lizard:
    age: int = 0

    def crawl(self) -> None:
        if self.age < 10:
            print("Crawling!")


class Dragon:
    """Behaves as both a bird and a lizard, keeping their ages in step."""

    def __init__(self, age: int = 0) -> None:
        self._bird = Bird(age)
        self._lizard = Lizard(age)

    @property
    def age(self) -> int:
        return self._bird.age

    @age.setter
    def age(self, value: int) -> None:
        self._bird.age = value
        self._lizard.age = value

    def fly(self) -> None:
        self._bird.fly()

    def crawl(self) -> None:
        self._lizard.crawl()

    def __repr__(self) -> str:
        return f"Dragon(age={self.age})"


def demo() -> None:
    """Show the dragon at two ages."""
    dragon = Dragon()
    dragon.age = 10
    dragon.fly()
    dragon.crawl()
    print()
    dragon.age = 9
    dragon.fly()
    dragon.crawl()