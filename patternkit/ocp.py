"""Filtering products, by fixed methods and by composable specifications."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Iterable


class Color(Enum):
    RED = 0
    BLUE = 1
    GREEN = 2


class Size(Enum):
    SMALL = 0
    MEDIUM = 1
    LARGE = 2


@dataclass
class Product:
    name: str
    color: Color
    size: Size


class Filter:
    """One method per criterion; every new criterion needs a new method."""

    def filter_by_color(self, products: Iterable[Product], color: Color) -> list[Product]:
        return [p for p in products if p.color == color]

    def filter_by_size(self, products: Iterable[Product], size: Size) -> list[Product]:
        return [p for p in products if p.size == size]

    def filter_by_size_and_color(
        self, products: Iterable[Product], size: Size, color: Color
    ) -> list[Product]:
        return [p for p in products if p.size == size and p.color == color]


class Specification(ABC):
    """A condition a product may satisfy."""

    @abstractmethod
    def is_satisfied(self, product: Product) -> bool:
        """Whether ``product`` meets the condition."""


@dataclass
class ColorSpecification(Specification):
    color: Color

    def is_satisfied(self, product: Product) -> bool:
        return product.color == self.color


@dataclass
class SizeSpecification(Specification):
    size: Size

    def is_satisfied(self, product: Product) -> bool:
        return product.size == self.size


@dataclass
class AndSpecification(Specification):
    spec_a: Specification
    spec_b: Specification

    def is_satisfied(self, product: Product) -> bool:
        return self.spec_a.is_satisfied(product) and self.spec_b.is_satisfied(product)


class BetterFilter:
    """Filters by any specification."""

    def filter(self, products: Iterable[Product], spec: Specification) -> list[Product]:
        return [p for p in products if spec.is_satisfied(p)]


def demo() -> None:
    """Find large green products both ways."""
    products = [
        Product("Apple", Color.GREEN, Size.SMALL),
        Product("Tree", Color.GREEN, Size.LARGE),
        Product("House", Color.BLUE, Size.LARGE),
    ]
    for product in Filter().filter_by_size_and_color(products, Size.LARGE, Color.GREEN):
        print(product.name)

    spec = AndSpecification(ColorSpecification(Color.GREEN), SizeSpecification(Size.LARGE))
    for product in BetterFilter().filter(products, spec):
        print(product.name)