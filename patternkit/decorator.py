"""Shapes extended by wrapping them in decorators."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


class Shape(ABC):
    """Something that can describe itself."""

    @abstractmethod
    def render(self) -> str:
        """Describe the shape."""


@dataclass
class Circle(Shape):
    radius: float

    def render(self) -> str:
        return f"Circle of radius {self.radius:f}"

    def resize(self, factor: float) -> None:
        self.radius *= factor


@dataclass
class Square(Shape):
    side: float

    def render(self) -> str:
        return f"Square with side {self.side:f}"


@dataclass
class ColoredShape(Shape):
    """Adds a colour to another shape."""

    shape: Shape
    color: str

    def render(self) -> str:
        return f"{self.shape.render()} has the color {self.color}"


@dataclass
class TransparentShape(Shape):
    """Adds transparency (0..1) to another shape."""

    shape: Shape
    transparency: float

    def render(self) -> str:
        return f"{self.shape.render()} has {self.transparency * 100.0:f}% transparency"


def demo() -> None:
    """Render a circle with stacked decorators."""
    circle = Circle(2)
    print(circle.render())
    red_circle = ColoredShape(circle, "Red")
    print(red_circle.render())
    print(TransparentShape(red_circle, 0.93).render())