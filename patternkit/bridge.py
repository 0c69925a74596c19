"""Shapes decoupled from the renderers that draw them."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


def _number(value: float) -> str:
    value = float(value)
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return repr(value)


class Renderer(ABC):
    """Draws primitive shapes."""

    @abstractmethod
    def render_circle(self, radius: float) -> str:
        """Describe drawing a circle."""

    @abstractmethod
    def render_square(self, size: int) -> str:
        """Describe drawing a square."""


class VectorRenderer(Renderer):
    """Renders shapes as vectors."""

    def render_circle(self, radius: float) -> str:
        return f"Drawing through vector a circle of radius  {_number(radius)}"

    def render_square(self, size: int) -> str:
        return f"Drawing through vector a square of size  {size}"


@dataclass
class RasterRenderer(Renderer):
    """Renders shapes as pixels."""

    dpi: int = 0

    def render_circle(self, radius: float) -> str:
        return f"Drawing through raster pixels for a circle of radius  {_number(radius)}"

    def render_square(self, size: int) -> str:
        return f"Drawing through raster a square of size  {size}"


@dataclass
class Circle:
    """A circle drawn by some renderer."""

    renderer: Renderer
    radius: float

    def draw(self) -> str:
        return self.renderer.render_circle(self.radius)

    def resize(self, factor: float) -> None:
        self.radius *= factor


@dataclass
class Square:
    """A square drawn by some renderer."""

    renderer: Renderer
    size: int

    def draw(self) -> str:
        return self.renderer.render_square(self.size)


def demo() -> None:
    """Draw shapes through both renderers."""
    raster = RasterRenderer(dpi=10)
    vector = VectorRenderer()

    circle = Circle(raster, 4)
    print(circle.draw())
    circle.resize(2)
    print(circle.draw())

    print(Circle(vector, 7).draw())
    print(Square(raster, 8).draw())
    print(Square(vector, 3).draw())