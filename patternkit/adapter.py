"""Adapting vector images (lines) to raster images (points)."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Protocol, Sequence


@dataclass(frozen=True)
class Line:
    """A line segment between two integer points."""

    x1: int
    y1: int
    x2: int
    y2: int


@dataclass
class VectorImage:
    """An image described by line segments."""

    lines: list[Line] = field(default_factory=list)


@dataclass(frozen=True)
class Point:
    """A single pixel position."""

    x: int
    y: int


class RasterImage(Protocol):
    """Anything that exposes a sequence of points."""

    @property
    def points(self) -> Sequence[Point]: ...


def new_rectangle(width: int, height: int) -> VectorImage:
    """Build the outline of a rectangle as four lines."""
    width -= 1
    height -= 1
    return VectorImage(
        lines=[
            Line(0, 0, width, 0),
            Line(0, 0, 0, height),
            Line(width, 0, width, height),
            Line(0, height, width, height),
        ]
    )


def draw_points(owner: RasterImage) -> str:
    """Render the owner's points as a grid of '*' characters."""
    points = list(owner.points)
    max_x = max((p.x for p in points), default=0)
    max_y = max((p.y for p in points), default=0)
    max_x = max(max_x, 0) + 1
    max_y = max(max_y, 0) + 1

    grid = [[" "] * max_x for _ in range(max_y)]
    for point in points:
        grid[point.y][point.x] = "*"

    return "".join("".join(row) + "\n" for row in grid)


def _line_points(line: Line) -> Iterator[Point]:
    left, right = sorted((line.x1, line.x2))
    top, bottom = sorted((line.y1, line.y2))
    if right == left:
        for y in range(top, bottom + 1):
            yield Point(left, y)
    elif line.y2 == line.y1:
        for x in range(left, right + 1):
            yield Point(x, top)


_point_cache: dict[Line, tuple[Point, ...]] = {}


@dataclass
class VectorToRasterAdapter:
    """Presents a vector image as a collection of raster points."""

    points: list[Point] = field(default_factory=list)

    def add_line(self, line: Line) -> None:
        """Convert a horizontal or vertical line into points."""
        self.points.extend(_line_points(line))
        print("we have", len(self.points), "points")

    def add_line_cached(self, line: Line) -> None:
        """Like add_line, reusing points computed earlier for an equal line."""
        cached = _point_cache.get(line)
        if cached is not None:
            self.points.extend(cached)
            return
        generated = tuple(_line_points(line))
        _point_cache[line] = generated
        self.points.extend(generated)
        print("we have", len(self.points), "points")


def vector_to_raster(vi: VectorImage) -> VectorToRasterAdapter:
    """Adapt a vector image to the raster interface."""
    adapter = VectorToRasterAdapter()
    for line in vi.lines:
        adapter.add_line_cached(line)
    return adapter


def demo() -> None:
    """Draw a few rectangles through the adapter."""
    rc = new_rectangle(30, 10)
    rc2 = new_rectangle(30, 10)
    print(draw_points(vector_to_raster(rc)))
    print(draw_points(vector_to_raster(rc2)))
    print(draw_points(vector_to_raster(new_rectangle(30, 20))))