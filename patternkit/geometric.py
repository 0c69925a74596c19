"""Composite drawing objects."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class GraphicObject:
    """A named, optionally coloured object that may contain others."""

    name: str
    color: str = ""
    children: list[GraphicObject] = field(default_factory=list)

    def _lines(self, depth: int):
        prefix = "*" * depth
        label = f"{self.color} {self.name}" if self.color else self.name
        yield prefix + label
        for child in self.children:
            yield from child._lines(depth + 1)

    def __str__(self) -> str:
        return "".join(line + "\n" for line in self._lines(0))


def new_circle(color: str) -> GraphicObject:
    """A circle of the given colour."""
    return GraphicObject(name="Circle", color=color)


def new_square(color: str) -> GraphicObject:
    """A square of the given colour."""
    return GraphicObject(name="Square", color=color)


def demo() -> None:
    """Print a drawing with a nested group."""
    drawing = GraphicObject("My Drawing")
    drawing.children.append(new_circle("Red"))
    drawing.children.append(new_square("Yellow"))

    group = GraphicObject("Group 1")
    group.children.append(new_circle("Blue"))
    group.children.append(new_square("Blue"))
    drawing.children.append(group)

    print(drawing)