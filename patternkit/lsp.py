"""Rectangles and a square that breaks substitutability."""

from __future__ import annotations


class Rectangle:
    """A rectangle whose sides can be set independently."""

    def __init__(self, width: int = 0, height: int = 0) -> None:
        self._width = width
        self._height = height

    @property
    def width(self) -> int:
        return self._width

    @width.setter
    def width(self, value: int) -> None:
        self._width = value

    @property
    def height(self) -> int:
        return self._height

    @height.setter
    def height(self, value: int) -> None:
        self._height = value

    def __repr__(self) -> str:
        return f"{type(self).__name__}(width={self._width}, height={self._height})"


class Square(Rectangle):
    """A square: setting either side sets both."""

    def __init__(self, size: int = 0) -> None:
        super().__init__(size, size)

    @Rectangle.width.setter
    def width(self, value: int) -> None:
        self._width = value
        self._height = value

    @Rectangle.height.setter
    def height(self, value: int) -> None:
        self._width = value
        self._height = value


def use_it(sized: Rectangle) -> tuple[int, int]:
    """Set the height to 10 and compare the expected area with the actual one."""
    width = sized.width
    sized.height = 10
    expected_area = 10 * width
    actual_area = sized.width * sized.height
    print(expected_area, actual_area)
    return expected_area, actual_area


def demo() -> None:
    """Show that a square does not behave like a rectangle."""
    use_it(Rectangle(20, 20))
    use_it(Square(20))