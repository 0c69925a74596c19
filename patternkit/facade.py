"""A console facade over buffers and viewports."""

from __future__ import annotations

from dataclasses import dataclass, field


class Buffer:
    """A fixed-size grid of characters, stored flat."""

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self._cells = ["\0"] * (width * height)

    def at(self, index: int) -> str:
        if not 0 <= index < len(self._cells):
            raise IndexError(f"buffer index {index} out of range")
        return self._cells[index]

    def __len__(self) -> int:
        return len(self._cells)


@dataclass
class Viewport:
    """A window onto a buffer starting at some offset."""

    buffer: Buffer
    offset: int = 0

    def character_at(self, index: int) -> str:
        return self.buffer.at(self.offset + index)


@dataclass
class Console:
    """Hides buffers and viewports behind a simple interface."""

    buffers: list[Buffer] = field(default_factory=list)
    viewports: list[Viewport] = field(default_factory=list)
    offset: int = 0

    @classmethod
    def default(cls) -> Console:
        """A console with one 200x150 buffer and one viewport on it."""
        buffer = Buffer(200, 150)
        return cls(buffers=[buffer], viewports=[Viewport(buffer)], offset=0)

    def character_at(self, index: int) -> str:
        return self.viewports[0].character_at(index)


def demo() -> None:
    """Read a character through the default console."""
    console = Console.default()
    print(ord(console.character_at(10)))