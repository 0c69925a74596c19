"""Text capitalisation with a per-character mask and with shared ranges."""

from __future__ import annotations

from dataclasses import dataclass, field


class FormattedText:
    """Text with one capitalisation flag per character."""

    def __init__(self, plain_text: str) -> None:
        self.plain_text = plain_text
        self._capitalize = [False] * len(plain_text)

    def capitalize(self, start: int, end: int) -> None:
        """Mark characters from ``start`` to ``end`` (inclusive) as upper case."""
        if start < 0 or end >= len(self.plain_text):
            raise IndexError(
                f"range {start}..{end} outside text of length {len(self.plain_text)}"
            )
        for position in range(start, end + 1):
            self._capitalize[position] = True

    def __str__(self) -> str:
        return "".join(
            char.upper() if flag else char
            for char, flag in zip(self.plain_text, self._capitalize)
        )


@dataclass
class TextRange:
    """A span of text (inclusive at both ends) with formatting flags."""

    start: int
    end: int
    capitalize: bool = False
    bold: bool = False
    italic: bool = False

    def covers(self, position: int) -> bool:
        return self.start <= position <= self.end


@dataclass
class BetterFormattedText:
    """Text formatted through a list of ranges rather than a full mask."""

    plain_text: str
    formatting: list[TextRange] = field(default_factory=list)

    def range(self, start: int, end: int) -> TextRange:
        """Register and return a new formatting range."""
        text_range = TextRange(start, end)
        self.formatting.append(text_range)
        return text_range

    def __str__(self) -> str:
        return "".join(
            char.upper()
            if any(r.covers(position) for r in self.formatting)
            else char
            for position, char in enumerate(self.plain_text)
        )


def demo() -> None:
    """Capitalise parts of a sentence both ways."""
    text = "This is a brave new world"
    ft = FormattedText(text)
    ft.capitalize(10, 15)
    print(ft)

    bft = BetterFormattedText(text)
    bft.range(16, 19).capitalize = True
    print(bft)