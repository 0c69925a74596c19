"""Building indented HTML element trees."""

from __future__ import annotations

from dataclasses import dataclass, field

INDENT_SIZE = 2


@dataclass
class HtmlElement:
    """An element with optional text and child elements."""

    name: str
    text: str = ""
    elements: list[HtmlElement] = field(default_factory=list)

    def _render(self, indent: int) -> str:
        pad = " " * (INDENT_SIZE * indent)
        parts = [f"{pad}<{self.name}>\n"]
        if self.text:
            parts.append(" " * (INDENT_SIZE * (indent + 1)) + self.text + "\n")
        parts.extend(child._render(indent + 1) for child in self.elements)
        parts.append(f"{pad}</{self.name}>\n")
        return "".join(parts)

    def __str__(self) -> str:
        return self._render(0)


class HtmlBuilder:
    """Fluent builder for a root element and its children."""

    def __init__(self, root_name: str) -> None:
        self.root_name = root_name
        self.root = HtmlElement(root_name)

    def add_child(self, child_name: str, child_text: str) -> HtmlBuilder:
        self.root.elements.append(HtmlElement(child_name, child_text))
        return self

    def __str__(self) -> str:
        return str(self.root)


def demo() -> None:
    """Compare plain string building with the builder."""
    print("<p>" + "hello" + "</p>")
    print("<ul>" + "".join(f"<li>{w}</li>" for w in ["hello", "world"]) + "</ul>")

    builder = HtmlBuilder("ul")
    builder.add_child("li", "hello")
    builder.add_child("li", "world")
    print(builder)

    print(HtmlBuilder("ul").add_child("li", "item 1").add_child("li", "item 2"))