"""A journal that numbers its entries."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class Journal:
    """Numbered text entries; the numbering is shared by all journals."""

    entries: list[str] = field(default_factory=list)

    _entry_count = 0

    def add_entry(self, text: str) -> int:
        """Append an entry and return its number."""
        Journal._entry_count += 1
        self.entries.append(f"{Journal._entry_count}: {text}")
        return Journal._entry_count

    def remove_entry(self, index: int) -> None:
        """Step the shared entry counter back by one."""
        Journal._entry_count -= 1

    def save(self, filename: str | Path) -> None:
        """Write the journal to ``filename``."""
        Path(filename).write_text(str(self))

    def __str__(self) -> str:
        return "\n".join(self.entries)