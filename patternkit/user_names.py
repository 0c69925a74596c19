"""Storing user names plainly and through a shared table of name parts."""

from __future__ import annotations

from dataclasses import dataclass

_MAX_NAMES = 256
_all_names: list[str] = []


def _index_of(part: str) -> int:
    try:
        return _all_names.index(part)
    except ValueError:
        pass
    if len(_all_names) >= _MAX_NAMES:
        raise OverflowError(f"name table is limited to {_MAX_NAMES} entries")
    _all_names.append(part)
    return len(_all_names) - 1


@dataclass
class User:
    """A user holding its full name as one string."""

    full_name: str


class CompactUser:
    """A user whose name parts are indices into a shared table."""

    def __init__(self, full_name: str) -> None:
        self.names: tuple[int, ...] = tuple(
            _index_of(part) for part in full_name.split(" ")
        )

    def full_name(self) -> str:
        return " ".join(_all_names[index] for index in self.names)

    def __repr__(self) -> str:
        return f"CompactUser({self.full_name()!r})"


def demo() -> list[str]:
    """Build both kinds of user, print their full names and return them."""
    plain = User("John Doe")
    compact = CompactUser("John Doe")
    names = [plain.full_name, compact.full_name()]
    for name in names:
        print(name)
    return names