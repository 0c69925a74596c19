"""A lazily created, shared database and a substitute for testing."""

from __future__ import annotations

import threading
from abc import ABC, abstractmethod
from typing import Iterable


class Database(ABC):
    """Looks up city populations."""

    @abstractmethod
    def get_population(self, name: str) -> int:
        """Population of ``name``, or 0 if unknown."""


class CapitalsDatabase(Database):
    """Populations of a few capitals."""

    def __init__(self, capitals: dict[str, int]) -> None:
        self.capitals = dict(capitals)

    def get_population(self, name: str) -> int:
        return self.capitals.get(name, 0)


_instance: CapitalsDatabase | None = None
_lock = threading.Lock()


def get_singleton_db() -> Database:
    """Return the shared database, creating it on first use."""
    global _instance
    if _instance is None:
        with _lock:
            if _instance is None:
                print("Initializing Database")
                _instance = CapitalsDatabase(
                    {
                        "Delhi": 12435323,
                        "Seoul": 35432343,
                        "New York": 53564454,
                    }
                )
    return _instance


class DummyDatabase(Database):
    """Fixed data for tests, filled in on first lookup."""

    def __init__(self) -> None:
        self.dummy_data: dict[str, int] = {}

    def get_population(self, name: str) -> int:
        if not self.dummy_data:
            self.dummy_data = {"alpha": 1, "beta": 2, "gamma": 3}
        return self.dummy_data.get(name, 0)


def get_total_population(cities: Iterable[str]) -> int:
    """Total population of ``cities`` according to the shared database."""
    return get_total_population_ex(get_singleton_db(), cities)


def get_total_population_ex(db: Database, cities: Iterable[str]) -> int:
    """Total population of ``cities`` according to ``db``."""
    return sum(db.get_population(city) for city in cities)


def demo() -> None:
    """Query the shared database and a dummy one."""
    print(get_singleton_db().get_population("Delhi"))
    print(get_singleton_db().get_population("Seoul"))
    print(get_total_population(["Delhi", "Seoul", "New York"]))
    print(get_total_population_ex(DummyDatabase(), ["alpha", "gamma"]) == 4)