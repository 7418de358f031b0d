from __future__ import annotations

from contextlib import contextmanager
from typing import Iterable, Iterator, Sequence

import pytest

from delivery_routes.data.store import filter_by_name
from delivery_routes.models.domain import Edge, Place, PlaceCategory

ZONE = PlaceCategory.ZONE
DC = PlaceCategory.DISTRIBUTION_CENTER


class InMemorySession:
    def __init__(self, store: "InMemoryGraphStore") -> None:
        self._store = store

    def fetch_places(self) -> list[Place]:
        self._store.queries += 1
        if self._store.fail_with is not None:
            raise self._store.fail_with
        return list(self._store.places)

    def fetch_edges(self) -> list[Edge]:
        self._store.queries += 1
        if self._store.fail_with is not None:
            raise self._store.fail_with
        return list(self._store.edges)

    def find_places(self, names: Sequence[str]) -> list[Place]:
        return filter_by_name(self.fetch_places(), names)


class InMemoryGraphStore:
    """Store double that counts sessions so tests can check release."""

    name = "memory"

    def __init__(self, places: Iterable[Place] = (), edges: Iterable[Edge] = ()) -> None:
        self.places = list(places)
        self.edges = list(edges)
        self.fail_with: Exception | None = None
        self.opened = 0
        self.released = 0
        self.queries = 0

    @contextmanager
    def session(self) -> Iterator[InMemorySession]:
        self.opened += 1
        try:
            yield InMemorySession(self)
        finally:
            self.released += 1


def place(name: str, category: PlaceCategory = ZONE, place_id: str | None = None) -> Place:
    return Place(id=place_id or name, name=name, category=category)


def edge(from_id: str, to_id: str, minutes: float) -> Edge:
    return Edge(from_id=from_id, to_id=to_id, travel_minutes=minutes)


def edge_weight(graph, from_id: str, to_id: str) -> float | None:
    return dict(graph.adjacency.get(from_id, ())).get(to_id)


@pytest.fixture
def abc_store() -> InMemoryGraphStore:
    """A(DC) -> B 10, A -> C 4, C -> B 3: fastest A to B is 7 via C."""
    return InMemoryGraphStore(
        places=[place("A", DC), place("B"), place("C")],
        edges=[edge("A", "B", 10), edge("A", "C", 4), edge("C", "B", 3)],
    )
