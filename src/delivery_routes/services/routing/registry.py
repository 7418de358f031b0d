"""Place name resolution."""

from __future__ import annotations

from collections import Counter
from typing import Iterable

from ...data.store import GraphStore
from ...models.domain import Place
from .errors import InvalidGraphError, PlaceNotFoundError


def ensure_unique_names(places: Iterable[Place]) -> None:
    counts = Counter(place.name for place in places)
    duplicated = sorted(name for name, count in counts.items() if count > 1)
    if duplicated:
        raise InvalidGraphError(f"Place names are not unique: {', '.join(duplicated)}")


class PlaceRegistry:
    """Read-only view of the places held by a graph store.

    Names are the public lookup key and must be unique across categories.
    """

    def __init__(self, store: GraphStore) -> None:
        self._store = store

    def list_places(self) -> list[Place]:
        """Return every place sorted by name."""
        with self._store.session() as session:
            places = session.fetch_places()
        return sorted(places, key=lambda place: place.name)

    def resolve(self, name: str) -> Place:
        return self.resolve_many(name)[0]

    def resolve_many(self, *names: str) -> list[Place]:
        """Resolve several names with a single store session.

        Raises:
            PlaceNotFoundError: listing every name that did not resolve.
            InvalidGraphError: if a name is held by more than one place.
        """
        unique_names = list(dict.fromkeys(names))
        with self._store.session() as session:
            matches = session.find_places(unique_names)
        ensure_unique_names(matches)

        by_name = {place.name: place for place in matches}
        missing = [name for name in unique_names if name not in by_name]
        if missing:
            raise PlaceNotFoundError(missing)
        return [by_name[name] for name in names]
