"""Materialize the weighted graph used by the shortest-path engine."""

from __future__ import annotations

import logging
import threading
import time
from datetime import datetime, timezone
from typing import Callable, Iterable

from ...data.store import GraphStore
from ...models.domain import Edge, Place
from .errors import InvalidGraphError
from .models import Graph
from .registry import ensure_unique_names

logger = logging.getLogger(__name__)


def build_graph(places: Iterable[Place], edges: Iterable[Edge], *, undirected: bool = False) -> Graph:
    """Build an immutable adjacency snapshot.

    Duplicate edges keep their minimum weight. Neighbor lists are sorted by
    id so that path search does not depend on the order rows were stored in.

    Raises:
        InvalidGraphError: on duplicate place ids or names, unknown edge
            endpoints, or negative travel times.
    """
    places = list(places)
    ensure_unique_names(places)

    by_id: dict[str, Place] = {}
    for place in places:
        if place.id in by_id:
            raise InvalidGraphError(f"Duplicate place id '{place.id}'")
        by_id[place.id] = place

    best: dict[str, dict[str, float]] = {place_id: {} for place_id in by_id}
    for edge in edges:
        if edge.travel_minutes < 0:
            raise InvalidGraphError(
                f"Edge {edge.from_id}->{edge.to_id} has negative travel time {edge.travel_minutes}"
            )
        for endpoint in (edge.from_id, edge.to_id):
            if endpoint not in by_id:
                raise InvalidGraphError(f"Edge {edge.from_id}->{edge.to_id} references unknown place '{endpoint}'")

        pairs = [(edge.from_id, edge.to_id)]
        if undirected:
            pairs.append((edge.to_id, edge.from_id))
        for source, target in pairs:
            current = best[source].get(target)
            if current is None or edge.travel_minutes < current:
                best[source][target] = edge.travel_minutes

    adjacency = {
        place_id: tuple(sorted(neighbors.items()))
        for place_id, neighbors in best.items()
    }
    return Graph.freeze(by_id, adjacency, built_at=datetime.now(timezone.utc))


class GraphProjection:
    """Builds graph snapshots from a store, optionally caching them.

    With ``ttl_seconds == 0`` every ``build()`` re-reads the store. With a
    positive TTL a snapshot is reused for at most that many seconds, which
    bounds how stale a route can be. Snapshots are immutable and replaced
    under a lock, so concurrent readers always see a complete graph.
    """

    def __init__(
        self,
        store: GraphStore,
        *,
        ttl_seconds: float = 0.0,
        undirected: bool = False,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._store = store
        self.ttl_seconds = ttl_seconds
        self.undirected = undirected
        self._clock = clock
        self._lock = threading.Lock()
        self._snapshot: Graph | None = None
        self._snapshot_at = 0.0

    def build(self) -> Graph:
        if self.ttl_seconds > 0:
            with self._lock:
                snapshot = self._snapshot
                if snapshot is not None and self._clock() - self._snapshot_at < self.ttl_seconds:
                    return snapshot

        started = self._clock()
        with self._store.session() as session:
            places = session.fetch_places()
            edges = session.fetch_edges()
        graph = build_graph(places, edges, undirected=self.undirected)
        logger.info(
            f"Graph projection built from {self._store.name}: "
            f"{len(graph.places)} places, {graph.edge_count} edges"
        )

        if self.ttl_seconds > 0:
            with self._lock:
                # A build that started before the current snapshot or the last
                # refresh must not replace it.
                if started >= self._snapshot_at:
                    self._snapshot = graph
                    self._snapshot_at = started
        return graph

    def refresh(self) -> None:
        """Drop the cached snapshot; the next build() re-reads the store."""
        with self._lock:
            self._snapshot = None
            self._snapshot_at = self._clock()
        logger.info("Graph projection invalidated")

    @property
    def is_cached(self) -> bool:
        with self._lock:
            return self._snapshot is not None
