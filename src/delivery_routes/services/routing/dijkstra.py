"""Shortest-path computation using Dijkstra's algorithm.

Tie-breaking: when several paths share the minimum cost, the first one
discovered is kept. Relaxation only replaces a predecessor on a strictly
smaller distance, heap entries with equal distance pop in insertion order,
and neighbor lists are sorted by id, so among equal-cost routes the one
reached through lower node ids first wins, whatever order the store
returned its rows in.

Costs are summed with plain float addition; fractional minutes are kept.
"""

from __future__ import annotations

import heapq
import itertools
import logging
from typing import Dict, List, Tuple

from .errors import NoPathFoundError, PlaceNotFoundError
from .models import Graph, ShortestPath

logger = logging.getLogger(__name__)


def shortest_path(graph: Graph, source_id: str, target_id: str) -> ShortestPath:
    """Compute the minimum-cost path between two node ids.

    Raises:
        PlaceNotFoundError: if either id is not a node of ``graph``.
        NoPathFoundError: if ``target_id`` cannot be reached.
    """
    missing = [node for node in (source_id, target_id) if node not in graph]
    if missing:
        raise PlaceNotFoundError(missing)
    if source_id == target_id:
        return ShortestPath(total_cost=0.0, node_ids=(source_id,))

    distances: Dict[str, float] = {source_id: 0.0}
    previous: Dict[str, str] = {}
    visited: set[str] = set()
    sequence = itertools.count()
    heap: List[Tuple[float, int, str]] = [(0.0, next(sequence), source_id)]

    while heap:
        current_distance, _, u = heapq.heappop(heap)
        if u in visited:
            continue
        visited.add(u)

        if u == target_id:
            break

        for v, weight in graph.adjacency.get(u, ()):
            if v in visited:
                continue
            new_distance = current_distance + weight
            if new_distance < distances.get(v, float("inf")):
                distances[v] = new_distance
                previous[v] = u
                heapq.heappush(heap, (new_distance, next(sequence), v))

    if target_id not in visited:
        raise NoPathFoundError(graph.places[source_id].name, graph.places[target_id].name)

    path: List[str] = [target_id]
    while path[-1] != source_id:
        path.append(previous[path[-1]])
    path.reverse()

    logger.debug(f"Dijkstra settled {len(visited)} nodes for {source_id}->{target_id}")
    return ShortestPath(total_cost=distances[target_id], node_ids=tuple(path))


class ShortestPathEngine:
    """Injectable wrapper around :func:`shortest_path`."""

    def shortest_path(self, graph: Graph, source_id: str, target_id: str) -> ShortestPath:
        return shortest_path(graph, source_id, target_id)
