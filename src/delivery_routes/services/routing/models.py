"""Routing domain models."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from types import MappingProxyType
from typing import Mapping

from ...models.domain import Place

Adjacency = Mapping[str, tuple[tuple[str, float], ...]]


@dataclass(frozen=True, slots=True)
class Graph:
    """Immutable snapshot of places and their weighted outgoing edges.

    Every place id is a key of ``adjacency``; neighbors are sorted by id.
    """

    places: Mapping[str, Place]
    adjacency: Adjacency
    built_at: datetime

    @classmethod
    def freeze(
        cls,
        places: dict[str, Place],
        adjacency: dict[str, tuple[tuple[str, float], ...]],
        built_at: datetime,
    ) -> "Graph":
        return cls(
            places=MappingProxyType(dict(places)),
            adjacency=MappingProxyType(dict(adjacency)),
            built_at=built_at,
        )

    def __contains__(self, node_id: object) -> bool:
        return node_id in self.places

    @property
    def edge_count(self) -> int:
        return sum(len(neighbors) for neighbors in self.adjacency.values())


@dataclass(frozen=True, slots=True)
class ShortestPath:
    total_cost: float
    node_ids: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class PathResult:
    """Fastest route between two places, origin first and destination last."""

    origin: Place
    destination: Place
    total_cost: float
    nodes: tuple[Place, ...]

    @property
    def names(self) -> list[str]:
        return [place.name for place in self.nodes]
