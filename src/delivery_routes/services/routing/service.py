"""Route orchestration: names in, fastest path out."""

from __future__ import annotations

import logging

from ...config import settings
from .dijkstra import ShortestPathEngine
from .errors import SameOriginDestinationError
from .models import Graph, PathResult
from .projection import GraphProjection
from .registry import PlaceRegistry

logger = logging.getLogger(__name__)


class RouteService:
    """Resolve two place names and compute the minimum-time route between them.

    The service performs no retries: the computation is deterministic, so
    only an EngineUnavailableError is worth retrying, and that is left to
    the caller.
    """

    def __init__(
        self,
        registry: PlaceRegistry,
        projection: GraphProjection,
        engine: ShortestPathEngine | None = None,
        *,
        allow_same_origin_destination: bool | None = None,
    ) -> None:
        self.registry = registry
        self.projection = projection
        self.engine = engine or ShortestPathEngine()
        self.allow_same_origin_destination = (
            settings.allow_same_origin_destination
            if allow_same_origin_destination is None
            else allow_same_origin_destination
        )

    def compute_route(self, origin_name: str, destination_name: str) -> PathResult:
        origin, destination = self.registry.resolve_many(origin_name, destination_name)

        if origin.id == destination.id and not self.allow_same_origin_destination:
            raise SameOriginDestinationError(origin.name)

        graph = self._current_graph(origin.id, destination.id)
        path = self.engine.shortest_path(graph, origin.id, destination.id)

        result = PathResult(
            origin=origin,
            destination=destination,
            total_cost=path.total_cost,
            nodes=tuple(graph.places[node_id] for node_id in path.node_ids),
        )
        logger.info(
            f"Route {origin.name} -> {destination.name}: "
            f"{result.total_cost} min over {len(result.nodes)} places"
        )
        return result

    def _current_graph(self, *node_ids: str) -> Graph:
        graph = self.projection.build()
        if all(node_id in graph for node_id in node_ids) or not self.projection.is_cached:
            return graph
        # A place resolved from the store but absent from a cached snapshot
        # means the snapshot predates it.
        logger.info("Cached projection is missing resolved places, rebuilding")
        self.projection.refresh()
        return self.projection.build()
