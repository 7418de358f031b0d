"""Process-wide collaborators handed to the routers through ``Depends``."""

from __future__ import annotations

from functools import lru_cache

from ..config import settings
from ..data.store import GraphStore, get_graph_store
from ..services.routing.errors import RoutingError
from ..services.routing.projection import GraphProjection
from ..services.routing.registry import PlaceRegistry
from ..services.routing.service import RouteService
from .errors import to_http_exception


@lru_cache(maxsize=1)
def get_store() -> GraphStore:
    return get_graph_store()


@lru_cache(maxsize=1)
def shared_projection() -> GraphProjection:
    return GraphProjection(
        get_store(),
        ttl_seconds=settings.projection_ttl_seconds,
        undirected=settings.undirected_edges,
    )


def get_projection() -> GraphProjection:
    try:
        return shared_projection()
    except RoutingError as exc:
        raise to_http_exception(exc) from exc


def get_place_registry() -> PlaceRegistry:
    try:
        return PlaceRegistry(get_store())
    except RoutingError as exc:
        raise to_http_exception(exc) from exc


def get_route_service() -> RouteService:
    return RouteService(get_place_registry(), get_projection())
