"""Backing store contracts and store selection.

A store hands out short-lived sessions. Every read goes through a session
opened with ``with store.session() as session:`` so that whatever the
session holds (a workbook handle, a client reference) is released on every
exit path, including failures.
"""

from __future__ import annotations

import logging
import math
from pathlib import Path
from typing import Any, ContextManager, Iterable, Mapping, Protocol, Sequence

from ..config import settings
from ..models.domain import Edge, Place, PlaceCategory
from ..services.routing.errors import EngineUnavailableError, InvalidGraphError

logger = logging.getLogger(__name__)


class StoreSession(Protocol):
    """Read operations available while a session is open."""

    def fetch_places(self) -> list[Place]:
        ...

    def fetch_edges(self) -> list[Edge]:
        ...

    def find_places(self, names: Sequence[str]) -> list[Place]:
        """Return the places whose name is exactly one of ``names``."""
        ...


class GraphStore(Protocol):
    """Source of places and edges."""

    name: str

    def session(self) -> ContextManager[StoreSession]:
        ...


def _clean(value: Any) -> str:
    return "" if value is None else str(value).strip()


def place_from_row(row: Mapping[str, Any]) -> Place:
    """Build a Place from a store row with ``id``, ``name`` and ``category``."""
    place_id = _clean(row.get("id"))
    # Names are lookup keys matched exactly by every store, so they are kept verbatim.
    raw_name = row.get("name")
    name = "" if raw_name is None else str(raw_name)
    if not place_id or not name.strip():
        raise InvalidGraphError(f"Place row is missing id or name: {dict(row)}")
    try:
        category = PlaceCategory.parse(row.get("category"))
    except ValueError as exc:
        raise InvalidGraphError(f"Place '{name}': {exc}") from exc
    return Place(id=place_id, name=name, category=category)


def edge_from_row(row: Mapping[str, Any]) -> Edge:
    """Build an Edge from a store row with ``from_id``, ``to_id`` and ``travel_minutes``.

    Only the shape is checked here; sign checks happen in the projection.
    """
    from_id = _clean(row.get("from_id"))
    to_id = _clean(row.get("to_id"))
    raw_minutes = row.get("travel_minutes")
    if not from_id or not to_id:
        raise InvalidGraphError(f"Edge row is missing an endpoint: {dict(row)}")
    if isinstance(raw_minutes, bool) or raw_minutes is None or raw_minutes == "":
        raise InvalidGraphError(f"Edge {from_id}->{to_id} has no travel time")
    try:
        minutes = float(raw_minutes)
    except (TypeError, ValueError) as exc:
        raise InvalidGraphError(
            f"Edge {from_id}->{to_id} has a non-numeric travel time '{raw_minutes}'"
        ) from exc
    if not math.isfinite(minutes):
        raise InvalidGraphError(f"Edge {from_id}->{to_id} has a non-finite travel time")
    return Edge(from_id=from_id, to_id=to_id, travel_minutes=minutes)


def filter_by_name(places: Iterable[Place], names: Sequence[str]) -> list[Place]:
    wanted = set(names)
    return [place for place in places if place.name in wanted]


def get_graph_store(workbook: Path | None = None) -> GraphStore:
    """Pick the configured store: Supabase first, then the graph workbook.

    Raises:
        EngineUnavailableError: if neither store is configured.
    """
    from ..db.supabase import get_supabase_client
    from .supabase_store import SupabaseGraphStore
    from .workbook_store import WorkbookGraphStore

    if get_supabase_client() is not None:
        return SupabaseGraphStore()

    workbook_path = workbook or settings.graph_workbook_file
    if workbook_path.exists():
        logger.info(f"Supabase not configured, reading graph from workbook {workbook_path}")
        return WorkbookGraphStore(workbook_path)

    raise EngineUnavailableError(
        "No graph store configured. Set DR_SUPABASE_URL and DR_SUPABASE_KEY "
        f"or provide a workbook at {workbook_path}"
    )
