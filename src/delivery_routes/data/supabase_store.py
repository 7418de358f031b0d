"""Supabase-backed store reading the ``places`` and ``edges`` tables."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Callable, Iterator, Sequence

from supabase import Client

from ..config import settings
from ..db.supabase import get_supabase_client
from ..models.domain import Edge, Place
from ..services.routing.errors import EngineUnavailableError
from .store import edge_from_row, place_from_row

logger = logging.getLogger(__name__)

PAGE_SIZE = 1000


class SupabaseSession:
    """Session bound to a Supabase client until the owning context exits."""

    def __init__(self, client: Client, places_table: str, edges_table: str) -> None:
        self._client: Client | None = client
        self._places_table = places_table
        self._edges_table = edges_table

    def close(self) -> None:
        self._client = None

    def _require_client(self) -> Client:
        if self._client is None:
            raise RuntimeError("Store session used after it was released")
        return self._client

    def _select_all(self, table: str, columns: str, order_by: Sequence[str]) -> list[dict[str, Any]]:
        """Select every row of ``table`` page by page.

        ``order_by`` must form a unique key, otherwise rows tied on the sort
        key may repeat or go missing across pages.
        """
        client = self._require_client()
        rows: list[dict[str, Any]] = []
        start = 0
        while True:
            query = client.table(table).select(columns)
            for column in order_by:
                query = query.order(column)
            try:
                response = (
                    query
                    .range(start, start + PAGE_SIZE - 1)
                    .execute()
                )
            except Exception as exc:
                raise EngineUnavailableError(f"Query on table '{table}' failed", exc) from exc
            batch = response.data or []
            rows.extend(batch)
            if len(batch) < PAGE_SIZE:
                return rows
            start += PAGE_SIZE

    def fetch_places(self) -> list[Place]:
        rows = self._select_all(self._places_table, "id, name, category", order_by=("id",))
        return [place_from_row(row) for row in rows]

    def fetch_edges(self) -> list[Edge]:
        rows = self._select_all(
            self._edges_table,
            "from_id, to_id, travel_minutes",
            order_by=("from_id", "to_id", "travel_minutes"),
        )
        return [edge_from_row(row) for row in rows]

    def find_places(self, names: Sequence[str]) -> list[Place]:
        client = self._require_client()
        if not names:
            return []
        try:
            response = (
                client.table(self._places_table)
                .select("id, name, category")
                .in_("name", list(names))
                .execute()
            )
        except Exception as exc:
            raise EngineUnavailableError(f"Query on table '{self._places_table}' failed", exc) from exc
        return [place_from_row(row) for row in (response.data or [])]


class SupabaseGraphStore:
    """Graph store on top of the cached Supabase client."""

    name = "supabase"

    def __init__(
        self,
        client_factory: Callable[[], Client | None] = get_supabase_client,
        places_table: str | None = None,
        edges_table: str | None = None,
    ) -> None:
        self._client_factory = client_factory
        self.places_table = places_table or settings.places_table
        self.edges_table = edges_table or settings.edges_table

    @contextmanager
    def session(self) -> Iterator[SupabaseSession]:
        client = self._client_factory()
        if client is None:
            raise EngineUnavailableError(
                "Supabase not configured. Set DR_SUPABASE_URL and DR_SUPABASE_KEY environment variables."
            )
        session = SupabaseSession(client, self.places_table, self.edges_table)
        logger.debug("Supabase session acquired")
        try:
            yield session
        finally:
            session.close()
            logger.debug("Supabase session released")
