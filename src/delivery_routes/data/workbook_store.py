"""Excel workbook store, used when no database is configured.

The workbook holds two sheets:

* ``Places`` with columns ``id``, ``name``, ``category``
* ``Edges`` with columns ``from_id``, ``to_id``, ``travel_minutes``
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Iterator, Sequence

from openpyxl import load_workbook
from openpyxl.workbook.workbook import Workbook

from ..models.domain import Edge, Place
from ..services.routing.errors import EngineUnavailableError, InvalidGraphError
from .store import edge_from_row, filter_by_name, place_from_row

logger = logging.getLogger(__name__)

PLACES_SHEET = "Places"
EDGES_SHEET = "Edges"
PLACE_COLUMNS = {"id", "name", "category"}
EDGE_COLUMNS = {"from_id", "to_id", "travel_minutes"}


class WorkbookSession:
    def __init__(self, workbook: Workbook, path: Path) -> None:
        self._workbook: Workbook | None = workbook
        self._path = path

    def close(self) -> None:
        if self._workbook is not None:
            self._workbook.close()
            self._workbook = None

    def _rows(self, sheet_name: str, required: set[str]) -> Iterator[dict[str, Any]]:
        if self._workbook is None:
            raise RuntimeError("Store session used after it was released")
        if sheet_name not in self._workbook.sheetnames:
            raise InvalidGraphError(f"Graph workbook '{self._path}' has no '{sheet_name}' sheet")

        rows = self._workbook[sheet_name].iter_rows(min_row=1, values_only=True)
        header = next(rows, None)
        if header is None:
            return
        header_map = {str(name).strip().lower(): idx for idx, name in enumerate(header) if name is not None}
        missing_columns = required - set(header_map)
        if missing_columns:
            raise InvalidGraphError(
                f"Sheet '{sheet_name}' missing columns: {', '.join(sorted(missing_columns))}"
            )
        for row in rows:
            if all(cell is None for cell in row):
                continue
            yield {column: row[idx] if idx < len(row) else None for column, idx in header_map.items()}

    def fetch_places(self) -> list[Place]:
        return [place_from_row(row) for row in self._rows(PLACES_SHEET, PLACE_COLUMNS)]

    def fetch_edges(self) -> list[Edge]:
        return [edge_from_row(row) for row in self._rows(EDGES_SHEET, EDGE_COLUMNS)]

    def find_places(self, names: Sequence[str]) -> list[Place]:
        return filter_by_name(self.fetch_places(), names)


class WorkbookGraphStore:
    """Graph store reading a local ``.xlsx`` file."""

    name = "workbook"

    def __init__(self, path: Path) -> None:
        self.path = path

    @contextmanager
    def session(self) -> Iterator[WorkbookSession]:
        if not self.path.exists():
            raise EngineUnavailableError(f"Graph workbook not found: {self.path}")
        try:
            workbook = load_workbook(self.path, data_only=True, read_only=True)
        except Exception as exc:
            raise EngineUnavailableError(f"Graph workbook '{self.path}' could not be opened", exc) from exc
        session = WorkbookSession(workbook, self.path)
        try:
            yield session
        finally:
            session.close()
            logger.debug(f"Workbook session on {self.path} released")
