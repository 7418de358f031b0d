from pathlib import Path

import pytest
from openpyxl import Workbook

from delivery_routes.data import store as store_module
from delivery_routes.data.store import edge_from_row, get_graph_store, place_from_row
from delivery_routes.data.workbook_store import WorkbookGraphStore
from delivery_routes.models.domain import PlaceCategory
from delivery_routes.services.routing.errors import EngineUnavailableError, InvalidGraphError
from delivery_routes.services.routing.projection import GraphProjection
from delivery_routes.services.routing.registry import PlaceRegistry
from delivery_routes.services.routing.service import RouteService


def _write_workbook(path: Path, places, edges, edge_header=("from_id", "to_id", "travel_minutes")) -> Path:
    wb = Workbook()
    places_sheet = wb.active
    places_sheet.title = "Places"
    places_sheet.append(["id", "name", "category"])
    for row in places:
        places_sheet.append(list(row))
    edges_sheet = wb.create_sheet("Edges")
    edges_sheet.append(list(edge_header))
    for row in edges:
        edges_sheet.append(list(row))
    wb.save(path)
    return path


@pytest.fixture
def workbook_path(tmp_path: Path) -> Path:
    return _write_workbook(
        tmp_path / "graph.xlsx",
        places=[
            (1, "Sucursal Centro", "CentroDistribucion"),
            (2, "Zona Norte", "Zona"),
            (3, "Zona Sur", "Zona"),
        ],
        edges=[(1, 2, 10), (1, 3, 4), (3, 2, 3.5)],
    )


def test_workbook_store_reads_places_and_edges(workbook_path: Path):
    store = WorkbookGraphStore(workbook_path)

    with store.session() as session:
        places = session.fetch_places()
        edges = session.fetch_edges()

    assert [p.name for p in places] == ["Sucursal Centro", "Zona Norte", "Zona Sur"]
    assert places[0].id == "1"
    assert places[0].category is PlaceCategory.DISTRIBUTION_CENTER
    assert [(e.from_id, e.to_id, e.travel_minutes) for e in edges] == [
        ("1", "2", 10.0),
        ("1", "3", 4.0),
        ("3", "2", 3.5),
    ]


def test_workbook_session_cannot_be_used_after_release(workbook_path: Path):
    with WorkbookGraphStore(workbook_path).session() as session:
        pass

    with pytest.raises(RuntimeError):
        session.fetch_places()


def test_route_over_workbook_store(workbook_path: Path):
    store = WorkbookGraphStore(workbook_path)
    service = RouteService(PlaceRegistry(store), GraphProjection(store))

    result = service.compute_route("Sucursal Centro", "Zona Norte")

    assert result.total_cost == 7.5
    assert result.names == ["Sucursal Centro", "Zona Sur", "Zona Norte"]


def test_missing_edge_columns_are_invalid(tmp_path: Path):
    path = _write_workbook(
        tmp_path / "bad.xlsx",
        places=[(1, "A", "Zona")],
        edges=[],
        edge_header=("from", "to", "minutes"),
    )

    with WorkbookGraphStore(path).session() as session:
        with pytest.raises(InvalidGraphError, match="missing columns"):
            session.fetch_edges()


def test_missing_workbook_is_engine_unavailable(tmp_path: Path):
    store = WorkbookGraphStore(tmp_path / "absent.xlsx")

    with pytest.raises(EngineUnavailableError):
        with store.session():
            pass


def test_non_numeric_travel_time_is_invalid():
    with pytest.raises(InvalidGraphError, match="non-numeric"):
        edge_from_row({"from_id": "1", "to_id": "2", "travel_minutes": "diez"})
    with pytest.raises(InvalidGraphError, match="no travel time"):
        edge_from_row({"from_id": "1", "to_id": "2", "travel_minutes": None})
    with pytest.raises(InvalidGraphError, match="non-finite"):
        edge_from_row({"from_id": "1", "to_id": "2", "travel_minutes": "nan"})


def test_place_row_requires_known_category():
    with pytest.raises(InvalidGraphError):
        place_from_row({"id": 1, "name": "A", "category": "Almacen"})
    with pytest.raises(InvalidGraphError):
        place_from_row({"id": None, "name": "A", "category": "Zona"})


def test_get_graph_store_falls_back_to_workbook(monkeypatch, workbook_path: Path):
    from delivery_routes.db import supabase as supabase_module

    monkeypatch.setattr(supabase_module, "get_supabase_client", lambda: None)

    store = get_graph_store(workbook_path)

    assert store.name == "workbook"


def test_get_graph_store_without_any_store_is_unavailable(monkeypatch, tmp_path: Path):
    from delivery_routes.db import supabase as supabase_module

    monkeypatch.setattr(supabase_module, "get_supabase_client", lambda: None)

    with pytest.raises(EngineUnavailableError, match="No graph store configured"):
        store_module.get_graph_store(tmp_path / "missing.xlsx")
