import pytest

from delivery_routes.models.domain import PlaceCategory
from delivery_routes.services.routing.errors import (
    EngineUnavailableError,
    InvalidGraphError,
    PlaceNotFoundError,
)
from delivery_routes.services.routing.registry import PlaceRegistry

from conftest import DC, InMemoryGraphStore, place


def test_list_places_sorted_by_name():
    store = InMemoryGraphStore([place("Norte"), place("Centro", DC), place("Sur")])

    names = [p.name for p in PlaceRegistry(store).list_places()]

    assert names == ["Centro", "Norte", "Sur"]


def test_every_listed_name_resolves(abc_store):
    registry = PlaceRegistry(abc_store)

    for listed in registry.list_places():
        assert registry.resolve(listed.name) == listed


def test_resolve_returns_category(abc_store):
    resolved = PlaceRegistry(abc_store).resolve("A")

    assert resolved.id == "A"
    assert resolved.category is PlaceCategory.DISTRIBUTION_CENTER


def test_resolve_is_exact_match(abc_store):
    with pytest.raises(PlaceNotFoundError):
        PlaceRegistry(abc_store).resolve("a")


def test_resolve_many_lists_every_missing_name(abc_store):
    with pytest.raises(PlaceNotFoundError) as excinfo:
        PlaceRegistry(abc_store).resolve_many("X", "A", "Y")

    assert excinfo.value.names == ("X", "Y")
    assert "'X'" in str(excinfo.value) and "'Y'" in str(excinfo.value)


def test_resolve_many_uses_one_session(abc_store):
    origin, destination = PlaceRegistry(abc_store).resolve_many("A", "B")

    assert (origin.name, destination.name) == ("A", "B")
    assert abc_store.opened == abc_store.released == 1


def test_resolve_rejects_duplicate_names():
    store = InMemoryGraphStore([place("A", place_id="1"), place("A", DC, place_id="2")])

    with pytest.raises(InvalidGraphError):
        PlaceRegistry(store).resolve("A")


def test_store_failure_propagates_and_session_is_released(abc_store):
    abc_store.fail_with = EngineUnavailableError("timeout")

    with pytest.raises(EngineUnavailableError):
        PlaceRegistry(abc_store).list_places()

    assert abc_store.opened == abc_store.released == 1


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("Zona", PlaceCategory.ZONE),
        ("zone", PlaceCategory.ZONE),
        ("CentroDistribucion", PlaceCategory.DISTRIBUTION_CENTER),
        ("Distribution Center", PlaceCategory.DISTRIBUTION_CENTER),
        ("distribution_center", PlaceCategory.DISTRIBUTION_CENTER),
    ],
)
def test_place_category_parse(raw, expected):
    assert PlaceCategory.parse(raw) is expected


def test_place_category_parse_rejects_unknown():
    with pytest.raises(ValueError):
        PlaceCategory.parse("Warehouse")
