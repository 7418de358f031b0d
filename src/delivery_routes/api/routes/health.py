"""Health endpoints."""

from __future__ import annotations

from fastapi import APIRouter, status

router = APIRouter(tags=["health"])


@router.get("/health", status_code=status.HTTP_200_OK)
def health_root() -> dict:
    """Simple health check endpoint that doesn't require any dependencies."""
    return {"status": "ok"}


@router.get("/health/store", status_code=status.HTTP_200_OK)
def health_store() -> dict:
    """Check which graph store is configured and whether it can be read."""
    from ..dependencies import get_store
    from ...services.routing.errors import RoutingError

    try:
        store = get_store()
    except RoutingError as exc:
        return {"configured": False, "healthy": False, "error": str(exc)}

    try:
        with store.session() as session:
            places_count = len(session.fetch_places())
    except RoutingError as exc:
        return {"configured": True, "store": store.name, "healthy": False, "error": str(exc)}

    return {
        "configured": True,
        "store": store.name,
        "healthy": True,
        "places_count": places_count,
    }
