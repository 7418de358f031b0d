"""Fastest-route endpoints."""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, status

from ...schemas.routing import RouteRequest, RouteResponse
from ...services.routing.errors import RoutingError
from ...services.routing.projection import GraphProjection
from ...services.routing.service import RouteService
from ..dependencies import get_projection, get_route_service
from ..errors import to_http_exception

router = APIRouter(tags=["routes"])


def require_endpoints(origen: str | None, destino: str | None) -> tuple[str, str]:
    """Both names must be present and non-blank. They are returned unchanged."""
    if not (origen or "").strip() or not (destino or "").strip():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Por favor, proporciona un origen y un destino.",
        )
    return origen, destino


def route_endpoints(payload: Optional[RouteRequest] = None) -> tuple[str, str]:
    # Declared before the service dependency so a bad body is rejected
    # before any store is touched.
    payload = payload or RouteRequest()
    return require_endpoints(payload.origen, payload.destino)


@router.post("/ruta-mas-rapida", response_model=RouteResponse, status_code=status.HTTP_200_OK)
def fastest_route(
    endpoints: tuple[str, str] = Depends(route_endpoints),
    service: RouteService = Depends(get_route_service),
) -> RouteResponse:
    origin, destination = endpoints
    try:
        result = service.compute_route(origin, destination)
    except RoutingError as exc:
        raise to_http_exception(exc) from exc
    except Exception as exc:
        logging.exception(f"Error al calcular la ruta más rápida: {exc}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error interno del servidor al calcular la ruta.",
        ) from exc

    return RouteResponse(
        origen=result.origin.name,
        destino=result.destination.name,
        tiempoTotalMinutos=result.total_cost,
        rutaCompleta=result.names,
    )


@router.post("/proyeccion/refresh", status_code=status.HTTP_200_OK)
def refresh_projection(projection: GraphProjection = Depends(get_projection)) -> dict:
    """Invalidate the cached graph so the next route re-reads the store."""
    projection.refresh()
    return {"status": "invalidated", "ttl_seconds": projection.ttl_seconds}
