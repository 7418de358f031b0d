"""Translate routing failures into HTTP responses."""

from __future__ import annotations

import logging

from fastapi import HTTPException, status

from ..services.routing.errors import (
    EngineUnavailableError,
    InvalidGraphError,
    NoPathFoundError,
    PlaceNotFoundError,
    RoutingError,
    SameOriginDestinationError,
)

logger = logging.getLogger(__name__)


def describe_routing_error(exc: RoutingError) -> tuple[int, str]:
    """Return the status code and client-facing message for ``exc``."""
    if isinstance(exc, PlaceNotFoundError):
        names = ", ".join(exc.names)
        return (
            status.HTTP_404_NOT_FOUND,
            f"Uno o ambos lugares (origen/destino) no se encontraron en la base de datos: {names}.",
        )
    if isinstance(exc, NoPathFoundError):
        return (
            status.HTTP_404_NOT_FOUND,
            f"No se encontró una ruta entre el origen '{exc.origin}' y el destino '{exc.destination}'.",
        )
    if isinstance(exc, SameOriginDestinationError):
        return (
            status.HTTP_400_BAD_REQUEST,
            "La sucursal de origen y la zona de entrega no pueden ser el mismo lugar.",
        )
    if isinstance(exc, InvalidGraphError):
        return status.HTTP_500_INTERNAL_SERVER_ERROR, f"Datos del grafo inválidos: {exc}"
    if isinstance(exc, EngineUnavailableError):
        return (
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            f"El motor de rutas no está disponible o está mal configurado: {exc}",
        )
    return status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc)


ERROR_CODE_HEADER = "X-Error-Code"


def to_http_exception(exc: RoutingError) -> HTTPException:
    """Map ``exc`` to an ``HTTPException`` carrying its class name in ``X-Error-Code``."""
    status_code, message = describe_routing_error(exc)
    if status_code >= 500:
        logger.error(f"Routing failed: {exc}")
    else:
        logger.info(f"Routing request rejected: {exc}")
    return HTTPException(
        status_code=status_code,
        detail=message,
        headers={ERROR_CODE_HEADER: type(exc).__name__},
    )
