"""Place listing endpoints."""

from __future__ import annotations

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from ...schemas.places import PlaceModel
from ...services.routing.errors import RoutingError
from ...services.routing.registry import PlaceRegistry
from ..dependencies import get_place_registry
from ..errors import to_http_exception

router = APIRouter(tags=["places"])


@router.get("/lugares", response_model=List[PlaceModel], status_code=status.HTTP_200_OK)
def list_places(registry: PlaceRegistry = Depends(get_place_registry)) -> List[PlaceModel]:
    """All zones and distribution centers, sorted by name."""
    try:
        places = registry.list_places()
    except RoutingError as exc:
        raise to_http_exception(exc) from exc
    except Exception as exc:
        logging.exception(f"Error al obtener lugares: {exc}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error interno del servidor al obtener lugares.",
        ) from exc
    return [PlaceModel(nombre=place.name, tipo=place.category) for place in places]
