"""Place listing schemas."""

from __future__ import annotations

from pydantic import BaseModel

from ..models.domain import PlaceCategory


class PlaceModel(BaseModel):
    nombre: str
    tipo: PlaceCategory
