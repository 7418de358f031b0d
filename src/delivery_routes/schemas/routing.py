"""Fastest-route request/response schemas."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field


class RouteRequest(BaseModel):
    # Optional so that missing values surface as 400 rather than 422.
    origen: Optional[str] = Field(default=None, description="Name of the origin place.")
    destino: Optional[str] = Field(default=None, description="Name of the destination place.")


class RouteResponse(BaseModel):
    origen: str
    destino: str
    tiempoTotalMinutos: float
    rutaCompleta: List[str]
