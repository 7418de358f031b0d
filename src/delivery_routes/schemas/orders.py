"""Delivery order schemas."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field


class OrderRequest(BaseModel):
    nombre: str = Field(..., min_length=1, description="Customer name.")
    telefono: str = Field(..., min_length=1)
    direccion: str = Field(..., min_length=1, description="Delivery address inside the zone.")
    producto: str = Field(..., min_length=1)
    precio: float = Field(..., ge=0)
    notasAdicionales: Optional[str] = None
    origen: Optional[str] = Field(default=None, description="Distribution center the order ships from.")
    destino: Optional[str] = Field(default=None, description="Delivery zone.")


class OrderResponse(BaseModel):
    pedidoId: str
    estado: str
    tiempoEstimadoMinutos: float
    rutaCompleta: List[str]
