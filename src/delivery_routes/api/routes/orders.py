"""Delivery order endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from ...schemas.orders import OrderRequest, OrderResponse
from ...services.orders import submit_order
from ...services.routing.errors import RoutingError
from ...services.routing.service import RouteService
from ..dependencies import get_route_service
from ..errors import to_http_exception
from .routes import require_endpoints

router = APIRouter(tags=["orders"])


def validated_order(payload: OrderRequest) -> OrderRequest:
    require_endpoints(payload.origen, payload.destino)
    return payload


@router.post("/pedidos", response_model=OrderResponse, status_code=status.HTTP_200_OK)
def place_order(
    order: OrderRequest = Depends(validated_order),
    service: RouteService = Depends(get_route_service),
) -> OrderResponse:
    """Route an order and log it. The order itself is not stored."""
    try:
        receipt = submit_order(order, service)
    except RoutingError as exc:
        raise to_http_exception(exc) from exc
    except Exception as exc:
        logging.exception(f"Error al procesar el pedido: {exc}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error interno del servidor al procesar el pedido.",
        ) from exc

    return OrderResponse(
        pedidoId=receipt.order_id,
        estado=receipt.status,
        tiempoEstimadoMinutos=receipt.estimated_minutes,
        rutaCompleta=receipt.route,
    )
