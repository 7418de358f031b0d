"""Order intake: route the order and log it. Orders are not persisted."""

from __future__ import annotations

import logging
import uuid
from dataclasses import asdict, dataclass
from typing import List

from ...schemas.orders import OrderRequest
from ..routing.service import RouteService

logger = logging.getLogger(__name__)

RECEIVED = "recibido"


@dataclass(slots=True)
class OrderReceipt:
    order_id: str
    status: str
    estimated_minutes: float
    route: List[str]


def submit_order(order: OrderRequest, route_service: RouteService) -> OrderReceipt:
    """Compute the delivery route for ``order`` and log the order summary.

    Routing errors propagate unchanged so the caller can map them.
    """
    result = route_service.compute_route(order.origen or "", order.destino or "")
    receipt = OrderReceipt(
        order_id=uuid.uuid4().hex,
        status=RECEIVED,
        estimated_minutes=result.total_cost,
        route=result.names,
    )
    logger.info(
        f"Order {receipt.order_id}: {order.producto} for {order.nombre}, "
        f"{result.origin.name} -> {result.destination.name} in {receipt.estimated_minutes} min",
        extra={"order": order.model_dump(), "receipt": asdict(receipt)},
    )
    return receipt
