"""Order intake."""

from .service import OrderReceipt, submit_order

__all__ = ["OrderReceipt", "submit_order"]
