"""Route group exports."""

from . import health, orders, places, routes

__all__ = ["health", "orders", "places", "routes"]
