"""Domain models."""

from .domain import Edge, Place, PlaceCategory

__all__ = ["Edge", "Place", "PlaceCategory"]
