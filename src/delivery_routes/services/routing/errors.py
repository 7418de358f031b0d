"""Typed failures raised while resolving places and computing routes.

All errors inherit from RoutingError so the HTTP layer can map them to
status codes in one place. None of them is ever replaced by a default
result such as a zero cost or an empty path.
"""

from __future__ import annotations

from typing import Sequence


class RoutingError(Exception):
    """Base exception for route computation failures."""


class PlaceNotFoundError(RoutingError):
    """Raised when one or more place names do not exist in the registry."""

    def __init__(self, names: Sequence[str]) -> None:
        self.names = tuple(names)
        joined = ", ".join(f"'{name}'" for name in self.names)
        super().__init__(f"Place(s) not found: {joined}")


class NoPathFoundError(RoutingError):
    """Raised when both places exist but no path connects them."""

    def __init__(self, origin: str, destination: str) -> None:
        self.origin = origin
        self.destination = destination
        super().__init__(f"No route from '{origin}' to '{destination}'")


class InvalidGraphError(RoutingError):
    """Raised when the backing data cannot form a valid weighted graph."""


class EngineUnavailableError(RoutingError):
    """Raised when the backing store is missing, misconfigured or failing.

    This is the only failure that may succeed when retried after a backoff.
    """

    def __init__(self, message: str, cause: Exception | None = None) -> None:
        self.cause = cause
        super().__init__(f"{message}: {cause}" if cause else message)


class SameOriginDestinationError(RoutingError):
    """Raised when origin and destination resolve to the same place and the
    same-place policy rejects it."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Origin and destination are the same place: '{name}'")
