"""Read-only access to the places/edges backing store."""

from .store import GraphStore, StoreSession, get_graph_store

__all__ = ["GraphStore", "StoreSession", "get_graph_store"]
