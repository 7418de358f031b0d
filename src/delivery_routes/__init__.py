"""Fastest delivery route lookup between distribution centers and zones."""

__version__ = "0.1.0"
