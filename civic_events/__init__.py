"""Civic events: the event record, its storage, and a small read API."""

__version__ = "1.0.0"
