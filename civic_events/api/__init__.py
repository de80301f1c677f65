"""API package initialization."""
