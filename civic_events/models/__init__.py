"""Models package initialization."""

from .base import Base
from .event import Event, EventCategory
from .event_row import EventRow

__all__ = ['Base', 'Event', 'EventCategory', 'EventRow']
