"""Table mapping for stored events."""

from typing import Dict, Any
from sqlalchemy import Column, Integer, String, Text, Boolean, DateTime

from .base import Base
from ..utils.timezone import ensure_utc, now_utc

class EventRow(Base):
    """
    Stored form of an `Event`.

    The repository converts between this row and the `Event` dataclass;
    nothing outside `civic_events.db` should need to touch it.
    `category` holds the category label, e.g. 'Town Hall'.
    """
    __tablename__ = 'events'

    # Required fields
    id = Column(String(36), primary_key=True)
    title = Column(String, nullable=False)
    description = Column(Text, nullable=False)
    category = Column(String(32), nullable=False, index=True)
    date = Column(DateTime(timezone=True), nullable=False, index=True)
    location = Column(String, nullable=False)
    organizer_id = Column(String, nullable=False)
    organizer_name = Column(String, nullable=False)

    # Defaulted fields
    attendee_count = Column(Integer, nullable=False, default=0)
    is_rsvp_required = Column(Boolean, nullable=False, default=True)
    image_url = Column(String, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=now_utc)
    max_attendees = Column(Integer, nullable=True)

    def __init__(self, **kwargs):
        """Initialize EventRow with the given attributes."""
        # Ensure timezone-aware datetimes
        for key in ('date', 'created_at'):
            if kwargs.get(key) is not None:
                kwargs[key] = ensure_utc(kwargs[key])

        super().__init__(**kwargs)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary in the flat `Event.to_dict` shape."""
        return {
            'id': self.id,
            'title': self.title,
            'description': self.description,
            'category': self.category,
            'date': ensure_utc(self.date),
            'location': self.location,
            'organizer_id': self.organizer_id,
            'organizer_name': self.organizer_name,
            'attendee_count': self.attendee_count,
            'is_rsvp_required': self.is_rsvp_required,
            'image_url': self.image_url,
            'created_at': ensure_utc(self.created_at),
            'max_attendees': self.max_attendees,
        }

    def __str__(self) -> str:
        """String representation."""
        return f"EventRow(id={self.id}, title={self.title}, date={self.date})"
