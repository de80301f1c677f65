"""Event model definition."""

import uuid
from dataclasses import dataclass, field, fields
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional

from ..utils.timezone import now_utc, ensure_utc
from ..utils.formatting import format_medium_datetime, format_short_time


class EventCategory(str, Enum):
    """Kind of civic event. The value is the human-readable label."""

    TOWN_HALL = "Town Hall"
    FORUM = "Forum"
    MEETING = "Meeting"
    RALLY = "Rally"
    DEBATE = "Debate"
    CONFERENCE = "Conference"

    @property
    def label(self) -> str:
        return self.value

    @classmethod
    def from_label(cls, label: str) -> "EventCategory":
        """Resolve a display label (e.g. 'Town Hall') to its category."""
        try:
            return cls(label)
        except ValueError:
            raise ValueError(f"Unknown event category: {label!r}") from None


def _new_event_id() -> str:
    return str(uuid.uuid4())


@dataclass
class Event:
    """
    Event model representing a single civic event.

    Fields:
        title: Event title
        description: Event description
        category: Kind of event (town hall, forum, ...)
        date: When the event starts (timezone-aware, UTC)
        location: Where the event takes place, free text
        organizer_id: Id of the organizing user or organization (not validated)
        organizer_name: Display copy of the organizer's name
        id: Unique identifier, a fresh UUID string unless given
        attendee_count: Number of attendees; a plain counter, not derived from RSVPs
        is_rsvp_required: Whether attendees must RSVP
        image_url: URL to the event's image (optional)
        created_at: When this event was created
        max_attendees: Capacity limit, None or 0 means unlimited
    """
    title: str
    description: str
    category: EventCategory
    date: datetime
    location: str
    organizer_id: str
    organizer_name: str
    id: str = field(default_factory=_new_event_id)
    attendee_count: int = 0
    is_rsvp_required: bool = True
    image_url: Optional[str] = None
    created_at: datetime = field(default_factory=now_utc)
    max_attendees: Optional[int] = None

    def __post_init__(self):
        # Keep datetimes comparable regardless of what the caller passed in
        self.date = ensure_utc(self.date)
        self.created_at = ensure_utc(self.created_at)
        if not isinstance(self.category, EventCategory):
            self.category = EventCategory.from_label(self.category)

    @property
    def is_upcoming(self) -> bool:
        """True while the event start lies strictly in the future."""
        return ensure_utc(self.date) > now_utc()

    @property
    def is_past(self) -> bool:
        """True once the event start lies strictly in the past."""
        return ensure_utc(self.date) < now_utc()

    @property
    def formatted_date(self) -> str:
        """Medium date and short time in the current locale and local timezone."""
        return format_medium_datetime(self.date)

    @property
    def formatted_time(self) -> str:
        """Short time of day in the current locale and local timezone."""
        return format_short_time(self.date)

    @property
    def spots_available(self) -> Optional[int]:
        if not self.max_attendees:
            return None
        return max(0, self.max_attendees - self.attendee_count)

    @property
    def is_full(self) -> bool:
        if not self.max_attendees:
            return False
        return self.attendee_count >= self.max_attendees

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a flat dictionary, one key per field."""
        data = {f.name: getattr(self, f.name) for f in fields(self)}
        data['category'] = self.category.label
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Event":
        """
        Build an event from the shape produced by `to_dict`.

        `date` and `created_at` may be datetimes or ISO-8601 strings. Keys for
        optional fields may be left out, in which case the defaults apply.
        """
        known = {f.name for f in fields(cls)}
        kwargs = {key: value for key, value in data.items() if key in known}

        for key in ('date', 'created_at'):
            if isinstance(kwargs.get(key), str):
                kwargs[key] = datetime.fromisoformat(kwargs[key])

        # An explicit None for a defaulted field means "use the default"
        for key in ('id', 'created_at'):
            if key in kwargs and kwargs[key] is None:
                del kwargs[key]

        return cls(**kwargs)

    def __str__(self) -> str:
        """String representation."""
        return f"Event(id={self.id}, title={self.title}, category={self.category.label}, date={self.date.isoformat()})"
