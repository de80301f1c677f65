"""Repository for reading and writing events.

`Event` is a plain dataclass; this module owns its storage. Every call runs
in its own session scope and hands back detached `Event` instances, so
changes made to a returned event are only stored once it is passed to
`EventRepository.add` again.
"""

import logging
from typing import List, Optional

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from ..models.event import Event
from ..models.event_row import EventRow
from ..utils.timezone import now_utc
from .db_core import Database
from .operations import with_retry, execute_in_transaction

logger = logging.getLogger(__name__)


def event_to_row(event: Event) -> EventRow:
    """Map an event onto a new (transient) row."""
    return EventRow(**event.to_dict())


def row_to_event(row: EventRow) -> Event:
    """Map a stored row back onto an event."""
    return Event.from_dict(row.to_dict())


class EventRepository:
    """Stores events in the `events` table."""

    def __init__(self, database: Optional[Database] = None):
        if database is None:
            from .db_core import db as database
        self.database = database

    def add(self, event: Event) -> Event:
        """Insert the event, or overwrite the stored copy with the same id."""
        execute_in_transaction(self._merge, event, database=self.database)
        logger.info(f"Stored event {event.id} ({event.title!r})")
        return event

    @staticmethod
    def _merge(session: Session, event: Event) -> None:
        session.merge(event_to_row(event))

    @with_retry()
    def get(self, event_id: str) -> Optional[Event]:
        """Get a single event by id, or None if it does not exist."""
        with self.database.session() as session:
            row = session.get(EventRow, event_id)
            return row_to_event(row) if row else None

    @with_retry()
    def list_all(self) -> List[Event]:
        """All stored events, earliest first."""
        with self.database.session() as session:
            rows = session.scalars(select(EventRow).order_by(EventRow.date)).all()
            return [row_to_event(row) for row in rows]

    @with_retry()
    def list_upcoming(self, limit: Optional[int] = None) -> List[Event]:
        """Events starting strictly after now, earliest first."""
        with self.database.session() as session:
            query = (
                select(EventRow)
                .filter(EventRow.date > now_utc())
                .order_by(EventRow.date)
            )
            if limit is not None:
                query = query.limit(limit)
            rows = session.scalars(query).all()
            events = [row_to_event(row) for row in rows]

        # SQLite compares the stored text, so re-check on the aware values
        return [event for event in events if event.is_upcoming]

    @with_retry()
    def delete(self, event_id: str) -> bool:
        """Delete an event by id. Returns True if a row was removed."""
        with self.database.session() as session:
            result = session.execute(delete(EventRow).where(EventRow.id == event_id))
            removed = result.rowcount > 0
        if removed:
            logger.info(f"Deleted event {event_id}")
        return removed

    @with_retry()
    def clear(self) -> int:
        """Delete every stored event and return how many were removed."""
        with self.database.session() as session:
            count = session.execute(delete(EventRow)).rowcount
        logger.info(f"Cleared {count} events from database")
        return count
