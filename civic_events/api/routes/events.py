"""Events router module."""

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.exc import SQLAlchemyError

from ...db import DatabaseError, EventRepository
from ...models.event import Event

router = APIRouter(tags=["events"])

def get_repository() -> EventRepository:
    """Repository backed by the global database; overridden in tests."""
    return EventRepository()

def serialize_event(event: Event) -> Dict[str, Any]:
    """Flat event dict plus the derived display fields."""
    data = event.to_dict()
    data.update({
        'formatted_date': event.formatted_date,
        'formatted_time': event.formatted_time,
        'is_upcoming': event.is_upcoming,
    })
    return data

@router.get("/events", response_model=List[Dict])
async def get_events(
    limit: Optional[int] = Query(default=None, ge=1, le=500),
    repository: EventRepository = Depends(get_repository)
):
    """Get upcoming events, earliest first."""
    try:
        return [serialize_event(event) for event in repository.list_upcoming(limit=limit)]
    except (DatabaseError, SQLAlchemyError) as e:
        raise HTTPException(status_code=500, detail=f"Database error: {str(e)}")

@router.get("/events/{event_id}", response_model=Dict)
async def get_event(event_id: str, repository: EventRepository = Depends(get_repository)):
    """Get a single event by ID."""
    try:
        event = repository.get(event_id)
    except (DatabaseError, SQLAlchemyError) as e:
        raise HTTPException(status_code=500, detail=f"Database error: {str(e)}")
    if not event:
        raise HTTPException(status_code=404, detail="Event not found")
    return serialize_event(event)
