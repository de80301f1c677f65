from datetime import datetime, timedelta, timezone

import pytest

from civic_events.db import Database, DatabaseConfig, EventRepository
from civic_events.models.event import Event, EventCategory
from civic_events.utils.timezone import now_utc


@pytest.fixture
def database(tmp_path):
    database = Database(DatabaseConfig(sqlite_path=tmp_path / "events.db", production=False))
    database.init_db()
    yield database
    database.dispose()


@pytest.fixture
def repository(database):
    return EventRepository(database)


@pytest.fixture
def make_event():
    def _make_event(**overrides):
        values = {
            "title": "Budget Town Hall",
            "description": "Open discussion of next year's city budget.",
            "category": EventCategory.TOWN_HALL,
            "date": now_utc() + timedelta(days=7),
            "location": "City Hall, Room 201",
            "organizer_id": "org-42",
            "organizer_name": "Jordan Rivera",
        }
        values.update(overrides)
        return Event(**values)

    return _make_event


@pytest.fixture
def fixed_instant():
    return datetime(2026, 10, 19, 18, 30, tzinfo=timezone.utc)
