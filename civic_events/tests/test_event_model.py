"""Tests for the event record and its derived accessors."""

from datetime import datetime, timedelta, timezone

import pytest

from civic_events.models import event as event_module
from civic_events.models.event import Event, EventCategory
from civic_events.utils import formatting
from civic_events.utils.timezone import now_utc


def test_category_values_are_display_labels():
    assert [category.value for category in EventCategory] == [
        "Town Hall", "Forum", "Meeting", "Rally", "Debate", "Conference",
    ]
    assert EventCategory.from_label("Town Hall") is EventCategory.TOWN_HALL


def test_unknown_category_label_is_rejected():
    with pytest.raises(ValueError, match="Unknown event category"):
        EventCategory.from_label("Parade")


def test_defaults_are_applied(make_event):
    before = now_utc()
    event = make_event()
    after = now_utc()

    assert event.attendee_count == 0
    assert event.is_rsvp_required is True
    assert event.image_url is None
    assert event.max_attendees is None
    assert before <= event.created_at <= after


def test_generated_ids_are_unique(make_event):
    ids = {make_event().id for _ in range(200)}
    assert len(ids) == 200
    assert all(ids)


def test_explicit_id_is_kept(make_event):
    assert make_event(id="evt-1").id == "evt-1"


def test_construction_accepts_empty_strings():
    event = Event(
        title="",
        description="",
        category=EventCategory.FORUM,
        date=now_utc(),
        location="",
        organizer_id="",
        organizer_name="",
    )
    assert event.title == ""


def test_naive_datetimes_are_treated_as_utc(make_event):
    event = make_event(date=datetime(2026, 10, 19, 18, 30))
    assert event.date == datetime(2026, 10, 19, 18, 30, tzinfo=timezone.utc)


def test_future_event_is_upcoming(make_event):
    event = make_event(date=now_utc() + timedelta(minutes=5))
    assert event.is_upcoming is True
    assert event.is_past is False


def test_past_event_is_not_upcoming(make_event):
    event = make_event(date=now_utc() - timedelta(minutes=5))
    assert event.is_upcoming is False
    assert event.is_past is True


def test_event_starting_now_is_neither_upcoming_nor_past(monkeypatch, make_event, fixed_instant):
    monkeypatch.setattr(event_module, "now_utc", lambda: fixed_instant)
    event = make_event(date=fixed_instant)

    assert event.is_upcoming is False
    assert event.is_past is False


def test_is_upcoming_follows_the_clock(monkeypatch, make_event, fixed_instant):
    event = make_event(date=fixed_instant)

    monkeypatch.setattr(event_module, "now_utc", lambda: fixed_instant - timedelta(seconds=1))
    assert event.is_upcoming is True

    monkeypatch.setattr(event_module, "now_utc", lambda: fixed_instant + timedelta(seconds=1))
    assert event.is_upcoming is False


def test_capacity_without_limit(make_event):
    event = make_event(attendee_count=5000)
    assert event.spots_available is None
    assert event.is_full is False


def test_capacity_with_limit(make_event):
    event = make_event(max_attendees=50, attendee_count=48)
    assert event.spots_available == 2
    assert event.is_full is False

    event.attendee_count = 53
    assert event.spots_available == 0
    assert event.is_full is True


def test_formatted_strings_share_the_time_rendering(monkeypatch, make_event, fixed_instant):
    monkeypatch.setattr(formatting, "DISPLAY_LOCALE", "en_US")
    event = make_event(date=fixed_instant)

    assert event.formatted_date
    assert event.formatted_time
    assert event.formatted_time in event.formatted_date


def test_to_dict_is_flat(make_event):
    event = make_event(image_url="https://example.org/hall.jpg")
    data = event.to_dict()

    assert set(data) == {
        "id", "title", "description", "category", "date", "location",
        "organizer_id", "organizer_name", "attendee_count", "is_rsvp_required",
        "image_url", "created_at", "max_attendees",
    }
    assert data["category"] == "Town Hall"
    assert data["image_url"] == "https://example.org/hall.jpg"


@pytest.mark.parametrize("image_url", [None, "https://example.org/rally.png"])
def test_dict_round_trip(make_event, image_url):
    event = make_event(category=EventCategory.RALLY, image_url=image_url, attendee_count=12)
    assert Event.from_dict(event.to_dict()) == event


def test_from_dict_accepts_iso_strings(make_event, fixed_instant):
    event = make_event(date=fixed_instant)
    data = event.to_dict()
    data["date"] = "2026-10-19T18:30:00+00:00"
    data["created_at"] = data["created_at"].isoformat()

    assert Event.from_dict(data) == event


def test_from_dict_fills_missing_optional_fields():
    event = Event.from_dict({
        "title": "Candidate Debate",
        "description": "Mayoral candidates debate housing policy.",
        "category": "Debate",
        "date": "2026-11-02T23:00:00+00:00",
        "location": "Lincoln High Auditorium",
        "organizer_id": "org-7",
        "organizer_name": "League of Voters",
    })

    assert event.category is EventCategory.DEBATE
    assert event.id
    assert event.attendee_count == 0
    assert event.is_rsvp_required is True
    assert event.image_url is None


def test_from_dict_rejects_unknown_category(make_event):
    data = {**make_event().to_dict(), "category": "Parade"}

    with pytest.raises(ValueError, match="Unknown event category"):
        Event.from_dict(data)


def test_from_dict_without_category_is_a_missing_argument(make_event):
    data = make_event().to_dict()
    del data["category"]

    with pytest.raises(TypeError):
        Event.from_dict(data)


def test_category_label_is_resolved_on_construction(make_event):
    event = make_event(category="Town Hall")

    assert event.category is EventCategory.TOWN_HALL
    assert event.to_dict()["category"] == "Town Hall"


def test_zero_capacity_means_unlimited(make_event):
    event = make_event(max_attendees=0, attendee_count=10)

    assert event.spots_available is None
    assert event.is_full is False
