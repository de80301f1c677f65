import pytest
from sqlalchemy.exc import OperationalError

from civic_events.db import SessionError, execute_in_transaction, with_retry
from civic_events.models.event_row import EventRow


def _operational_error():
    return OperationalError("SELECT 1", {}, Exception("database is locked"))


def test_with_retry_recovers_from_transient_errors():
    calls = []

    @with_retry(max_attempts=3, delay=0)
    def flaky():
        calls.append(1)
        if len(calls) < 3:
            raise _operational_error()
        return "ok"

    assert flaky() == "ok"
    assert len(calls) == 3


def test_with_retry_reraises_after_last_attempt():
    calls = []

    @with_retry(max_attempts=2, delay=0)
    def always_fails():
        calls.append(1)
        raise _operational_error()

    with pytest.raises(OperationalError):
        always_fails()
    assert len(calls) == 2


def test_with_retry_ignores_other_exceptions():
    calls = []

    @with_retry(max_attempts=3, delay=0)
    def broken():
        calls.append(1)
        raise KeyError("boom")

    with pytest.raises(KeyError):
        broken()
    assert len(calls) == 1


def test_execute_in_transaction_commits(database, repository, make_event):
    event = repository.add(make_event())

    def bump_attendees(session, event_id):
        row = session.get(EventRow, event_id)
        row.attendee_count += 5
        return row.attendee_count

    assert execute_in_transaction(bump_attendees, event.id, database=database) == 5
    assert repository.get(event.id).attendee_count == 5


def test_execute_in_transaction_rolls_back_on_error(database, repository, make_event):
    event = repository.add(make_event())

    def rename_then_fail(session, event_id):
        session.get(EventRow, event_id).title = "Renamed"
        session.flush()
        raise RuntimeError("failed halfway")

    with pytest.raises(SessionError):
        execute_in_transaction(rename_then_fail, event.id, database=database)
    assert repository.get(event.id).title == event.title
