"""Timezone helpers.

All datetimes stored on events are timezone-aware and in UTC.
"""

from datetime import datetime, timezone
from typing import Optional


def now_utc() -> datetime:
    """Current instant as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def ensure_utc(dt: Optional[datetime]) -> Optional[datetime]:
    """
    Return `dt` as an aware UTC datetime.

    Naive datetimes are assumed to already be in UTC. This is also what
    SQLite hands back for `DateTime(timezone=True)` columns.
    """
    if dt is None:
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)
