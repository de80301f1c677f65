"""Shared helpers."""

from .timezone import now_utc, ensure_utc
from .formatting import format_medium_datetime, format_short_time, resolve_locale

__all__ = [
    'now_utc',
    'ensure_utc',
    'format_medium_datetime',
    'format_short_time',
    'resolve_locale',
]
