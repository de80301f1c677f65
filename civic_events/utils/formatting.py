"""Locale-aware date and time rendering for event display.

Formatting follows the CLDR styles of the active locale rather than fixed
format strings, so "medium date + short time" reads as ``Oct 19, 2026, 6:30 PM``
in ``en_US`` and ``19.10.2026, 18:30`` in ``de_DE``.
"""

import logging
from datetime import datetime, tzinfo as TzInfo
from typing import Optional, Tuple, Union

from babel import Locale, UnknownLocaleError, default_locale
from babel.dates import format_date, format_time, get_datetime_format, get_timezone

from ..config.environment import DISPLAY_LOCALE
from .timezone import ensure_utc

logger = logging.getLogger(__name__)

FALLBACK_LOCALE = 'en_US'

LocaleLike = Union[Locale, str, None]


def resolve_locale(locale: LocaleLike = None) -> Locale:
    """
    Resolve the locale used for rendering.

    Order: explicit argument, CIVIC_EVENTS_LOCALE, the process LC_TIME
    locale, then en_US.
    """
    if isinstance(locale, Locale):
        return locale

    identifier = locale or DISPLAY_LOCALE or default_locale('LC_TIME') or FALLBACK_LOCALE
    try:
        return Locale.parse(identifier)
    except (ValueError, UnknownLocaleError) as e:
        logger.warning(f"Unknown locale '{identifier}' ({e}), using {FALLBACK_LOCALE}")
        return Locale.parse(FALLBACK_LOCALE)


def _localize(value: datetime, tz: Optional[TzInfo]) -> Tuple[datetime, TzInfo]:
    # No tz means the system local timezone
    tz = tz or get_timezone()
    return ensure_utc(value).astimezone(tz), tz


def format_short_time(value: datetime, locale: LocaleLike = None, tzinfo: Optional[TzInfo] = None) -> str:
    """Render only the time of day of `value` in the locale's short style."""
    local_value, tz = _localize(value, tzinfo)
    return format_time(local_value, format='short', tzinfo=tz, locale=resolve_locale(locale))


def format_medium_datetime(value: datetime, locale: LocaleLike = None, tzinfo: Optional[TzInfo] = None) -> str:
    """Render `value` as the locale's medium date joined with its short time."""
    loc = resolve_locale(locale)
    local_value, tz = _localize(value, tzinfo)

    # CLDR glue pattern, e.g. "{1}, {0}" where {1} is the date and {0} the time
    pattern = get_datetime_format('medium', locale=loc)
    return (
        pattern.replace("'", "")
        .replace('{0}', format_short_time(local_value, locale=loc, tzinfo=tz))
        .replace('{1}', format_date(local_value.date(), format='medium', locale=loc))
    )
