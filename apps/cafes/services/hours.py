"""
Weekly opening hours evaluation.

A café schedule is a mapping of weekday name to a day entry::

    {
        'monday': {'open': '08:00', 'close': '18:00'},
        'tuesday': None,                # closed
        'wednesday': '09:00-17:00',     # legacy string form
        'sunday': 'closed',
    }

Every function here is pure apart from reading the clock when ``now`` is
not given. Reads never raise: missing or malformed data evaluates as closed.
Writes go through ``validate_schedule`` which rejects bad input up front.
"""

import logging
import re
from datetime import datetime
from typing import Any, NamedTuple, Optional

from django.utils import timezone

from .exceptions import InvalidScheduleError, InvalidTimeError

logger = logging.getLogger(__name__)


# Indexed by a Sunday=0 day-of-week integer.
SUNDAY_FIRST_DAYS = (
    'sunday', 'monday', 'tuesday', 'wednesday', 'thursday', 'friday', 'saturday',
)

# Order used when rendering a full week.
DISPLAY_ORDER_DAYS = (
    'monday', 'tuesday', 'wednesday', 'thursday', 'friday', 'saturday', 'sunday',
)

DEFAULT_LOCALE = 'fr'

CLOSED_MARKERS = ('closed', 'fermé')

DAY_LABELS = {
    'fr': {
        'monday': 'Lundi',
        'tuesday': 'Mardi',
        'wednesday': 'Mercredi',
        'thursday': 'Jeudi',
        'friday': 'Vendredi',
        'saturday': 'Samedi',
        'sunday': 'Dimanche',
    },
    'en': {
        'monday': 'Monday',
        'tuesday': 'Tuesday',
        'wednesday': 'Wednesday',
        'thursday': 'Thursday',
        'friday': 'Friday',
        'saturday': 'Saturday',
        'sunday': 'Sunday',
    },
    'es': {
        'monday': 'Lunes',
        'tuesday': 'Martes',
        'wednesday': 'Miércoles',
        'thursday': 'Jueves',
        'friday': 'Viernes',
        'saturday': 'Sábado',
        'sunday': 'Domingo',
    },
}

CLOSED_LABELS = {
    'fr': 'Fermé',
    'en': 'Closed',
    'es': 'Cerrado',
}

CLOSING_TEMPLATES = {
    'fr': 'Ferme à {close}',
    'en': 'Closes at {close}',
    'es': 'Cierra a las {close}',
}

_TIME_RE = re.compile(r'^(\d{1,2}):(\d{2})$')


class DayHours(NamedTuple):
    """Opening range for one day, ``open`` inclusive and ``close`` exclusive."""
    open: str
    close: str


# =============================================================================
# Locale helpers
# =============================================================================

def locale_chain(locale: Optional[str]) -> list[str]:
    """
    Candidate locales tried in order for any localized lookup.

    The requested locale comes first, then the default locale.
    """
    chain = []
    if locale:
        chain.append(locale)
    if DEFAULT_LOCALE not in chain:
        chain.append(DEFAULT_LOCALE)
    return chain


def _lookup(table: dict, locale: Optional[str], key: Optional[str] = None):
    for candidate in locale_chain(locale):
        entry = table.get(candidate)
        if entry is None:
            continue
        if key is None:
            return entry
        if key in entry:
            return entry[key]
    return None


def _closed_label(locale: Optional[str]) -> str:
    return _lookup(CLOSED_LABELS, locale)


# =============================================================================
# Parsing
# =============================================================================

def parse_day_hours(day_data: Any) -> Optional[DayHours]:
    """
    Normalize one schedule entry.

    Args:
        day_data: ``None``, a ``{'open', 'close'}`` dict, an ``"HH:MM-HH:MM"``
            string or a closed marker such as ``"closed"``

    Returns:
        DayHours, or None when the day is closed or the entry is incomplete.
        Time strings are returned as stored and are not validated here.
    """
    if not day_data:
        return None

    if isinstance(day_data, str):
        if day_data.strip().lower() in CLOSED_MARKERS:
            return None
        if '-' in day_data:
            open_time, _, close_time = day_data.partition('-')
            return DayHours(open_time.strip(), close_time.strip())
        return None

    if isinstance(day_data, dict):
        open_time = day_data.get('open')
        close_time = day_data.get('close')
        if open_time and close_time:
            return DayHours(open_time, close_time)

    return None


def time_to_minutes(value: str) -> int:
    """
    Convert ``HH:MM`` to minutes since midnight.

    ``24:00`` is accepted and maps to the end of the day.

    Raises:
        InvalidTimeError: If the value is not a valid 24-hour time
    """
    match = _TIME_RE.match(value.strip()) if isinstance(value, str) else None
    if not match:
        raise InvalidTimeError(f"Invalid time '{value}'. Use HH:MM")

    hours, minutes = int(match.group(1)), int(match.group(2))
    if minutes > 59 or hours > 24 or (hours == 24 and minutes != 0):
        raise InvalidTimeError(f"Invalid time '{value}'. Use HH:MM")

    return hours * 60 + minutes


def validate_schedule(schedule: Optional[dict]) -> Optional[dict]:
    """
    Validate and normalize a weekly schedule before it is stored.

    Args:
        schedule: Raw schedule mapping, or None for "no schedule data"

    Returns:
        Normalized schedule with every weekday present, each value either
        None (closed) or ``{'open': 'HH:MM', 'close': 'HH:MM'}``

    Raises:
        InvalidScheduleError: On unknown weekdays, malformed times or
            ranges where close is not after open
    """
    if schedule is None:
        return None

    if not isinstance(schedule, dict):
        raise InvalidScheduleError("Hours must be an object keyed by weekday")

    unknown = sorted(set(schedule) - set(DISPLAY_ORDER_DAYS))
    if unknown:
        raise InvalidScheduleError(f"Unknown weekday(s): {', '.join(unknown)}")

    normalized = {}
    for day in DISPLAY_ORDER_DAYS:
        day_hours = parse_day_hours(schedule.get(day))
        if day_hours is None:
            normalized[day] = None
            continue

        try:
            open_minutes = time_to_minutes(day_hours.open)
            close_minutes = time_to_minutes(day_hours.close)
        except InvalidTimeError as e:
            logger.warning("Rejected schedule for %s: %s", day, e)
            raise InvalidScheduleError(f"{day}: {e}")

        # Ranges spanning midnight are not supported
        if close_minutes <= open_minutes:
            logger.warning("Rejected schedule for %s: %s", day, day_hours)
            raise InvalidScheduleError(
                f"{day}: closing time must be after opening time "
                f"(got {day_hours.open} - {day_hours.close})"
            )

        normalized[day] = {'open': day_hours.open.strip(), 'close': day_hours.close.strip()}

    return normalized


# =============================================================================
# Evaluation
# =============================================================================

def _resolve_now(now: Optional[datetime]) -> datetime:
    if now is None:
        return timezone.localtime()
    if timezone.is_aware(now):
        return timezone.localtime(now)
    return now


def current_day(now: Optional[datetime] = None) -> str:
    """Weekday name for ``now`` (local time), e.g. ``'monday'``."""
    now = _resolve_now(now)
    # isoweekday() is Monday=1..Sunday=7, so % 7 gives Sunday=0
    return SUNDAY_FIRST_DAYS[now.isoweekday() % 7]


def _today_hours(schedule: dict, now: datetime) -> Optional[DayHours]:
    return parse_day_hours(schedule.get(current_day(now)))


def is_open_now(schedule: Optional[dict], now: Optional[datetime] = None) -> Optional[bool]:
    """
    Whether the café is open at ``now``.

    Returns:
        None if there is no schedule at all, False if today is closed,
        incomplete or malformed, otherwise whether ``now`` falls in
        ``[open, close)`` at minute granularity
    """
    if schedule is None:
        return None

    now = _resolve_now(now)
    today = _today_hours(schedule, now)
    if today is None:
        return False

    try:
        open_minutes = time_to_minutes(today.open)
        close_minutes = time_to_minutes(today.close)
    except InvalidTimeError:
        return False

    current = now.hour * 60 + now.minute
    return open_minutes <= current < close_minutes


def format_hours_for_day(day_hours: Any, locale: str = DEFAULT_LOCALE) -> str:
    """Render one day entry as ``"HH:MM - HH:MM"`` or a localized closed label."""
    parsed = parse_day_hours(day_hours)
    if parsed is None:
        return _closed_label(locale)
    return f"{parsed.open} - {parsed.close}"


def get_today_hours(
    schedule: Optional[dict],
    locale: str = DEFAULT_LOCALE,
    now: Optional[datetime] = None
) -> Optional[str]:
    """Today's scheduled range regardless of whether the café is open right now."""
    if schedule is None:
        return None

    now = _resolve_now(now)
    return format_hours_for_day(schedule.get(current_day(now)), locale)


def get_closing_info(
    schedule: Optional[dict],
    locale: str = DEFAULT_LOCALE,
    now: Optional[datetime] = None
) -> Optional[str]:
    """Localized "closes at" text, only while the café is open."""
    if schedule is None:
        return None

    now = _resolve_now(now)
    today = _today_hours(schedule, now)
    if today is None or not is_open_now(schedule, now):
        return None

    return _lookup(CLOSING_TEMPLATES, locale).format(close=today.close)


def get_day_label(weekday: str, locale: str = DEFAULT_LOCALE) -> Optional[str]:
    """Display name of a weekday. Unknown weekdays give None."""
    return _lookup(DAY_LABELS, locale, weekday)


def get_all_days_ordered() -> list[str]:
    """Weekdays in display order, Monday first."""
    return list(DISPLAY_ORDER_DAYS)


def weekly_hours_table(schedule: Optional[dict], locale: str = DEFAULT_LOCALE) -> list[dict]:
    """
    Rows for a full-week hours table.

    Returns:
        One ``{'day', 'label', 'hours'}`` dict per weekday, Monday first.
        Without a schedule every day reads as closed.
    """
    schedule = schedule or {}
    return [
        {
            'day': day,
            'label': get_day_label(day, locale),
            'hours': format_hours_for_day(schedule.get(day), locale),
        }
        for day in get_all_days_ordered()
    ]
