"""
Calendar-day date helpers.

Recorded event dates keep their full timestamp. Everything derived from them
(expected stage dates, day differences, labels) works on local calendar days,
so time-of-day never shifts a result. Aware timestamps are converted to the
local timezone before they are truncated to a day.

Malformed input raises ParseError and never falls back to "now".
"""
from datetime import date, datetime, timedelta
from typing import Literal, Optional, Union

from seedtrack.core.exceptions import ParseError

DateLike = Union[date, datetime, str]
DateStatus = Literal["overdue", "today", "upcoming", "future"]


# ── Parsing / normalizing ─────────────────────────────────────────────────────


def parse_iso(value: str) -> datetime:
    """Parse an ISO-8601 date or date-time string (offset and trailing Z allowed)."""
    if not isinstance(value, str):
        raise ParseError(value, "not a string")
    text = value.strip()
    if not text:
        raise ParseError(value, "empty")
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        raise ParseError(value)


def to_local_date(value: DateLike) -> date:
    if isinstance(value, str):
        value = parse_iso(value)
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone()
        return value.date()
    if isinstance(value, date):
        return value
    raise ParseError(value, "not a date")


def today() -> date:
    """Current local date. Derivation passes call this once and pass it down."""
    return date.today()


# ── Arithmetic ────────────────────────────────────────────────────────────────


def add_calendar_days(value: DateLike, n: int) -> date | datetime:
    # Strings are truncated to a local date; date/datetime keep their type.
    # Aware timestamps move on the local wall clock so DST never adds a day.
    if isinstance(value, str):
        value = to_local_date(value)
    if isinstance(value, datetime) and value.tzinfo is not None:
        local = value.astimezone()
        shifted = (local.replace(tzinfo=None) + timedelta(days=n)).astimezone()
        return shifted.astimezone(value.tzinfo)
    return value + timedelta(days=n)


def days_between(reference: DateLike, today: DateLike) -> int:
    """Signed whole days from ``today`` to ``reference`` (negative = in the past)."""
    return (to_local_date(reference) - to_local_date(today)).days


def days_from_today(value: DateLike, today: Optional[date] = None) -> int:
    return days_between(value, today if today is not None else date.today())


# ── Expected stage dates ──────────────────────────────────────────────────────


def sow_date(last_frost_date: DateLike, weeks_before: int) -> date:
    return to_local_date(last_frost_date) - timedelta(weeks=weeks_before)


def germination_date(sowed: DateLike, days_to_germination: int) -> date:
    return add_calendar_days(to_local_date(sowed), days_to_germination)


def transplant_date(germinated: DateLike, days_to_transplant: int) -> date:
    return add_calendar_days(to_local_date(germinated), days_to_transplant)


def plant_out_date(last_frost_date: DateLike, days_relative_to_frost: int) -> date:
    return add_calendar_days(to_local_date(last_frost_date), days_relative_to_frost)


def harden_off_date(plant_out: DateLike, days_to_harden_off: int) -> date:
    return add_calendar_days(to_local_date(plant_out), -days_to_harden_off)


def harvest_date(planted_out: DateLike, days_to_harvest: int) -> date:
    return add_calendar_days(to_local_date(planted_out), days_to_harvest)


# ── Comparisons ───────────────────────────────────────────────────────────────


def is_within_days(value: DateLike, days: int, today: Optional[date] = None) -> bool:
    return abs(days_from_today(value, today)) <= days


def is_past(value: DateLike, today: Optional[date] = None) -> bool:
    return days_from_today(value, today) < 0


def is_future(value: DateLike, today: Optional[date] = None) -> bool:
    return days_from_today(value, today) > 0


def is_today(value: DateLike, today: Optional[date] = None) -> bool:
    return days_from_today(value, today) == 0


def date_status(value: DateLike, window_days: int = 3, today: Optional[date] = None) -> DateStatus:
    days = days_from_today(value, today)
    if days < 0:
        return "overdue"
    if days == 0:
        return "today"
    if days <= window_days:
        return "upcoming"
    return "future"


# ── Display ───────────────────────────────────────────────────────────────────


def format_date(value: DateLike) -> str:
    """Short form, e.g. "May 15"."""
    d = to_local_date(value)
    return f"{d:%b} {d.day}"


def format_date_long(value: DateLike) -> str:
    d = to_local_date(value)
    return f"{d:%A}, {d:%B} {d.day}"


def format_date_full(value: DateLike) -> str:
    d = to_local_date(value)
    return f"{d:%B} {d.day}, {d.year}"


def relative_label(value: DateLike, today: Optional[date] = None) -> str:
    """
    Friendly label relative to today.

    0 → "Today", 1 → "Tomorrow", -1 → "Yesterday", 2..7 → "In N days",
    -7..-2 → "N days ago", anything further out → short absolute date.
    """
    days = days_from_today(value, today)
    if days == 0:
        return "Today"
    if days == 1:
        return "Tomorrow"
    if days == -1:
        return "Yesterday"
    if 0 < days <= 7:
        return f"In {days} days"
    if -7 <= days < 0:
        return f"{abs(days)} days ago"
    return format_date(value)
