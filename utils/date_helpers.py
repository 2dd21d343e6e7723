import re
from datetime import date, datetime, time, timezone

from utils.constants import ISO_DATETIME_FORMAT, DISPLAY_DATETIME_FORMAT

# ── Display date format options ───────────────────────────────────────────────

DATE_FORMAT_OPTIONS = ["MM/DD/YYYY", "DD/MM/YYYY", "YYYY-MM-DD", "DD.MM.YYYY", "MM-DD-YYYY"]

_STRFTIME_MAP = {
    "MM/DD/YYYY": "%m/%d/%Y",
    "DD/MM/YYYY": "%d/%m/%Y",
    "YYYY-MM-DD": "%Y-%m-%d",
    "DD.MM.YYYY": "%d.%m.%Y",
    "MM-DD-YYYY": "%m-%d-%Y",
}

# Older data files carry nanosecond precision; datetime stops at microseconds.
_LONG_FRACTION = re.compile(r"(\.\d{6})\d+")


def today() -> date:
    return date.today()


def now() -> datetime:
    return datetime.now()


def combine(day: date, time_of_day: time) -> datetime:
    """Naive datetime from a calendar date and a time-of-day."""
    return datetime.combine(day, time_of_day)


def format_iso_datetime(dt: datetime) -> str:
    if dt.microsecond:
        return dt.isoformat()
    return dt.strftime(ISO_DATETIME_FORMAT)


def parse_iso_datetime(value) -> datetime | None:
    """Parse a naive ISO 8601 timestamp, returning None on failure."""
    if not isinstance(value, str) or not value:
        return None
    try:
        parsed = datetime.fromisoformat(_LONG_FRACTION.sub(r"\1", value.strip()))
    except ValueError:
        return None
    return parsed.replace(tzinfo=None)


def to_timestamp(dt: datetime) -> float:
    """Seconds since the epoch, reading the naive wall-clock time as UTC.

    Keeps plot axes showing the stored time rather than a shifted one.
    """
    return dt.replace(tzinfo=timezone.utc).timestamp()


def from_timestamp(ts: float) -> datetime:
    return datetime.fromtimestamp(ts, tz=timezone.utc).replace(tzinfo=None)


def format_datetime(dt: datetime) -> str:
    return dt.strftime(DISPLAY_DATETIME_FORMAT)


def format_display_date(d: date, fmt_key: str = "YYYY-MM-DD") -> str:
    return d.strftime(_STRFTIME_MAP.get(fmt_key, "%Y-%m-%d"))


def tkcal_date_pattern(fmt_key: str) -> str:
    """Return the tkcalendar date_pattern string for the given format key."""
    return fmt_key.lower() if fmt_key in _STRFTIME_MAP else "yyyy-mm-dd"


def parse_display_date(display_str: str, fmt_key: str) -> date | None:
    """Parse a date in the given display format. Returns None on failure.

    Falls back to ISO 8601 if the display format doesn't match.
    """
    if not display_str:
        return None
    raw = display_str.strip()
    fmt = _STRFTIME_MAP.get(fmt_key, "%Y-%m-%d")
    for candidate in (fmt, "%Y-%m-%d"):
        try:
            return datetime.strptime(raw, candidate).date()
        except ValueError:
            continue
    return None
