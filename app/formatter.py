"""Renders an instant as a CurrentTime snapshot."""

from datetime import datetime, timedelta, timezone
from email.utils import format_datetime

from app.models import CurrentTime

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

# English names, independent of the process locale
DAY_NAMES = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")
MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)


def _clock_time(dt: datetime) -> str:
    return f"{dt.hour:02d}:{dt.minute:02d}:{dt.second:02d}"


def format_rfc1123(utc: datetime) -> str:
    """Format as ``Thu, 14 Nov 2024 17:30:00 GMT``."""
    return format_datetime(utc, usegmt=True)


def format_universal_sortable(utc: datetime) -> str:
    """Format as ``2024-11-14 17:30:00Z``."""
    return f"{utc.year:04d}-{utc.month:02d}-{utc.day:02d} {_clock_time(utc)}Z"


def format_universal_full(utc: datetime) -> str:
    """Format as ``Thursday, 14 November 2024 17:30:00``."""
    day = DAY_NAMES[utc.weekday()]
    month = MONTH_NAMES[utc.month - 1]
    return f"{day}, {utc.day:02d} {month} {utc.year:04d} {_clock_time(utc)}"


def unix_seconds(utc: datetime) -> int:
    """Whole seconds since the UNIX epoch, dropping any fraction."""
    return (utc - EPOCH) // timedelta(seconds=1)


def format_current_time(now: datetime) -> CurrentTime:
    """
    Build the CurrentTime snapshot for an instant.

    Every derived field is computed in UTC whatever the offset of ``now``.
    A naive ``now`` is taken to be UTC already.

    Args:
        now: The instant to render

    Returns:
        The snapshot, with ``timestamp`` carrying ``now`` unchanged
    """
    if now.tzinfo is None or now.utcoffset() is None:
        now = now.replace(tzinfo=timezone.utc)
    utc = now.astimezone(timezone.utc)

    return CurrentTime(
        timestamp=now,
        rfc1123=format_rfc1123(utc),
        unix_seconds=unix_seconds(utc),
        universal_sortable=format_universal_sortable(utc),
        universal_full=format_universal_full(utc),
    )
