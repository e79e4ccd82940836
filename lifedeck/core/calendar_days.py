"""Calendar Days — date math over injected, timezone-aware instants.

Invariants:
    - Every instant passed in must be timezone-aware
    - "Calendar day" is the local date in the instant's own tzinfo
"""

from datetime import date, datetime, time, timedelta

from lifedeck.core.errors import InvalidArgumentError


def require_aware(value: datetime, field: str) -> datetime:
    """Reject naive datetimes — day boundaries are meaningless without a zone."""
    if value.tzinfo is None or value.tzinfo.utcoffset(value) is None:
        raise InvalidArgumentError(
            f"{field} must be timezone-aware, got naive {value.isoformat()}",
            field,
        )
    return value


def start_of_next_day(now: datetime) -> datetime:
    require_aware(now, "now")
    tomorrow = now.date() + timedelta(days=1)
    return datetime.combine(tomorrow, time.min, tzinfo=now.tzinfo)


def days_between(earlier: date, later: date) -> int:
    """Whole calendar days from earlier to later (negative if reversed)."""
    return (later - earlier).days
