"""Clocks — implementations of the core Clock protocol.

Invariants:
    - now() always returns a timezone-aware datetime
"""

from datetime import datetime, timedelta, timezone, tzinfo


class SystemClock:
    """Wall clock in a fixed zone (the user's calendar for streak math)."""

    def __init__(self, tz: tzinfo = timezone.utc):
        self.tz = tz

    def now(self) -> datetime:
        return datetime.now(self.tz)


class FixedClock:
    """Manually advanced clock for tests and replays."""

    def __init__(self, start: datetime):
        if start.tzinfo is None:
            raise ValueError("FixedClock requires a timezone-aware start")
        self.current = start

    def now(self) -> datetime:
        return self.current

    def advance(self, **delta: float) -> datetime:
        self.current += timedelta(**delta)
        return self.current
