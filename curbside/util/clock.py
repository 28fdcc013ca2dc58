"""Clock abstraction.

All domain timestamps are timezone-aware UTC. Services take a Clock instead
of calling datetime.now() so that time-dependent rules (the participation
gate in particular) can be exercised deterministically.
"""

from datetime import UTC, datetime, timedelta


def utcnow() -> datetime:
    """Return the current UTC time as a timezone-aware datetime."""
    return datetime.now(UTC)


class Clock:
    """Source of the current time."""

    def now(self) -> datetime:
        """Return the current UTC time."""
        return utcnow()


class SystemClock(Clock):
    """Wall-clock time."""

    pass


class ManualClock(Clock):
    """Clock that only moves when told to (tests and demos)."""

    def __init__(self, start: datetime | None = None) -> None:
        self._now = start or utcnow()

    def now(self) -> datetime:
        return self._now

    def set(self, moment: datetime) -> None:
        self._now = moment

    def advance(self, delta: timedelta) -> datetime:
        self._now = self._now + delta
        return self._now
