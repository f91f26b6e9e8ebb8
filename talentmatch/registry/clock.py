"""Time sources for registry transactions."""
from datetime import datetime, timedelta
from typing import Protocol, runtime_checkable

from talentmatch.persistence.models import as_utc, utcnow
from talentmatch.registry.exceptions import ClockUnavailableError


@runtime_checkable
class Clock(Protocol):
    """Supplies the current time for a transaction."""

    def now(self) -> datetime:
        ...


class SystemClock:
    """Wall-clock UTC time."""

    def now(self) -> datetime:
        return utcnow()


class FixedClock:
    """Clock pinned to a given instant. Useful for tests and replays."""

    def __init__(self, instant: datetime):
        self.instant = as_utc(instant)

    def now(self) -> datetime:
        return self.instant

    def advance(self, **delta) -> None:
        """Move the clock forward, e.g. ``clock.advance(seconds=30)``."""
        self.instant = self.instant + timedelta(**delta)


def read_clock(clock: Clock) -> datetime:
    """
    Read the current time from a clock.

    Returns:
        Timezone-aware UTC datetime

    Raises:
        ClockUnavailableError: If the clock fails or returns something
            other than a datetime
    """
    try:
        value = clock.now()
    except Exception as exc:
        raise ClockUnavailableError(str(exc) or type(exc).__name__) from exc

    if not isinstance(value, datetime):
        raise ClockUnavailableError(f"clock returned {type(value).__name__}, not datetime")
    return as_utc(value)
