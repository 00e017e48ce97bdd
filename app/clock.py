"""
Source of "now" for the service layer.

Services never call datetime.now() directly; they ask their clock, so tests
can pin the calendar day.
"""

from datetime import date, datetime, timedelta


class Clock:
    """Wall clock in the server's local time zone."""

    def now(self) -> datetime:
        return datetime.now()

    def today(self) -> date:
        return self.now().date()


class FixedClock(Clock):
    """Clock frozen at a given instant (used by tests and scripts)."""

    def __init__(self, instant: datetime):
        self.instant = instant

    def now(self) -> datetime:
        return self.instant

    def advance(self, **kwargs) -> None:
        """Move the frozen instant forward, e.g. advance(days=1)."""
        self.instant = self.instant + timedelta(**kwargs)


system_clock = Clock()
