"""Clock abstraction so validation and timestamps never read the wall clock directly."""
from abc import ABC, abstractmethod
from datetime import datetime, UTC
from zoneinfo import ZoneInfo


class Clock(ABC):
    """Abstract source of the current time."""

    @abstractmethod
    def now(self) -> datetime:
        """Return the current timezone-aware timestamp."""
        pass


class SystemClock(Clock):
    """Clock backed by the system time, localized to a configured timezone."""

    def __init__(self, timezone: str = "UTC"):
        self.timezone = ZoneInfo(timezone)

    def now(self) -> datetime:
        return datetime.now(self.timezone)


class FixedClock(Clock):
    """Clock frozen at a given instant."""

    def __init__(self, instant: datetime):
        if instant.tzinfo is None:
            instant = instant.replace(tzinfo=UTC)
        self.instant = instant

    def now(self) -> datetime:
        return self.instant
