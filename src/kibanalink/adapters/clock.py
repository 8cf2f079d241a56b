"""Clock adapters implementing ClockPort."""

from datetime import UTC, datetime, timedelta


class SystemClock:
    """Wall-clock implementation of ClockPort."""

    def now(self) -> datetime:
        """Return the current instant in UTC."""
        return datetime.now(UTC)


class FrozenClock:
    """Clock that always returns the same instant until moved.

    Naive datetimes are taken as local time, like every other timestamp
    handled by the builder.

    Args:
        instant: The instant to report from now().
    """

    def __init__(self, instant: datetime) -> None:
        self._instant = instant.astimezone()

    def now(self) -> datetime:
        """Return the frozen instant."""
        return self._instant

    def advance(self, seconds: float) -> None:
        """Move the frozen instant forward by the given number of seconds."""
        self._instant += timedelta(seconds=seconds)
