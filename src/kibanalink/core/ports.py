"""Port interfaces for the URL builder.

The core depends only on these protocols; concrete implementations live in
``kibanalink.adapters``.
"""

from datetime import datetime
from typing import Protocol, runtime_checkable


@runtime_checkable
class ClockPort(Protocol):
    """Port for reading the current instant.

    Examples: SystemClock, FrozenClock.
    """

    def now(self) -> datetime:
        """Return the current instant as a timezone-aware datetime."""
        ...
