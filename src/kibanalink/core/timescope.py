"""Time window resolution and timestamp formatting for the time fragment."""

import math
from datetime import UTC, datetime, timedelta

from kibanalink.core.errors import InvalidRequestError
from kibanalink.core.models import (
    AbsoluteTimeScope,
    RelativeTimeScope,
    TimeScope,
    TimeScopeMode,
    TimeWindow,
)

# Window length used when no start instant is given
DEFAULT_LOOKBACK = timedelta(minutes=15)


def _aware(value: datetime) -> datetime:
    """Attach the local time zone to naive datetimes."""
    return value if value.tzinfo is not None else value.astimezone()


def _bound(value: datetime | None, default: datetime) -> datetime:
    return default if value is None else _aware(value)


def resolve_time_scope(scope: TimeScope, now: datetime) -> TimeWindow:
    """Fill in missing bounds of a time scope.

    Both defaults are derived from the same ``now`` so the relative offset
    stays consistent.

    Args:
        scope: Relative or absolute time scope from the request.
        now: The single current instant read for this generation call.

    Returns:
        TimeWindow with both bounds set.

    Raises:
        InvalidRequestError: If the window starts after it ends.
    """
    now = _aware(now)
    default_from = now - DEFAULT_LOOKBACK
    if isinstance(scope, RelativeTimeScope):
        mode = TimeScopeMode.RELATIVE
        from_time = _bound(scope.from_time, default_from)
        to_time = now
    elif isinstance(scope, AbsoluteTimeScope):
        mode = TimeScopeMode.ABSOLUTE
        from_time = _bound(scope.from_time, default_from)
        to_time = _bound(scope.to_time, now)
    else:
        raise InvalidRequestError(f"unsupported time scope {scope!r}")

    if from_time > to_time:
        raise InvalidRequestError(
            f"time window starts after it ends: {from_time.isoformat()} > "
            f"{to_time.isoformat()}"
        )
    return TimeWindow(mode=mode, from_time=from_time, to_time=to_time)


def elapsed_seconds(window: TimeWindow) -> int:
    """Whole seconds between the start and end of a window, truncated."""
    return math.floor((window.to_time - window.from_time).total_seconds())


def format_timestamp(value: datetime) -> str:
    """Format an instant as UTC ``YYYY-MM-DDTHH:MM:SS.mmmZ``."""
    utc = _aware(value).astimezone(UTC)
    return (
        f"{utc.year:04d}-{utc:%m-%dT%H:%M:%S}.{utc.microsecond // 1000:03d}Z"
    )
