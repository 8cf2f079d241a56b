"""Core value types describing a saved search for the viewer's Discover page."""

from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from kibanalink.core.errors import InvalidRequestError

DEFAULT_COLUMNS = ("_source",)
DEFAULT_QUERY = "*"
DEFAULT_SORT_FIELD = "time"


class SortDirection(str, Enum):
    """Sort order token emitted in the sort fragment."""

    ASC = "asc"
    DESC = "desc"


class TimeScopeMode(str, Enum):
    """Time window kind emitted in the time fragment."""

    RELATIVE = "relative"
    ABSOLUTE = "absolute"


def _check_bound(name: str, value: object) -> None:
    if value is not None and not isinstance(value, datetime):
        raise InvalidRequestError(
            f"{name} must be a datetime, got {type(value).__name__}"
        )


@dataclass(frozen=True)
class Sort:
    """Sort clause.

    Attributes:
        field: Name of the log field to sort on.
        direction: Ascending or descending.
    """

    field: str = DEFAULT_SORT_FIELD
    direction: SortDirection = SortDirection.DESC

    def __post_init__(self) -> None:
        if not isinstance(self.field, str) or not self.field:
            raise InvalidRequestError("sort field must be a non-empty string")
        try:
            direction = SortDirection(self.direction)
        except ValueError:
            raise InvalidRequestError(
                f"sort direction must be 'asc' or 'desc', got {self.direction!r}"
            ) from None
        object.__setattr__(self, "direction", direction)


@dataclass(frozen=True)
class RelativeTimeScope:
    """Time window ending now.

    Attributes:
        from_time: Start of the window. Defaults to 15 minutes before now.
    """

    from_time: datetime | None = None

    mode = TimeScopeMode.RELATIVE

    def __post_init__(self) -> None:
        _check_bound("from_time", self.from_time)


@dataclass(frozen=True)
class AbsoluteTimeScope:
    """Time window between two fixed instants.

    Attributes:
        from_time: Start of the window. Defaults to 15 minutes before now.
        to_time: End of the window. Defaults to now.
    """

    from_time: datetime | None = None
    to_time: datetime | None = None

    mode = TimeScopeMode.ABSOLUTE

    def __post_init__(self) -> None:
        _check_bound("from_time", self.from_time)
        _check_bound("to_time", self.to_time)


TimeScope = RelativeTimeScope | AbsoluteTimeScope


@dataclass(frozen=True)
class GenerationRequest:
    """Parameters for one generated URL. Every field has a default.

    Attributes:
        data_source: Configured data source name. None selects the first
            configured data source.
        columns: Column names to display, in order.
        query: Free-text query string.
        sort: Sort clause.
        refresh_interval: Auto-refresh period in seconds, or None to leave
            auto-refresh off.
        time_scope: Relative or absolute time window.
    """

    data_source: str | None = None
    columns: Sequence[str] = DEFAULT_COLUMNS
    query: str = DEFAULT_QUERY
    sort: Sort = field(default_factory=Sort)
    refresh_interval: int | None = None
    time_scope: TimeScope = field(default_factory=RelativeTimeScope)

    def __post_init__(self) -> None:
        if self.data_source is not None and not isinstance(self.data_source, str):
            raise InvalidRequestError("data_source must be a string")
        # a bare string would otherwise be split into one column per character
        if isinstance(self.columns, str):
            raise InvalidRequestError("columns must be a sequence of strings")
        columns = tuple(self.columns)
        if not columns:
            raise InvalidRequestError("columns must not be empty")
        if not all(isinstance(c, str) for c in columns):
            raise InvalidRequestError("columns must be a sequence of strings")
        object.__setattr__(self, "columns", columns)
        if not isinstance(self.query, str):
            raise InvalidRequestError("query must be a string")
        if not isinstance(self.sort, Sort):
            raise InvalidRequestError("sort must be a Sort")
        if self.refresh_interval is not None:
            if isinstance(self.refresh_interval, bool) or not isinstance(
                self.refresh_interval, int
            ):
                raise InvalidRequestError("refresh_interval must be an integer")
            if self.refresh_interval < 0:
                raise InvalidRequestError("refresh_interval must not be negative")
        if not isinstance(self.time_scope, (RelativeTimeScope, AbsoluteTimeScope)):
            raise InvalidRequestError(
                "time_scope must be a RelativeTimeScope or AbsoluteTimeScope"
            )


@dataclass(frozen=True)
class TimeWindow:
    """A time window with every bound resolved.

    Attributes:
        mode: Relative or absolute.
        from_time: Timezone-aware start instant.
        to_time: Timezone-aware end instant (now, for relative windows).
    """

    mode: TimeScopeMode
    from_time: datetime
    to_time: datetime


@dataclass(frozen=True)
class ResolvedRequest:
    """A GenerationRequest with every default filled in from config and clock."""

    index_pattern: str
    columns: tuple[str, ...]
    query: str
    sort: Sort
    refresh_interval: int | None
    time_window: TimeWindow
