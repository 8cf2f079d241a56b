"""Fragment encoders for the viewer's Rison-style Discover URL state.

Each function renders one clause of the ``_a`` or ``_g`` parameter. Free
text supplied by the caller is percent-escaped; structural tokens and
configured values (base URL, index patterns) are emitted verbatim.
"""

from collections.abc import Iterable
from urllib.parse import quote_plus

from kibanalink.core.models import ResolvedRequest, Sort, TimeScopeMode, TimeWindow
from kibanalink.core.timescope import elapsed_seconds, format_timestamp

DISCOVER_PATH = "#/discover"

# Opaque clause the viewer expects in every Discover state
INTERVAL_AUTO = "interval:auto"


def escape(text: str) -> str:
    """Percent-escape free text, form style (spaces become ``+``)."""
    return quote_plus(text, safe="")


def encode_columns(columns: Iterable[str]) -> str:
    """Encode ``columns:!(<c1>,<c2>,...)``, escaping each name on its own."""
    return f"columns:!({','.join(escape(c) for c in columns)})"


def encode_index(index_pattern: str) -> str:
    """Encode ``index:'<pattern>'`` with the pattern left as configured."""
    return f"index:'{index_pattern}'"


def encode_query(query: str) -> str:
    """Encode the query_string clause with wildcard analysis turned on."""
    return f"query:(query_string:(analyze_wildcard:!t,query:'{escape(query)}'))"


def encode_sort(sort: Sort) -> str:
    """Encode ``sort:!(<field>,<asc|desc>)``."""
    return f"sort:!({escape(sort.field)},{sort.direction.value})"


def encode_refresh_interval(seconds: int | None) -> str | None:
    """Encode the auto-refresh clause, or None when auto-refresh is off.

    The viewer displays the period in seconds and stores it in milliseconds.
    """
    if seconds is None:
        return None
    return (
        f"refreshInterval:(display:'{seconds}%20seconds',"
        f"pause:!f,section:1,value:{seconds * 1000})"
    )


def encode_time(window: TimeWindow) -> str:
    """Encode the time clause.

    Relative windows are written as an offset from ``now`` in whole
    seconds; absolute windows as two UTC timestamps.
    """
    if window.mode is TimeScopeMode.RELATIVE:
        from_str = f"now-{elapsed_seconds(window)}s"
        to_str = "now"
    else:
        from_str = format_timestamp(window.from_time)
        to_str = format_timestamp(window.to_time)
    return f"time:(from:'{from_str}',mode:{window.mode.value},to:'{to_str}')"


def _join(clauses: Iterable[str | None]) -> str:
    return ",".join(c for c in clauses if c is not None)


def encode_app_state(resolved: ResolvedRequest) -> str:
    """Encode the ``_a`` group: columns, index, interval, query, sort."""
    return _join(
        [
            encode_columns(resolved.columns),
            encode_index(resolved.index_pattern),
            INTERVAL_AUTO,
            encode_query(resolved.query),
            encode_sort(resolved.sort),
        ]
    )


def encode_global_state(resolved: ResolvedRequest) -> str:
    """Encode the ``_g`` group: refresh interval (if any), then time."""
    return _join(
        [
            encode_refresh_interval(resolved.refresh_interval),
            encode_time(resolved.time_window),
        ]
    )


def encode_url(base_url: str, resolved: ResolvedRequest) -> str:
    """Assemble the full Discover URL for a resolved request."""
    return (
        f"{base_url}{DISCOVER_PATH}?"
        f"_g=({encode_global_state(resolved)})&_a=({encode_app_state(resolved)})"
    )
