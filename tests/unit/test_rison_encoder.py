"""Tests for the Discover URL fragment encoders."""

from datetime import UTC, datetime, timedelta

import pytest
from hypothesis import given
from hypothesis import strategies as st

from kibanalink.core.encoding.rison import (
    INTERVAL_AUTO,
    encode_app_state,
    encode_columns,
    encode_global_state,
    encode_index,
    encode_query,
    encode_refresh_interval,
    encode_sort,
    encode_time,
    encode_url,
    escape,
)
from kibanalink.core.models import (
    ResolvedRequest,
    Sort,
    SortDirection,
    TimeScopeMode,
    TimeWindow,
)

NOW = datetime(2015, 11, 25, 8, 0, 0, tzinfo=UTC)


def _relative(seconds: float) -> TimeWindow:
    return TimeWindow(
        mode=TimeScopeMode.RELATIVE,
        from_time=NOW - timedelta(seconds=seconds),
        to_time=NOW,
    )


def _resolved(**overrides: object) -> ResolvedRequest:
    values: dict[str, object] = {
        "index_pattern": "application-logs-*",
        "columns": ("_source",),
        "query": "*",
        "sort": Sort(),
        "refresh_interval": None,
        "time_window": _relative(900),
    }
    values.update(overrides)
    return ResolvedRequest(**values)  # type: ignore[arg-type]


class TestEscape:
    """Tests for the escaping primitive."""

    @pytest.mark.encoding
    def test_spaces_become_plus(self) -> None:
        """Spaces are encoded as '+'."""
        assert escape("royal with cheese") == "royal+with+cheese"

    @pytest.mark.encoding
    def test_special_characters_are_percent_escaped(self) -> None:
        """Query operators and quotes are percent-escaped."""
        assert (
            escape('*quarter-pounder* || ("royal with cheese" && burger)')
            == "%2Aquarter-pounder%2A+%7C%7C+%28%22royal+with+cheese%22"
            "+%26%26+burger%29"
        )

    @pytest.mark.encoding
    def test_unreserved_characters_pass_through(self) -> None:
        """Letters, digits and _.-~ are left alone."""
        assert escape("metadata._COMM-1~x") == "metadata._COMM-1~x"

    @pytest.mark.encoding
    @given(st.text())
    def test_escaped_text_never_contains_rison_syntax(self, text: str) -> None:
        """Escaped text cannot close a clause or start a Rison token."""
        escaped = escape(text)
        for char in ",()'! ":
            assert char not in escaped


class TestClauseEncoders:
    """Tests for individual clause encoders."""

    @pytest.mark.encoding
    def test_encode_columns_single(self) -> None:
        """A single column renders inside a Rison array."""
        assert encode_columns(["_source"]) == "columns:!(_source)"

    @pytest.mark.encoding
    def test_encode_columns_preserves_order_and_escapes_each(self) -> None:
        """Columns keep their order and are escaped individually."""
        assert (
            encode_columns(["message", "_index", "host name"])
            == "columns:!(message,_index,host+name)"
        )

    @pytest.mark.encoding
    def test_encode_index_is_verbatim(self) -> None:
        """Index patterns are not escaped."""
        assert encode_index("logs-*,other-*") == "index:'logs-*,other-*'"

    @pytest.mark.encoding
    def test_interval_is_constant(self) -> None:
        """The interval clause is always 'interval:auto'."""
        assert INTERVAL_AUTO == "interval:auto"

    @pytest.mark.encoding
    def test_encode_query(self) -> None:
        """The query is escaped inside the query_string clause."""
        assert (
            encode_query("*")
            == "query:(query_string:(analyze_wildcard:!t,query:'%2A'))"
        )

    @pytest.mark.encoding
    def test_encode_sort(self) -> None:
        """Sort renders the escaped field and the direction token."""
        assert encode_sort(Sort("remote_ip", SortDirection.ASC)) == (
            "sort:!(remote_ip,asc)"
        )
        assert encode_sort(Sort("@timestamp")) == "sort:!(%40timestamp,desc)"

    @pytest.mark.encoding
    def test_encode_refresh_interval_absent(self) -> None:
        """No refresh interval means no clause."""
        assert encode_refresh_interval(None) is None

    @pytest.mark.encoding
    def test_encode_refresh_interval_seconds_and_millis(self) -> None:
        """Display is in seconds, value in milliseconds."""
        assert encode_refresh_interval(30) == (
            "refreshInterval:(display:'30%20seconds',pause:!f,section:1,value:30000)"
        )

    @pytest.mark.encoding
    def test_encode_refresh_interval_zero(self) -> None:
        """Zero is a valid interval and still emitted."""
        assert encode_refresh_interval(0) == (
            "refreshInterval:(display:'0%20seconds',pause:!f,section:1,value:0)"
        )


class TestTimeEncoder:
    """Tests for the time clause encoder."""

    @pytest.mark.encoding
    def test_relative_uses_now_offset(self) -> None:
        """Relative windows render as now-<seconds>s to now."""
        assert encode_time(_relative(1800)) == (
            "time:(from:'now-1800s',mode:relative,to:'now')"
        )

    @pytest.mark.encoding
    def test_relative_truncates_fractional_seconds(self) -> None:
        """Fractional seconds are dropped from the offset."""
        assert encode_time(_relative(1800.9)) == (
            "time:(from:'now-1800s',mode:relative,to:'now')"
        )

    @pytest.mark.encoding
    def test_absolute_uses_utc_timestamps(self) -> None:
        """Absolute windows render both bounds as UTC with milliseconds."""
        window = TimeWindow(
            mode=TimeScopeMode.ABSOLUTE,
            from_time=datetime(2015, 1, 2, 11, 4, 5, tzinfo=UTC),
            to_time=datetime(2015, 11, 25, 7, 59, 50, 123456, tzinfo=UTC),
        )
        assert encode_time(window) == (
            "time:(from:'2015-01-02T11:04:05.000Z',mode:absolute,"
            "to:'2015-11-25T07:59:50.123Z')"
        )


class TestStateEncoders:
    """Tests for the _a/_g group encoders and URL assembly."""

    @pytest.mark.encoding
    def test_app_state_order(self) -> None:
        """The _a group lists columns, index, interval, query, sort in order."""
        assert encode_app_state(_resolved()) == (
            "columns:!(_source),index:'application-logs-*',interval:auto,"
            "query:(query_string:(analyze_wildcard:!t,query:'%2A')),"
            "sort:!(time,desc)"
        )

    @pytest.mark.encoding
    def test_global_state_without_refresh(self) -> None:
        """Without a refresh interval the _g group holds only time."""
        assert encode_global_state(_resolved()) == (
            "time:(from:'now-900s',mode:relative,to:'now')"
        )

    @pytest.mark.encoding
    def test_global_state_with_refresh_first(self) -> None:
        """The refresh interval precedes the time clause."""
        state = encode_global_state(_resolved(refresh_interval=5))
        assert state.startswith("refreshInterval:(display:'5%20seconds'")
        assert state.endswith(",time:(from:'now-900s',mode:relative,to:'now')")

    @pytest.mark.encoding
    def test_encode_url(self) -> None:
        """The URL wraps both groups after the Discover path."""
        url = encode_url("https://kibana.example.net/app/kibana", _resolved())
        assert url.startswith(
            "https://kibana.example.net/app/kibana#/discover?_g=(time:"
        )
        assert ")&_a=(columns:!(_source)," in url
        assert url.endswith("sort:!(time,desc))")
