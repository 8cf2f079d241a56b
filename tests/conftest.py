"""Shared test fixtures for all test modules."""

from datetime import UTC, datetime

import pytest

from kibanalink import api
from kibanalink.adapters.clock import FrozenClock
from kibanalink.core.builder import DiscoverUrlBuilder
from kibanalink.core.config import ConfigurationStore, ViewerConfig

BASE_URL = "https://kibana.intranet.net/app/kibana"
DATA_SOURCES = {"app": "application-logs-*", "aws": "cloudtrail-*"}


@pytest.fixture
def frozen_now() -> datetime:
    """Fixed current instant used by the frozen clock."""
    return datetime(2015, 11, 25, 8, 0, 0, tzinfo=UTC)


@pytest.fixture
def clock(frozen_now: datetime) -> FrozenClock:
    """Clock frozen at frozen_now."""
    return FrozenClock(frozen_now)


@pytest.fixture
def viewer_config() -> ViewerConfig:
    """Config with two data sources, 'app' first."""
    return ViewerConfig(base_url=BASE_URL, data_sources=DATA_SOURCES)


@pytest.fixture
def builder(viewer_config: ViewerConfig, clock: FrozenClock) -> DiscoverUrlBuilder:
    """Builder over viewer_config with a frozen clock."""
    return DiscoverUrlBuilder(viewer_config, clock=clock)


@pytest.fixture
def fresh_default_store(monkeypatch: pytest.MonkeyPatch) -> ConfigurationStore:
    """Replace the process-wide store with an empty one for the test."""
    store = ConfigurationStore()
    monkeypatch.setattr(api, "default_store", store)
    return store
