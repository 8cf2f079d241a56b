"""kibanalink: deep links into the Kibana Discover page for a saved search."""

from kibanalink.adapters.clock import FrozenClock, SystemClock
from kibanalink.api import configure, generate, is_configured
from kibanalink.core.builder import DiscoverUrlBuilder
from kibanalink.core.config import (
    ConfigurationStore,
    MutableConfiguration,
    ViewerConfig,
)
from kibanalink.core.errors import (
    InvalidConfigurationError,
    InvalidRequestError,
    KibanaLinkError,
    NotConfiguredError,
    UnknownDataSourceError,
)
from kibanalink.core.models import (
    AbsoluteTimeScope,
    GenerationRequest,
    RelativeTimeScope,
    Sort,
    SortDirection,
)

__all__ = [
    "AbsoluteTimeScope",
    "ConfigurationStore",
    "DiscoverUrlBuilder",
    "FrozenClock",
    "GenerationRequest",
    "InvalidConfigurationError",
    "InvalidRequestError",
    "KibanaLinkError",
    "MutableConfiguration",
    "NotConfiguredError",
    "RelativeTimeScope",
    "Sort",
    "SortDirection",
    "SystemClock",
    "UnknownDataSourceError",
    "ViewerConfig",
    "configure",
    "generate",
    "is_configured",
]
