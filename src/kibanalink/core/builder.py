"""Builds Discover deep links from a GenerationRequest and a ViewerConfig."""

import logging

from kibanalink.adapters.clock import SystemClock
from kibanalink.core.config import ViewerConfig
from kibanalink.core.encoding.rison import encode_url
from kibanalink.core.errors import NotConfiguredError, UnknownDataSourceError
from kibanalink.core.models import GenerationRequest, ResolvedRequest
from kibanalink.core.ports import ClockPort
from kibanalink.core.timescope import resolve_time_scope

logger = logging.getLogger(__name__)


class DiscoverUrlBuilder:
    """Generates viewer Discover URLs for a fixed configuration.

    The builder holds no mutable state, so one instance can be shared across
    threads.

    Example:
        ```python
        config = ViewerConfig(
            base_url="https://kibana.example.net/app/kibana",
            data_sources={"app": "application-logs-*"},
        )
        builder = DiscoverUrlBuilder(config)
        url = builder.generate(GenerationRequest(query="status:500"))
        ```
    """

    def __init__(self, config: ViewerConfig, clock: ClockPort | None = None) -> None:
        """Initialize the builder.

        Args:
            config: Viewer base URL and data sources.
            clock: Source of the current instant (default: SystemClock).
        """
        self._config = config
        self._clock = clock or SystemClock()

    @property
    def config(self) -> ViewerConfig:
        """The configuration URLs are generated from."""
        return self._config

    def resolve(self, request: GenerationRequest | None = None) -> ResolvedRequest:
        """Fill in every default of a request.

        The clock is read exactly once per call.

        Raises:
            NotConfiguredError: If the config lacks a base URL or data sources.
            UnknownDataSourceError: If the requested data source is not configured.
            InvalidRequestError: If the resolved time window is inverted.
        """
        if not self._config.is_configured:
            raise NotConfiguredError()
        request = request or GenerationRequest()

        name = request.data_source
        if name is None:
            name = self._config.default_data_source
        try:
            index_pattern = self._config.data_sources[name]
        except KeyError:
            logger.debug("rejected request for unknown data source %r", name)
            known = list(self._config.data_sources)
            raise UnknownDataSourceError(name, known) from None

        time_window = resolve_time_scope(request.time_scope, self._clock.now())
        return ResolvedRequest(
            index_pattern=index_pattern,
            columns=tuple(request.columns),
            query=request.query,
            sort=request.sort,
            refresh_interval=request.refresh_interval,
            time_window=time_window,
        )

    def generate(self, request: GenerationRequest | None = None) -> str:
        """Generate the Discover URL for a request.

        Args:
            request: Search parameters. None uses every default.

        Returns:
            The complete URL.
        """
        url = encode_url(self._config.base_url, self.resolve(request))
        logger.debug("generated discover url: %s", url)
        return url
