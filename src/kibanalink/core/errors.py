"""Error types raised while building viewer URLs.

Every error is raised before any URL text is assembled, so a caller never
receives a partially built link.
"""


class KibanaLinkError(Exception):
    """Base class for all kibanalink errors."""


class NotConfiguredError(KibanaLinkError):
    """Raised when a URL is requested before base URL and data sources are set."""

    def __init__(self, message: str | None = None) -> None:
        super().__init__(
            message
            or "kibanalink is not configured: base_url and data_sources are required"
        )


class UnknownDataSourceError(KibanaLinkError, KeyError):
    """Raised when a request names a data source that is not configured.

    Attributes:
        name: The requested data source name.
        known: Names of the configured data sources.
    """

    def __init__(self, name: str, known: list[str]) -> None:
        self.name = name
        self.known = known
        super().__init__(f"unknown data source {name!r}; configured: {known}")

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return str(self.args[0])


class InvalidRequestError(KibanaLinkError, ValueError):
    """Raised when a request value would produce a malformed URL."""


class InvalidConfigurationError(KibanaLinkError, ValueError):
    """Raised when a configuration mapping has the wrong shape."""
