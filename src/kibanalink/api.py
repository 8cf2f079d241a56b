"""Process-wide convenience API.

Configure once at startup, then generate links from anywhere::

    import kibanalink

    def setup(config):
        config.base_url = "https://kibana.example.net/app/kibana"
        config.data_sources = {"app": "application-logs-*", "aws": "cloudtrail-*"}

    kibanalink.configure(setup)
    url = kibanalink.generate(data_source="aws", query="eventName:DeleteBucket")

Code that can pass a ViewerConfig around should use DiscoverUrlBuilder
directly instead.
"""

from collections.abc import Callable
from typing import Any

from kibanalink.core.builder import DiscoverUrlBuilder
from kibanalink.core.config import ConfigurationStore, MutableConfiguration
from kibanalink.core.errors import InvalidRequestError
from kibanalink.core.models import GenerationRequest
from kibanalink.core.ports import ClockPort

default_store = ConfigurationStore()


def configure(mutator: Callable[[MutableConfiguration], None]) -> None:
    """Apply a mutator to the process-wide configuration."""
    default_store.configure(mutator)


def is_configured() -> bool:
    """True when the process-wide configuration can generate URLs."""
    return default_store.is_configured()


def generate(
    request: GenerationRequest | None = None,
    *,
    clock: ClockPort | None = None,
    **fields: Any,
) -> str:
    """Generate a Discover URL using the process-wide configuration.

    Args:
        request: Prepared request. Mutually exclusive with ``fields``.
        clock: Optional clock override, mainly for tests.
        **fields: GenerationRequest fields, e.g. ``query="foo"``.

    Raises:
        NotConfiguredError: If configure() has not set a base URL and data sources.
        InvalidRequestError: If both a request and fields are given, or a
            field is unknown or malformed.
    """
    if request is not None and fields:
        raise InvalidRequestError("pass either a request or keyword fields, not both")
    if request is None:
        try:
            request = GenerationRequest(**fields)
        except TypeError as exc:
            raise InvalidRequestError(str(exc)) from exc
    return DiscoverUrlBuilder(default_store.snapshot(), clock=clock).generate(request)
