"""Viewer configuration: base URL and named data sources.

A ``ViewerConfig`` is immutable and is handed to the builder directly.
``ConfigurationStore`` keeps a replaceable snapshot for callers that prefer
to configure once at startup and generate from anywhere afterwards.
"""

import logging
import threading
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from kibanalink.core.errors import InvalidConfigurationError

logger = logging.getLogger(__name__)

# Key names accepted by ViewerConfig.from_mapping, preferred name first
_BASE_URL_KEYS = ("base_url", "kibana_base_url")
_DATA_SOURCE_KEYS = ("data_sources", "index_patterns")


@dataclass(frozen=True)
class ViewerConfig:
    """Immutable viewer configuration.

    Attributes:
        base_url: Root URL of the viewer app, embedded verbatim.
        data_sources: Data source name to index pattern, in insertion order.
            Patterns are embedded verbatim.
    """

    base_url: str = ""
    data_sources: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not isinstance(self.base_url, str):
            raise InvalidConfigurationError("base_url must be a string")
        if not isinstance(self.data_sources, Mapping):
            raise InvalidConfigurationError("data_sources must be a mapping")
        for name, pattern in self.data_sources.items():
            if not isinstance(name, str) or not isinstance(pattern, str):
                raise InvalidConfigurationError(
                    f"data source {name!r} must map a string name to a string pattern"
                )
        object.__setattr__(
            self, "data_sources", MappingProxyType(dict(self.data_sources))
        )

    @property
    def is_configured(self) -> bool:
        """True when both a base URL and at least one data source are set."""
        return bool(self.base_url) and bool(self.data_sources)

    @property
    def default_data_source(self) -> str | None:
        """Name of the first configured data source, or None."""
        return next(iter(self.data_sources), None)

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "ViewerConfig":
        """Build a config from a plain mapping such as parsed JSON or TOML.

        Both ``base_url``/``data_sources`` and the older
        ``kibana_base_url``/``index_patterns`` key names are accepted.

        Raises:
            InvalidConfigurationError: If a value has the wrong type.
        """
        base_url = _first_present(mapping, _BASE_URL_KEYS, "")
        data_sources = _first_present(mapping, _DATA_SOURCE_KEYS, {})
        return cls(base_url=base_url, data_sources=data_sources)


def _first_present(
    mapping: Mapping[str, Any], keys: tuple[str, ...], default: Any
) -> Any:
    for key in keys:
        if key in mapping:
            return mapping[key]
    return default


@dataclass
class MutableConfiguration:
    """Scratch configuration handed to ConfigurationStore.configure mutators."""

    base_url: str = ""
    data_sources: dict[str, str] = field(default_factory=dict)

    def freeze(self) -> ViewerConfig:
        """Return an immutable copy."""
        return ViewerConfig(base_url=self.base_url, data_sources=self.data_sources)


class ConfigurationStore:
    """Holds the current ViewerConfig and swaps it atomically on reconfigure.

    Example:
        ```python
        store = ConfigurationStore()

        def setup(config: MutableConfiguration) -> None:
            config.base_url = "https://kibana.example.net/app/kibana"
            config.data_sources["app"] = "application-logs-*"

        store.configure(setup)
        ```
    """

    def __init__(self, config: ViewerConfig | None = None) -> None:
        self._config = config or ViewerConfig()
        self._lock = threading.RLock()

    def configure(self, mutator: Callable[[MutableConfiguration], None]) -> None:
        """Apply a mutator to a copy of the current config and store the result.

        The mutator starts from the current values, so later calls may
        overwrite fields set by earlier ones. It may read the store; it sees
        the configuration as it was before this call.

        Args:
            mutator: Callable that assigns fields on the MutableConfiguration.
        """
        with self._lock:
            draft = MutableConfiguration(
                base_url=self._config.base_url,
                data_sources=dict(self._config.data_sources),
            )
            mutator(draft)
            config = draft.freeze()
            self._config = config
        logger.info(
            "viewer configured: base_url=%s data_sources=%s",
            config.base_url,
            list(config.data_sources),
        )

    def is_configured(self) -> bool:
        """True when the current snapshot has a base URL and data sources."""
        return self.snapshot().is_configured

    def snapshot(self) -> ViewerConfig:
        """Return the current immutable configuration."""
        with self._lock:
            return self._config
