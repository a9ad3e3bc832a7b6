"""
Settings store shared between the config loader and the log pipeline.

The store is created by the caller and handed to both sides, so the order
"load, then read" is fixed by whoever owns it rather than by import order.
"""
from typing import Any, Dict, Iterator, List, Optional

from ..exceptions import ConfigError, ConfigNotLoadedError
from .models import LogSource, LOGS_RULES


class SettingsStore:
    """A named key/value settings store."""

    def __init__(self, name: str = "logs_agent"):
        self.name = name
        self._settings: Dict[str, Any] = {}

    def set(self, key: str, value: Any) -> None:
        """Store a value, replacing any previous one."""
        self._settings[key] = value

    def get(self, key: str, default: Optional[Any] = None) -> Any:
        return self._settings.get(key, default)

    def is_set(self, key: str) -> bool:
        return key in self._settings

    def __contains__(self, key: str) -> bool:
        return self.is_set(key)

    def __iter__(self) -> Iterator[str]:
        return iter(self._settings)


def get_logs_sources(store: SettingsStore) -> List[LogSource]:
    """
    Return the log sources stored by build_logs_agent_integrations_config.

    Raises:
        ConfigNotLoadedError: the integrations config was never built into this store.
        ConfigError: the stored value is not a list of LogSource.
    """
    if not store.is_set(LOGS_RULES):
        raise ConfigNotLoadedError(
            f"No log sources in store '{store.name}', integrations config must be built first",
            context={"store": store.name, "key": LOGS_RULES},
        )

    sources = store.get(LOGS_RULES)
    if not isinstance(sources, list) or not all(isinstance(s, LogSource) for s in sources):
        raise ConfigError(
            f"Unexpected value stored under '{LOGS_RULES}': {type(sources).__name__}",
            context={"store": store.name, "key": LOGS_RULES},
        )
    return sources
