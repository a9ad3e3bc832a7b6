"""
Logs Agent Exceptions.

Configuration problems are raised as exceptions and are fatal to the load
that triggered them. Library errors (YAML, pydantic, regex, I/O) are wrapped
so callers only need to handle this hierarchy.
"""
from typing import Optional, Any, Dict


class LogsAgentException(Exception):
    """Base exception for all logs agent errors."""

    def __init__(self, detail: str = "An error occurred", context: Optional[Dict[str, Any]] = None):
        self.detail = detail
        self.context = context or {}
        super().__init__(detail)


class ConfigError(LogsAgentException):
    """Raised when an integration config cannot be read, parsed or validated."""

    def __init__(self, detail: str = "Configuration error", context: Optional[Dict[str, Any]] = None):
        super().__init__(detail=detail, context=context)


class ConfigNotLoadedError(LogsAgentException):
    """Raised when log sources are read from a store that was never populated."""

    def __init__(self, detail: str = "Logs sources have not been loaded", context: Optional[Dict[str, Any]] = None):
        super().__init__(detail=detail, context=context)
