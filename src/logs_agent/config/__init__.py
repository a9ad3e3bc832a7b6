# src/logs_agent/config/__init__.py
"""
Integration configuration for the logs agent.

Config files:
- conf.d/*.yaml: one file per integration, each listing its log sources
"""
from .models import (
    ProcessingRule, LogSource, IntegrationConfig,
    FILE_TYPE, TCP_TYPE, UDP_TYPE,
    EXCLUDE_AT_MATCH, MASK_SEQUENCES, LOGS_RULES,
)
from .registry import SettingsStore, get_logs_sources
from .integrations import (
    IntegrationsConfigLoader,
    available_integration_configs,
    build_logs_agent_integrations_config,
    build_tags_payload,
    validate_processing_rules,
    validate_source,
)

__all__ = [
    # Models
    "ProcessingRule",
    "LogSource",
    "IntegrationConfig",
    "FILE_TYPE",
    "TCP_TYPE",
    "UDP_TYPE",
    "EXCLUDE_AT_MATCH",
    "MASK_SEQUENCES",
    "LOGS_RULES",
    # Store
    "SettingsStore",
    "get_logs_sources",
    # Loader
    "IntegrationsConfigLoader",
    "available_integration_configs",
    "build_logs_agent_integrations_config",
    "build_tags_payload",
    "validate_processing_rules",
    "validate_source",
]
