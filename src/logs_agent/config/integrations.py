# src/logs_agent/config/integrations.py
"""
Integration configuration loader for the logs agent.

Every `*.yaml` file of the conf.d directory describes the log sources of one
integration. All files are loaded, each source is validated, its processing
rules are compiled and its tags payload is built, then the aggregated list is
published in a SettingsStore under LOGS_RULES.

Directory structure:
```
conf.d/
  nginx.yaml
  redis.yaml
  datadog.yaml   <- deprecated agent config, skipped
```
"""
import re
import yaml
import logging
from pathlib import Path
from typing import List, Optional, Union
from pydantic import ValidationError

from .. import DEPRECATED_CONFIG
from ..exceptions import ConfigError
from .models import (
    IntegrationConfig, LogSource, ProcessingRule,
    FILE_TYPE, TCP_TYPE, UDP_TYPE, SOURCE_TYPES,
    EXCLUDE_AT_MATCH, MASK_SEQUENCES, LOGS_RULES,
)
from .registry import SettingsStore

logger = logging.getLogger(__name__)

CONFIG_EXTENSION = ".yaml"


def available_integration_configs(conf_path: Union[str, Path], deprecated_config: str = DEPRECATED_CONFIG) -> List[str]:
    """
    List the integration config names (file names without extension) in conf_path.

    Only `.yaml` files are considered and the deprecated agent config is skipped.
    A missing directory yields no integrations; any other listing failure is raised.
    """
    conf_dir = Path(conf_path)
    try:
        entries = sorted(conf_dir.iterdir())
    except FileNotFoundError:
        logger.warning(f"Integrations config directory not found: {conf_dir}")
        return []
    except OSError as e:
        raise ConfigError(
            f"Could not list integrations config directory '{conf_dir}': {e}",
            context={"path": str(conf_dir)},
        ) from e

    names = []
    for entry in entries:
        if entry.suffix == CONFIG_EXTENSION and entry.stem != deprecated_config:
            names.append(entry.stem)
    return names


def validate_source(source: LogSource) -> None:
    """Check the source type and the field its type requires."""
    if source.type not in SOURCE_TYPES:
        raise ConfigError(f"A source must have a valid type (got {source.type})")

    if source.type == FILE_TYPE and source.path == "":
        raise ConfigError("A file source must have a path")

    if source.type == TCP_TYPE and source.port == 0:
        raise ConfigError("A tcp source must have a port")

    if source.type == UDP_TYPE and source.port == 0:
        raise ConfigError("A udp source must have a port")


def validate_processing_rules(rules: List[ProcessingRule]) -> List[ProcessingRule]:
    """
    Check the rules and raise an error on the first misconfigured one.

    Patterns are compiled with Python's `re` module, so they follow its syntax:
    lookarounds and backreferences are accepted, RE2 syntax that `re` lacks,
    such as the `\\pL` Unicode class, is rejected as invalid.

    Returns:
        New rules carrying the compiled pattern (and placeholder bytes for
        mask_sequences), in the same order.
    """
    compiled = []
    for rule in rules:
        if rule.name == "":
            raise ConfigError("LogsAgent misconfigured: all log processing rules need a name")

        if rule.type not in (EXCLUDE_AT_MATCH, MASK_SEQUENCES):
            if rule.type == "":
                raise ConfigError(
                    f"LogsAgent misconfigured: type must be set for log processing rule `{rule.name}`",
                    context={"rule": rule.name},
                )
            raise ConfigError(
                f"LogsAgent misconfigured: type {rule.type} is unsupported for log processing rule `{rule.name}`",
                context={"rule": rule.name},
            )

        try:
            reg = re.compile(rule.pattern)
        except re.error as e:
            raise ConfigError(
                f"LogsAgent misconfigured: invalid pattern for log processing rule `{rule.name}`: {e}",
                context={"rule": rule.name, "pattern": rule.pattern},
            ) from e

        update = {"reg": reg}
        if rule.type == MASK_SEQUENCES:
            update["replace_placeholder_bytes"] = rule.replace_placeholder.encode("utf-8")
        compiled.append(rule.model_copy(update=update))
    return compiled


def build_tags_payload(config_tags: str, source: str, source_category: str) -> bytes:
    """
    Build the bytes inserted into every message of a source.

    Order is fixed: source, source category, then tags. A source without any
    of them gets the single byte `-`.
    """
    tags_payload = bytearray()
    if source != "":
        tags_payload += b'[dd ddsource="' + source.encode("utf-8") + b'"]'

    if source_category != "":
        tags_payload += b'[dd ddsourcecategory="' + source_category.encode("utf-8") + b'"]'

    if config_tags != "":
        tags_payload += b'[dd ddtags="' + config_tags.encode("utf-8") + b'"]'

    if not tags_payload:
        return b"-"

    return bytes(tags_payload)


class IntegrationsConfigLoader:
    """
    Loads and validates the log sources of every integration config in a directory.

    Loading is fail-fast: the first unreadable file or invalid source aborts
    the whole load and nothing is returned.
    """

    def __init__(self, conf_path: Union[str, Path], deprecated_config: str = DEPRECATED_CONFIG):
        self.dir = Path(conf_path)
        self.deprecated_config = deprecated_config

    def discover(self) -> List[str]:
        """Names of the integration configs to load, in load order."""
        return available_integration_configs(self.dir, self.deprecated_config)

    def load_file(self, name: str) -> IntegrationConfig:
        """Parse `<name>.yaml` into an IntegrationConfig."""
        path = self.dir / f"{name}{CONFIG_EXTENSION}"
        try:
            # Read as bytes so the YAML reader reports undecodable content itself
            with open(path, "rb") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(
                f"Failed to read integration config '{path}': {e}",
                context={"file": str(path)},
            ) from e

        if not isinstance(data, dict):
            raise ConfigError(
                f"Integration config '{path}' must be a mapping, got {type(data).__name__}",
                context={"file": str(path)},
            )

        try:
            return IntegrationConfig.model_validate(data)
        except ValidationError as e:
            raise ConfigError(
                f"Failed to parse integration config '{path}': {e}",
                context={"file": str(path)},
            ) from e

    def load_and_validate(self) -> List[LogSource]:
        """
        Load every integration config and return all of their log sources,
        validated and enriched, in file then declaration order.
        """
        logs_sources: List[LogSource] = []

        for name in self.discover():
            try:
                integration_config = self.load_file(name)
            except ConfigError as e:
                logger.error(f"Failed to load integration config '{name}': {e}")
                raise
            logger.debug(f"Loaded integration config '{name}' with {len(integration_config.logs)} log sources")

            for source in integration_config.logs:
                try:
                    validate_source(source)
                    rules = validate_processing_rules(source.processing_rules)
                except ConfigError as e:
                    logger.error(f"Invalid log source in integration config '{name}': {e}")
                    e.context.setdefault("integration", name)
                    raise

                tags_payload = build_tags_payload(source.tags, source.source, source.source_category)
                logs_sources.append(source.model_copy(update={
                    "processing_rules": rules,
                    "tags_payload": tags_payload,
                }))

        logger.info(f"Loaded {len(logs_sources)} log sources from {self.dir}")
        return logs_sources


def build_logs_agent_integrations_config(
    store: SettingsStore,
    conf_path: Union[str, Path],
    deprecated_config: Optional[str] = None,
) -> List[LogSource]:
    """
    Build the log sources of all integration configs in conf_path and store
    them in `store` under LOGS_RULES, replacing any previous value.

    The store is only updated when every file and source is valid.
    """
    if deprecated_config is None:
        deprecated_config = DEPRECATED_CONFIG
    loader = IntegrationsConfigLoader(conf_path, deprecated_config)
    logs_sources = loader.load_and_validate()
    store.set(LOGS_RULES, logs_sources)
    return logs_sources
