"""
Typed shapes of the per-integration YAML files.

Example integration file (conf.d/nginx.yaml):
```yaml
logs:
  - type: file
    path: /var/log/nginx/access.log
    service: nginx
    source: nginx
    source_category: http_web_access
    tags: env:prod
    log_processing_rules:
      - type: exclude_at_match
        name: exclude_healthchecks
        pattern: GET /health
```
"""
import re
from typing import List, Optional, Any
from pydantic import BaseModel, Field, ConfigDict, AliasChoices, field_validator

# Source types
FILE_TYPE = "file"
TCP_TYPE = "tcp"
UDP_TYPE = "udp"
SOURCE_TYPES = (FILE_TYPE, TCP_TYPE, UDP_TYPE)

# Processing rule types
EXCLUDE_AT_MATCH = "exclude_at_match"
MASK_SEQUENCES = "mask_sequences"
PROCESSING_RULE_TYPES = (EXCLUDE_AT_MATCH, MASK_SEQUENCES)

# Registry key under which the validated sources are stored
LOGS_RULES = "LogsRules"


def _none_to_empty(v: Any) -> Any:
    # An empty YAML value (`path:`) is read as None
    return "" if v is None else v


class ProcessingRule(BaseModel):
    """An exclusion or masking rule applied to log lines of one source."""
    model_config = ConfigDict(extra='ignore', frozen=True, coerce_numbers_to_str=True)

    type: str = Field(default="", description="exclude_at_match or mask_sequences")
    name: str = Field(default="", description="Rule name, required")
    pattern: str = Field(default="", description="Regular expression matched against log lines")
    replace_placeholder: str = Field(default="", description="Replacement text for mask_sequences")

    # Filled in by validate_processing_rules
    reg: Optional[re.Pattern] = Field(default=None, exclude=True)
    replace_placeholder_bytes: Optional[bytes] = Field(default=None, exclude=True)

    @field_validator('type', 'name', 'pattern', 'replace_placeholder', mode='before')
    @classmethod
    def empty_strings(cls, v: Any) -> Any:
        return _none_to_empty(v)


class LogSource(BaseModel):
    """
    A log source config, which can be for instance a file to tail
    or a port to listen to.
    """
    model_config = ConfigDict(extra='ignore', frozen=True, populate_by_name=True, coerce_numbers_to_str=True)

    type: str = ""

    port: int = 0   # tcp, udp
    path: str = ""  # file

    service: str = ""
    logset: str = ""
    source: str = ""
    source_category: str = Field(
        default="",
        validation_alias=AliasChoices("source_category", "sourcecategory"),
        serialization_alias="source_category",
    )
    tags: str = ""
    processing_rules: List[ProcessingRule] = Field(default_factory=list, alias="log_processing_rules")

    # Filled in by the integrations loader
    tags_payload: bytes = Field(default=b"", exclude=True)

    @field_validator('type', 'path', 'service', 'logset', 'source', 'source_category', 'tags', mode='before')
    @classmethod
    def empty_strings(cls, v: Any) -> Any:
        return _none_to_empty(v)

    @field_validator('port', mode='before')
    @classmethod
    def empty_port(cls, v: Any) -> Any:
        return 0 if v is None else v

    @field_validator('processing_rules', mode='before')
    @classmethod
    def empty_rules(cls, v: Any) -> Any:
        return [] if v is None else v


class IntegrationConfig(BaseModel):
    """The content of one integration YAML file; only the logs part is read."""
    model_config = ConfigDict(extra='ignore')

    logs: List[LogSource] = Field(default_factory=list)

    @field_validator('logs', mode='before')
    @classmethod
    def empty_logs(cls, v: Any) -> Any:
        return [] if v is None else v
