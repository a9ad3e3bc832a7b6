import os
import logging
from dotenv import load_dotenv

from .exceptions import LogsAgentException, ConfigError, ConfigNotLoadedError

load_dotenv()

# Agent home directory; holds the log file and, by default, the conf.d directory.
CONFIG_DIR = os.getenv('LOGS_AGENT_CONFIG_DIR', "/etc/logs_agent")

# Directory scanned for per-integration YAML files.
CONFD_PATH = os.getenv('LOGS_AGENT_CONFD_PATH', os.path.join(CONFIG_DIR, "conf.d"))

# Base name of the legacy agent config file; it may sit next to the
# integration files but is never read as one.
DEPRECATED_CONFIG = os.getenv('LOGS_AGENT_DEPRECATED_CONFIG', "datadog")

logger = logging.getLogger("logs_agent")

__all__ = [
    "CONFIG_DIR",
    "CONFD_PATH",
    "DEPRECATED_CONFIG",
    "LogsAgentException",
    "ConfigError",
    "ConfigNotLoadedError",
]
