"""Project configuration settings.

Only constants required by the dispatcher and its handlers are kept here.
Paths and levels that tests override through the environment are resolved
at use time, not at import.
"""

from pathlib import Path

# Dispatch
DEFAULT_SUBCOMMAND = "scan"
SUBCOMMAND_SEPARATOR = "-"

# Handlers
DEFAULT_SCAN_CONFIG = "auto"
DEFAULT_CI_CONFIG = "policy"
DEFAULT_SCAN_TARGET = "."

# Credentials
API_TOKEN_ENV = "SEMGREP_APP_TOKEN"
SETTINGS_FILE_ENV = "SEMGREP_SETTINGS_FILE"
DEFAULT_SETTINGS_PATH = Path.home() / ".semgrep" / "settings.json"
SETTINGS_TOKEN_KEY = "api_token"

# Runtime environment
IN_DOCKER_ENV = "SEMGREP_IN_DOCKER"
UNSUPPORTED_MACHINES = {"arm64", "aarch64"}

# Logging
LOG_LEVEL_ENV = "SEMGREP_LOG_LEVEL"
LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"

__all__ = [
	'DEFAULT_SUBCOMMAND','SUBCOMMAND_SEPARATOR','DEFAULT_SCAN_CONFIG','DEFAULT_CI_CONFIG','DEFAULT_SCAN_TARGET',
	'API_TOKEN_ENV','SETTINGS_FILE_ENV','DEFAULT_SETTINGS_PATH','SETTINGS_TOKEN_KEY',
	'IN_DOCKER_ENV','UNSUPPORTED_MACHINES','LOG_LEVEL_ENV','LOG_LEVEL','LOG_FORMAT'
]
