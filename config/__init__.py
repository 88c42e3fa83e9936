"""Configuration settings and constants for the semgrep front-end.

The package-level module exposes the same constants as `config.settings`
so callers can write `from config import DEFAULT_SUBCOMMAND`. Constants are
defined once, in `settings.py`, and only re-exported here.
"""

from config.settings import (
	DEFAULT_SUBCOMMAND, SUBCOMMAND_SEPARATOR, DEFAULT_SCAN_CONFIG, DEFAULT_CI_CONFIG, DEFAULT_SCAN_TARGET,
	API_TOKEN_ENV, SETTINGS_FILE_ENV, DEFAULT_SETTINGS_PATH, SETTINGS_TOKEN_KEY,
	IN_DOCKER_ENV, UNSUPPORTED_MACHINES, LOG_LEVEL_ENV, LOG_LEVEL, LOG_FORMAT
)

__all__ = [
	'DEFAULT_SUBCOMMAND', 'SUBCOMMAND_SEPARATOR', 'DEFAULT_SCAN_CONFIG', 'DEFAULT_CI_CONFIG', 'DEFAULT_SCAN_TARGET',
	'API_TOKEN_ENV', 'SETTINGS_FILE_ENV', 'DEFAULT_SETTINGS_PATH', 'SETTINGS_TOKEN_KEY',
	'IN_DOCKER_ENV', 'UNSUPPORTED_MACHINES', 'LOG_LEVEL_ENV', 'LOG_LEVEL', 'LOG_FORMAT'
]
