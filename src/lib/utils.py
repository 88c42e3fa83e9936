"""Utility layer: persisted CLI settings.

The settings file holds the API token written by `semgrep login` and read
back by `semgrep ci`; `semgrep logout` removes it.
"""
from __future__ import annotations
import json, os, logging
from pathlib import Path
from typing import Dict, Any, Optional
from config.settings import DEFAULT_SETTINGS_PATH, SETTINGS_FILE_ENV, SETTINGS_TOKEN_KEY, API_TOKEN_ENV
from .auth import validate_token, mask_token

log = logging.getLogger(__name__)

class StorageError(Exception): ...

class SettingsStore:
	def __init__(self, path: Path | None = None):
		# Resolve path dynamically to honor environment overrides in tests
		if path is not None:
			self.path = Path(path)
		else:
			env_path = os.environ.get(SETTINGS_FILE_ENV)
			self.path = Path(env_path) if env_path else DEFAULT_SETTINGS_PATH

	def exists(self) -> bool:
		return self.path.exists() and self.path.stat().st_size > 0

	def load(self) -> Dict[str, Any]:
		if not self.exists():
			return {}
		try:
			data = json.loads(self.path.read_text(encoding='utf-8'))
		except (OSError, ValueError) as e:
			raise StorageError(f'Unreadable settings file {self.path}: {e}') from e
		if not isinstance(data, dict):
			raise StorageError(f'Corrupt settings file {self.path}')
		return data

	def save(self, data: Dict[str, Any]) -> None:
		"""Persist settings atomically, creating the parent directory if needed."""
		tmp = self.path.with_suffix('.tmp')
		try:
			self.path.parent.mkdir(parents=True, exist_ok=True)
			tmp.write_text(json.dumps(data, indent=2, sort_keys=True), encoding='utf-8')
			os.replace(tmp, self.path)
		except OSError as e:
			tmp.unlink(missing_ok=True)
			raise StorageError(f'Cannot write settings file {self.path}: {e}') from e

	def get_token(self) -> Optional[str]:
		return self.load().get(SETTINGS_TOKEN_KEY)

	def set_token(self, token: str) -> None:
		validate_token(token)
		data = self.load()
		data[SETTINGS_TOKEN_KEY] = token
		self.save(data)
		log.info('Stored token %s in %s', mask_token(token), self.path)

	def clear_token(self) -> bool:
		"""Remove the stored token. Returns False when there was none."""
		data = self.load()
		if data.pop(SETTINGS_TOKEN_KEY, None) is None:
			return False
		self.save(data)
		log.info('Removed token from %s', self.path)
		return True

def resolve_token(store: SettingsStore | None = None) -> Optional[str]:
	"""Token from the environment first, then from the settings file."""
	env_token = os.environ.get(API_TOKEN_ENV)
	if env_token:
		return env_token
	return (store or SettingsStore()).get_token()
