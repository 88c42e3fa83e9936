"""Process-level setup performed before any subcommand runs."""
from __future__ import annotations
import logging, os, platform, signal, subprocess, sys
from config.settings import IN_DOCKER_ENV, UNSUPPORTED_MACHINES, LOG_LEVEL_ENV, LOG_LEVEL, LOG_FORMAT
from .exit_codes import FATAL

log = logging.getLogger(__name__)

def log_level() -> int:
	"""Level named by SEMGREP_LOG_LEVEL; unknown names fall back to WARNING."""
	level = logging.getLevelName(os.environ.get(LOG_LEVEL_ENV, LOG_LEVEL).upper())
	return level if isinstance(level, int) else logging.WARNING

def configure_logging() -> None:
	logging.basicConfig(level=log_level(), format=LOG_FORMAT, stream=sys.stderr)

def ignore_sigxfsz() -> None:
	"""Ignore SIGXFSZ so oversized writes fail with EFBIG instead of killing us."""
	sig = getattr(signal, 'SIGXFSZ', None)
	if sig is not None:
		signal.signal(sig, signal.SIG_IGN)

def abort_if_linux_arm64() -> None:
	"""Exit with FATAL when running on Linux ARM64."""
	if platform.machine() in UNSUPPORTED_MACHINES and platform.system() == 'Linux':
		log.error('Semgrep does not support Linux ARM64')
		raise SystemExit(FATAL)

def in_docker() -> bool:
	return os.environ.get(IN_DOCKER_ENV) == '1'

def maybe_set_git_safe_directories() -> None:
	"""Configure git to run in any directory when we're in Docker.

	In Docker every path is trusted: the user explicitly mounts their code
	directory and the image provides the rest.
	"""
	if not in_docker():
		return
	try:
		# "*" rather than cwd in case the user targets an absolute path
		subprocess.run(['git', 'config', '--global', '--add', 'safe.directory', '*'], check=True, capture_output=True)
	except (OSError, subprocess.CalledProcessError) as e:
		log.info(f'Semgrep failed to set the safe.directory Git config option. Git commands might fail: {e}')
