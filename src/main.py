"""Program entry point.

Sets up the process, then lets the dispatcher pick and run a subcommand.
"""
from __future__ import annotations
import logging, sys
from typing import List, Optional
from src.cli.dispatch import dispatch_subcommand
from src.cli.registry import DEFAULT_CONFIG, build_registry
from src.lib.environment import configure_logging, ignore_sigxfsz, abort_if_linux_arm64, maybe_set_git_safe_directories
from src.lib.exit_codes import FATAL

log = logging.getLogger(__name__)

def main(argv: Optional[List[str]] = None) -> int:
	argv = list(sys.argv if argv is None else argv)
	try:
		configure_logging()
		ignore_sigxfsz()
		# SystemExit(FATAL) passes through
		abort_if_linux_arm64()
		maybe_set_git_safe_directories()
		return dispatch_subcommand(argv, build_registry(), DEFAULT_CONFIG)
	except Exception:
		log.exception('Unexpected error while running %r', argv)
		return FATAL

if __name__ == '__main__':  # pragma: no cover
	sys.exit(main())
