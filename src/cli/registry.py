"""The semgrep subcommand table and top-level help text.

coupling: adding a subcommand means adding it to SUBCOMMANDS and to the
`Commands:` section of MAIN_HELP_MSG. tests/test_registry.py checks both.
"""
from __future__ import annotations
from src.cli.commands import ci_main, login_main, logout_main, scan_main
from src.cli.dispatch import UNIMPLEMENTED, DispatchConfig, SubcommandRegistry

# The help message used to be generated from the click group; it is now
# written by hand since there is no group.
MAIN_HELP_MSG = """\
Usage: semgrep [OPTIONS] COMMAND [ARGS]...

  To get started quickly, run `semgrep scan --config auto`

  Run `semgrep SUBCOMMAND --help` for more information on each subcommand

  If no subcommand is passed, will run `scan` subcommand by default

Options:
  -h, --help  Show this message and exit.

Commands:
  ci            The recommended way to run semgrep in CI
  login         Obtain and save credentials for semgrep.dev
  logout        Remove locally stored credentials to semgrep.dev
  lsp           [EXPERIMENTAL] Start the Semgrep LSP server
  publish       Upload rule to semgrep.dev
  scan          Run semgrep rules on files
  shouldafound  Report a false negative in this project.
"""

SUBCOMMANDS = {
	'ci': ci_main,
	'login': login_main,
	'logout': logout_main,
	'lsp': UNIMPLEMENTED,
	'publish': UNIMPLEMENTED,
	'scan': scan_main,
	'shouldafound': UNIMPLEMENTED,
}

DEFAULT_CONFIG = DispatchConfig(help_text=MAIN_HELP_MSG)

def build_registry() -> SubcommandRegistry:
	registry = SubcommandRegistry(SUBCOMMANDS)
	DEFAULT_CONFIG.check(registry)
	return registry
