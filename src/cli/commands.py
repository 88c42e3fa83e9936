"""Subcommand handlers implemented with click.

Each subcommand is an independent click command. The dispatcher calls the
`*_main(argv)` wrappers with `argv[0]` set to `<program>-<subcommand>`, so
click's usage and error messages name the subcommand program.
"""
from __future__ import annotations
import json, logging, click
from typing import List, Sequence
from config.settings import DEFAULT_SCAN_CONFIG, DEFAULT_CI_CONFIG, DEFAULT_SCAN_TARGET, API_TOKEN_ENV
from src.lib.auth import AuthError, validate_token, mask_token
from src.lib.exit_codes import OK, FINDINGS, FATAL, INVALID_API_KEY
from src.lib.utils import SettingsStore, StorageError, resolve_token

log = logging.getLogger(__name__)

def run_command(command: click.Command, argv: Sequence[str]) -> int:
	"""Run a click command as a standalone program and return its exit code."""
	try:
		rv = command.main(args=list(argv[1:]), prog_name=argv[0], standalone_mode=False)
	except click.ClickException as e:
		e.show()
		return e.exit_code
	except click.Abort:
		click.echo('Aborted!', err=True)
		return FINDINGS
	# callbacks without an explicit return
	return OK if rv is None else rv

def _report(kind: str, configs: Sequence[str], targets: Sequence[str], as_json: bool) -> None:
	log.info('%s request: configs=%s targets=%s', kind, list(configs), list(targets))
	if as_json:
		click.echo(json.dumps({'subcommand': kind, 'configs': list(configs), 'targets': list(targets)}))
	else:
		click.echo(f"{kind}: {len(targets)} target(s) with config {', '.join(configs)}")

@click.command()
@click.option('--config', '-c', 'configs', multiple=True, help='Rule configuration (file, directory, registry name or `auto`).')
@click.option('--json', 'as_json', is_flag=True, help='Output the resolved request as JSON.')
@click.argument('targets', nargs=-1)
def scan(configs, as_json, targets):
	"""Run semgrep rules on files."""
	configs = configs or (DEFAULT_SCAN_CONFIG,)
	targets = targets or (DEFAULT_SCAN_TARGET,)
	_report('scan', configs, targets, as_json)
	return OK

@click.command()
@click.option('--config', '-c', 'configs', multiple=True, help='Rule configuration to use instead of the project policy.')
@click.option('--json', 'as_json', is_flag=True, help='Output the resolved request as JSON.')
def ci(configs, as_json):
	"""The recommended way to run semgrep in CI."""
	try:
		token = resolve_token()
	except StorageError as e:
		click.echo(f'Error: {e}', err=True)
		return FATAL
	if not token and not configs:
		click.echo(f'run `semgrep login` or set {API_TOKEN_ENV}, or pass --config', err=True)
		return INVALID_API_KEY
	if token:
		log.info('Running with token %s', mask_token(token))
	configs = configs or (DEFAULT_CI_CONFIG,)
	_report('ci', configs, (DEFAULT_SCAN_TARGET,), as_json)
	return OK

@click.command()
@click.option('--token', envvar=API_TOKEN_ENV, prompt='API token', hide_input=True, help='semgrep.dev API token.')
@click.option('--force', is_flag=True, help='Replace an existing token.')
def login(token, force):
	"""Obtain and save credentials for semgrep.dev."""
	store = SettingsStore()
	try:
		validate_token(token)
		if store.get_token() and not force:
			click.echo(f'API token already exists in {store.path}. To login with a different token use `semgrep logout` or --force', err=True)
			return FATAL
		store.set_token(token)
	except (AuthError, StorageError) as e:
		click.echo(f'Error: {e}', err=True)
		return FATAL
	click.echo(f'Saved login token\n\n\t{mask_token(token)}\n\nin {store.path}.')
	return OK

@click.command()
def logout():
	"""Remove locally stored credentials to semgrep.dev."""
	try:
		SettingsStore().clear_token()
	except StorageError as e:
		click.echo(f'Error: {e}', err=True)
		return FATAL
	click.echo('Logged out (log back in with `semgrep login`)')
	return OK

def scan_main(argv: List[str]) -> int:
	return run_command(scan, argv)

def ci_main(argv: List[str]) -> int:
	return run_command(ci, argv)

def login_main(argv: List[str]) -> int:
	return run_command(login, argv)

def logout_main(argv: List[str]) -> int:
	return run_command(logout, argv)
