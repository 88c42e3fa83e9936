import pytest
from src.cli.dispatch import (
	UNIMPLEMENTED, NOT_IMPLEMENTED_MSG, DispatchConfig, DispatchError, RegistryError,
	SubcommandRegistry, dispatch_subcommand, resolve_route,
)
from src.lib.exit_codes import OK, NOT_IMPLEMENTED

HELP = 'Usage: prog COMMAND\n'

class Recorder:
	def __init__(self, code=0):
		self.calls = []
		self.code = code

	def __call__(self, argv):
		self.calls.append(argv)
		return self.code

@pytest.fixture
def handlers():
	return {'scan': Recorder(), 'login': Recorder(3), 'ci': Recorder()}

@pytest.fixture
def registry(handlers):
	return SubcommandRegistry({**handlers, 'lsp': UNIMPLEMENTED, 'publish': UNIMPLEMENTED})

@pytest.fixture
def config():
	return DispatchConfig(help_text=HELP)

def test_no_arguments_runs_default(registry, config):
	route = resolve_route(['semgrep'], registry, config)
	assert route.subcommand == 'scan'
	assert route.args == ()
	assert route.argv == ('semgrep-scan',)

def test_known_subcommand_gets_tail(registry, config):
	route = resolve_route(['semgrep', 'login', '--token', 'abc'], registry, config)
	assert route.subcommand == 'login'
	assert route.args == ('--token', 'abc')
	assert route.argv == ('semgrep-login', '--token', 'abc')

@pytest.mark.parametrize('first', ['--config', '', 'src/', 'SCAN', 'log', '-h'])
def test_unknown_first_token_kept_for_default(registry, config, first):
	route = resolve_route(['semgrep', first, 'auto'], registry, config)
	assert route.subcommand == 'scan'
	assert route.args == (first, 'auto')
	assert route.argv == ('semgrep-scan', first, 'auto')

def test_help_flag_later_in_argv_goes_to_subcommand(registry, config, handlers):
	assert dispatch_subcommand(['semgrep', '-h', 'x'], registry, config) == 0
	assert handlers['scan'].calls == [['semgrep-scan', '-h', 'x']]

def test_route_is_deterministic(registry, config):
	argv = ['semgrep', '--config', 'auto', 'src']
	assert resolve_route(argv, registry, config) == resolve_route(argv, registry, config)

def test_input_argv_not_mutated(registry, config):
	argv = ['semgrep', 'ci', '--json']
	dispatch_subcommand(argv, registry, config)
	assert argv == ['semgrep', 'ci', '--json']

def test_handler_exit_code_passed_through(registry, config, handlers):
	assert dispatch_subcommand(['semgrep', 'login', '--token', 'abc'], registry, config) == 3
	assert handlers['login'].calls == [['semgrep-login', '--token', 'abc']]
	assert handlers['scan'].calls == []

@pytest.mark.parametrize('flag', ['-h', '--help'])
def test_help_prints_text_without_lookup(flag, config, capsys):
	class Exploding(SubcommandRegistry):
		def lookup(self, name):
			raise AssertionError('lookup during help')
	reg = Exploding({'scan': Recorder()})
	assert dispatch_subcommand(['semgrep', flag], reg, config) == OK
	out = capsys.readouterr()
	assert out.out == HELP
	assert out.err == ''

def test_unimplemented_subcommand(registry, config, handlers, capsys):
	assert dispatch_subcommand(['semgrep', 'lsp', '--stdio'], registry, config) == NOT_IMPLEMENTED
	out = capsys.readouterr()
	assert out.err == NOT_IMPLEMENTED_MSG + '\n'
	assert out.out == ''
	assert all(not h.calls for h in handlers.values())

def test_empty_argv_is_fatal(registry, config):
	with pytest.raises(DispatchError):
		dispatch_subcommand([], registry, config)
	with pytest.raises(DispatchError):
		resolve_route([], registry, config)

def test_custom_separator(registry):
	cfg = DispatchConfig(help_text=HELP, separator='_')
	assert resolve_route(['tool'], registry, cfg).argv == ('tool_scan',)

def test_lookup_outside_closed_set(registry):
	assert not registry.is_known('shouldafound')
	with pytest.raises(RegistryError):
		registry.lookup('shouldafound')

def test_default_must_be_registered():
	reg = SubcommandRegistry({'login': Recorder()})
	with pytest.raises(RegistryError):
		DispatchConfig(help_text=HELP).check(reg)

def test_registry_rejects_non_callable():
	with pytest.raises(RegistryError):
		SubcommandRegistry({'scan': 'not a handler'})

def test_registry_names_keep_order(registry):
	assert registry.names == ('scan', 'login', 'ci', 'lsp', 'publish')
	assert registry.unimplemented() == ('lsp', 'publish')
