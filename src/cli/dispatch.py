"""Subcommand dispatch.

Determines the subcommand invoked on the command line and hands control to
its handler as if it were an independent command. We don't use a click group
to dispatch because a group cannot fall back to the default subcommand when
the first argument is not a known subcommand name.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Callable, Dict, List, Mapping, Sequence, Tuple, Union
import click
from config.settings import DEFAULT_SUBCOMMAND, SUBCOMMAND_SEPARATOR
from src.lib.exit_codes import OK, NOT_IMPLEMENTED

log = logging.getLogger(__name__)

Handler = Callable[[List[str]], int]

HELP_FLAGS = ('-h', '--help')
NOT_IMPLEMENTED_MSG = 'This semgrep subcommand is not implemented'

class DispatchError(Exception): ...
class RegistryError(Exception): ...

class _Unimplemented:
	"""Registry marker for a subcommand name that is reserved but not wired."""

	def __repr__(self) -> str:
		return 'UNIMPLEMENTED'

UNIMPLEMENTED = _Unimplemented()

Entry = Union[Handler, _Unimplemented]

class SubcommandRegistry:
	"""Closed, ordered set of subcommand names and their handlers."""

	def __init__(self, entries: Mapping[str, Entry]):
		self._entries: Dict[str, Entry] = dict(entries)
		for name, entry in self._entries.items():
			if entry is not UNIMPLEMENTED and not callable(entry):
				raise RegistryError(f'Handler for {name!r} is not callable')

	@property
	def names(self) -> Tuple[str, ...]:
		return tuple(self._entries)

	def is_known(self, name: str) -> bool:
		return name in self._entries

	def lookup(self, name: str) -> Entry:
		try:
			return self._entries[name]
		except KeyError:
			# should have defaulted during routing
			raise RegistryError(f'No registry entry for subcommand {name!r}') from None

	def unimplemented(self) -> Tuple[str, ...]:
		return tuple(n for n, e in self._entries.items() if e is UNIMPLEMENTED)

@dataclass(frozen=True)
class DispatchConfig:
	help_text: str
	default_subcommand: str = DEFAULT_SUBCOMMAND
	separator: str = SUBCOMMAND_SEPARATOR

	def check(self, registry: SubcommandRegistry) -> None:
		if not registry.is_known(self.default_subcommand):
			raise RegistryError(f'Default subcommand {self.default_subcommand!r} is not registered')

@dataclass(frozen=True)
class Route:
	subcommand: str
	args: Tuple[str, ...]
	argv: Tuple[str, ...]

def is_help_request(argv: Sequence[str]) -> bool:
	return len(argv) == 2 and argv[1] in HELP_FLAGS

def resolve_route(argv: Sequence[str], registry: SubcommandRegistry, config: DispatchConfig) -> Route:
	"""Pick the effective subcommand and build its argument vector.

	An unrecognized first argument, even one that looks like a flag, is kept
	as the first argument of the default subcommand so that its own parser
	gets to reject it.
	"""
	if not argv:
		# argv[0] always holds the program name
		raise DispatchError('Empty argument vector')
	argv0, rest = argv[0], list(argv[1:])
	if not rest:
		subcmd, subcmd_args = config.default_subcommand, []
	elif registry.is_known(rest[0]):
		subcmd, subcmd_args = rest[0], rest[1:]
	else:
		subcmd, subcmd_args = config.default_subcommand, rest
	subcmd_argv0 = f'{argv0}{config.separator}{subcmd}'
	return Route(subcmd, tuple(subcmd_args), (subcmd_argv0, *subcmd_args))

def missing_subcommand() -> int:
	click.echo(NOT_IMPLEMENTED_MSG, err=True)
	return NOT_IMPLEMENTED

def dispatch_subcommand(argv: Sequence[str], registry: SubcommandRegistry, config: DispatchConfig) -> int:
	if is_help_request(argv):
		click.echo(config.help_text, nl=False)
		return OK
	route = resolve_route(argv, registry, config)
	log.debug('Dispatching %s with %r', route.subcommand, route.args)
	entry = registry.lookup(route.subcommand)
	if entry is UNIMPLEMENTED:
		return missing_subcommand()
	return entry(list(route.argv))
