"""Process exit codes.

These values are relied on by external test suites and CI jobs; never
renumber them.
"""

OK = 0
FINDINGS = 1
# Any uncaught fault in dispatch or in the entry point. Handlers also return
# it for their own failures (bad token, unwritable settings), as semgrep
# always has; only NOT_IMPLEMENTED is reserved to the dispatcher.
FATAL = 2
INVALID_API_KEY = 13
# A proper implementation never returns this, so tests expecting FATAL fail.
NOT_IMPLEMENTED = 99

__all__ = ['OK', 'FINDINGS', 'FATAL', 'INVALID_API_KEY', 'NOT_IMPLEMENTED']
