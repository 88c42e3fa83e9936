"""Authentication helpers (validate & mask API tokens)."""
from __future__ import annotations

class AuthError(Exception):
	pass

def validate_token(token: str | None) -> str:
	if not token or not token.strip():
		raise AuthError('Empty token')
	if any(c.isspace() for c in token):
		raise AuthError('Token must not contain whitespace')
	return token

def mask_token(token: str) -> str:
	if len(token) <= 8:
		return '*' * len(token)
	return token[:4] + '*' * (len(token) - 8) + token[-4:]
