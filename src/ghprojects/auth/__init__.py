"""Auth module public exports."""

from ghprojects.auth.base import ResolvedToken, TokenResolver
from ghprojects.auth.factory import create_token_resolver, resolve_token
from ghprojects.auth.sources import ConfigTokenResolver, EnvTokenResolver

__all__ = [
    "ConfigTokenResolver",
    "EnvTokenResolver",
    "ResolvedToken",
    "TokenResolver",
    "create_token_resolver",
    "resolve_token",
]
