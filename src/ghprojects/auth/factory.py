"""Token resolver factory."""

from __future__ import annotations

import logging

from ghprojects.auth.base import TokenResolver
from ghprojects.auth.sources import ConfigTokenResolver, EnvTokenResolver
from ghprojects.contracts.config import AppConfig
from ghprojects.contracts.exceptions import AuthenticationError, ConfigError

logger = logging.getLogger(__name__)


def create_token_resolver(config: AppConfig) -> TokenResolver:
    if config.auth == "env":
        return EnvTokenResolver(variables=config.token_variables)
    if config.auth == "token":
        return ConfigTokenResolver(config)
    raise ConfigError(f"Unknown auth mode: {config.auth}")


def resolve_token(config: AppConfig) -> str | None:
    """Resolve the configured token, or ``None`` when it is unavailable.

    A missing token only disables the GitHub tools; tracking and metadata
    tools keep working, so the failure is logged rather than raised.
    """
    resolver = create_token_resolver(config)
    try:
        resolved = resolver.resolve()
    except AuthenticationError as exc:
        logger.warning("GitHub token unavailable (auth=%s): %s", config.auth, exc)
        return None
    logger.info("Using GitHub token from %s", resolved.source)
    return resolved.value
