"""Token sources selectable through ``AppConfig.auth``."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from ghprojects.auth.base import ResolvedToken, TokenResolver
from ghprojects.contracts.config import DEFAULT_TOKEN_VARIABLES, AppConfig
from ghprojects.contracts.exceptions import AuthenticationError


@dataclass(frozen=True)
class EnvTokenResolver(TokenResolver):
    """Reads the first non-blank variable out of ``variables``."""

    variables: tuple[str, ...] = DEFAULT_TOKEN_VARIABLES
    environ: Mapping[str, str] | None = None

    def resolve(self) -> ResolvedToken:
        env = os.environ if self.environ is None else self.environ
        for name in self.variables:
            value = (env.get(name) or "").strip()
            if value:
                return ResolvedToken(value, source=f"env:{name}")
        raise AuthenticationError(f"No GitHub token in environment (checked {', '.join(self.variables)})")


@dataclass(frozen=True)
class ConfigTokenResolver(TokenResolver):
    """Uses the token written in the config file."""

    config: AppConfig

    def resolve(self) -> ResolvedToken:
        token = (self.config.token or "").strip()
        if not token:
            raise AuthenticationError("Config file token is empty")
        return ResolvedToken(token, source="config")
