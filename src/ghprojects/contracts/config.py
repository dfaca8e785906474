"""Configuration contracts."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, model_validator

AUTH_MODES = frozenset({"env", "token"})

DEFAULT_TOKEN_VARIABLES: tuple[str, ...] = ("GITHUB_TOKEN", "GH_TOKEN")


class AppConfig(BaseModel):
    """Settings shared by every tool call.

    Attributes:
        auth: Token source, ``env`` or ``token``.
        token: Literal token, only allowed with ``auth="token"``.
        token_variables: Environment variables read in order when ``auth="env"``.
        default_organization: Organization login used when a tool input omits one.
        database_path: SQLite file backing the tracking store.
        api_url: GitHub REST base URL; GraphQL lives at ``{api_url}/graphql``.
    """

    auth: str = "env"
    token: str | None = None
    token_variables: tuple[str, ...] = DEFAULT_TOKEN_VARIABLES
    default_organization: str | None = None
    database_path: Path = Path("ghprojects.db")
    api_url: str = "https://api.github.com"

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_auth_token(self) -> AppConfig:
        if self.auth not in AUTH_MODES:
            raise ValueError("auth must be one of: env, token")
        token = (self.token or "").strip()
        if self.auth == "token" and not token:
            raise ValueError("token auth requires a non-empty token")
        if self.auth != "token" and token:
            raise ValueError("token must be unset when auth is not 'token'")
        if self.auth == "env" and not any(name.strip() for name in self.token_variables):
            raise ValueError("env auth requires at least one token variable")
        return self

    @property
    def graphql_url(self) -> str:
        return f"{self.api_url.rstrip('/')}/graphql"
