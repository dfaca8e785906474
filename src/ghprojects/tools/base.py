"""Tool definition and the request-scoped context handed to every handler."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any

import httpx

from ghprojects.contracts.config import AppConfig
from ghprojects.contracts.exceptions import ConfigError, GitHubAPIError, ToolInputError
from ghprojects.contracts.tool import ToolCategory, WireModel
from ghprojects.github.client import GitHubClient
from ghprojects.persistence.tracking_store import TrackingStore

_MISSING_TOKEN = "GitHub token not configured. Please configure a GitHub Personal Access Token."
_MISSING_ORG = (
    "Organization login is required. Provide it in the input or set a default organization in the configuration."
)


@dataclass
class ToolContext:
    """Everything a handler may touch for one call.

    Attributes:
        config: Loaded application configuration.
        store: Tracking list store.
        token: Resolved GitHub token, ``None`` when unavailable.
        http_client: Optional shared httpx client (tests inject a mock transport here).
    """

    config: AppConfig
    store: TrackingStore
    token: str | None = None
    http_client: httpx.AsyncClient | None = None

    def github(self) -> GitHubClient:
        if not self.token:
            raise ConfigError(_MISSING_TOKEN)
        return GitHubClient(self.token, api_url=self.config.api_url, http_client=self.http_client)

    def organization_login(self, explicit: str | None) -> str:
        login = (explicit or "").strip() or (self.config.default_organization or "").strip()
        if not login:
            raise ToolInputError(_MISSING_ORG)
        return login


Handler = Callable[[Any, ToolContext], Awaitable[WireModel]]


@dataclass(frozen=True)
class Tool:
    id: str
    description: str
    category: ToolCategory
    input_model: type[WireModel]
    output_model: type[WireModel]
    handler: Handler

    def input_schema(self) -> dict[str, Any]:
        return self.input_model.model_json_schema(by_alias=True)

    def output_schema(self) -> dict[str, Any]:
        return self.output_model.model_json_schema(by_alias=True)


class EmptyInput(WireModel):
    """Input for tools that take no arguments."""


def require_dict(data: dict[str, Any], key: str, *, missing: str | None = None) -> dict[str, Any]:
    value = data.get(key)
    if not isinstance(value, dict):
        raise GitHubAPIError(missing or f"Missing/invalid object at key '{key}'")
    return value


def nodes(connection: dict[str, Any] | None) -> list[dict[str, Any]]:
    """Return the ``nodes`` list of a GraphQL connection, skipping nulls."""
    if not isinstance(connection, dict):
        return []
    return [node for node in connection.get("nodes") or [] if isinstance(node, dict)]
