"""Shared test fixtures for ghprojects tests."""

from __future__ import annotations

import json
from collections.abc import AsyncIterator, Iterator
from pathlib import Path
from typing import Any

import httpx
import pytest
import pytest_asyncio

from ghprojects.contracts.config import AppConfig
from ghprojects.persistence import TrackingStore
from ghprojects.tools import ToolContext


class FakeGitHub:
    """Answers GitHub requests from a queue and records what was sent."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self._responses: list[httpx.Response] = []

    def reply(self, data: dict[str, Any]) -> None:
        self._responses.append(httpx.Response(200, json={"data": data}))

    def respond(self, response: httpx.Response) -> None:
        self._responses.append(response)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if not self._responses:
            raise AssertionError(f"unexpected request: {request.method} {request.url}")
        return self._responses.pop(0)

    def body(self, index: int = -1) -> dict[str, Any]:
        return json.loads(self.requests[index].read().decode("utf-8"))

    def variables(self, index: int = -1) -> dict[str, Any]:
        return self.body(index)["variables"]


@pytest.fixture
def config(tmp_path: Path) -> AppConfig:
    return AppConfig(default_organization="octo-org", database_path=tmp_path / "tracking.db")


@pytest.fixture
def store(config: AppConfig) -> Iterator[TrackingStore]:
    tracking_store = TrackingStore.open(config.database_path)
    yield tracking_store
    tracking_store.close()


@pytest.fixture
def github() -> FakeGitHub:
    return FakeGitHub()


@pytest_asyncio.fixture
async def http_client(github: FakeGitHub) -> AsyncIterator[httpx.AsyncClient]:
    client = httpx.AsyncClient(transport=httpx.MockTransport(github.handler))
    yield client
    await client.aclose()


@pytest.fixture
def context(config: AppConfig, store: TrackingStore, http_client: httpx.AsyncClient) -> ToolContext:
    return ToolContext(config=config, store=store, token="tok_123", http_client=http_client)
