"""MCP server exposing the tool registry over stdio."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

from mcp import types
from mcp.server import Server
from mcp.server.stdio import stdio_server

from ghprojects.auth import resolve_token
from ghprojects.contracts.config import AppConfig
from ghprojects.persistence import TrackingStore
from ghprojects.tools import ALL_TOOLS, ToolContext, dispatch_tool

logger = logging.getLogger(__name__)

SERVER_NAME = "ghprojects"


class ToolCallFailed(Exception):
    """Raised inside the MCP call handler so the SDK flags the result as an error."""


@asynccontextmanager
async def open_context(config: AppConfig) -> AsyncIterator[ToolContext]:
    """Resolve the token once, open the tracking store, and yield a ToolContext."""
    token = resolve_token(config)
    store = TrackingStore.open(config.database_path)
    try:
        yield ToolContext(config=config, store=store, token=token)
    finally:
        store.close()


def list_mcp_tools() -> list[types.Tool]:
    return [
        types.Tool(name=tool.id, description=tool.description, inputSchema=tool.input_schema())
        for tool in ALL_TOOLS
    ]


def create_server(context: ToolContext) -> Server:
    server: Server = Server(SERVER_NAME)

    @server.list_tools()
    async def list_tools() -> list[types.Tool]:
        return list_mcp_tools()

    @server.call_tool()
    async def call_tool(name: str, arguments: dict[str, Any] | None) -> list[types.TextContent]:
        result = await dispatch_tool(name, arguments, context)
        if result.is_error:
            raise ToolCallFailed(result.content)
        return [types.TextContent(type="text", text=result.content)]

    return server


async def run_stdio(config: AppConfig) -> None:
    async with open_context(config) as context:
        server = create_server(context)
        logger.info("Serving %d tools on stdio", len(ALL_TOOLS))
        async with stdio_server() as (read_stream, write_stream):
            await server.run(read_stream, write_stream, server.create_initialization_options())


__all__ = ["SERVER_NAME", "ToolCallFailed", "create_server", "list_mcp_tools", "open_context", "run_stdio"]
