"""Validate tool input, run the handler, and turn the outcome into a ToolResult."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from ghprojects.contracts.exceptions import GhProjectsError, RateLimitError
from ghprojects.contracts.tool import ToolResult
from ghprojects.tools.base import Tool, ToolContext

logger = logging.getLogger(__name__)


def format_validation_error(exc: ValidationError) -> str:
    parts: list[str] = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ())) or "input"
        parts.append(f"{location}: {error.get('msg', 'invalid value')}")
    return "; ".join(parts)


def get_tool(name: str) -> Tool | None:
    from ghprojects.tools import TOOLS_BY_ID

    return TOOLS_BY_ID.get(name)


async def dispatch_tool(name: str, arguments: Mapping[str, Any] | None, context: ToolContext) -> ToolResult:
    """Run the tool called ``name`` and report the outcome.

    Known failures become error results; anything else propagates.
    """
    tool = get_tool(name)
    if tool is None:
        return ToolResult(f"Unknown tool: {name}", is_error=True)

    try:
        params = tool.input_model.model_validate(dict(arguments or {}))
    except ValidationError as exc:
        return ToolResult(f"Invalid input for {name}: {format_validation_error(exc)}", is_error=True)

    logger.debug("Running tool %s", name)
    try:
        output = await tool.handler(params, context)
    except RateLimitError as exc:
        logger.warning("Tool %s rate limited (retry after %ds)", name, exc.retry_after)
        return ToolResult(str(exc), is_error=True, retry_after=exc.retry_after)
    except GhProjectsError as exc:
        logger.warning("Tool %s failed: %s", name, exc)
        return ToolResult(str(exc), is_error=True)

    return ToolResult(json.dumps(output.to_wire(), indent=2))
