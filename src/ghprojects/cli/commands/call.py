"""Call command: run one tool from the shell."""

from __future__ import annotations

import argparse
import json
from typing import Any

from rich.console import Console

from ghprojects.contracts.exceptions import ToolInputError


def parse_arguments(raw: str) -> dict[str, Any]:
    try:
        payload = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ToolInputError(f"Tool arguments are not valid JSON: {exc.msg}") from exc
    if not isinstance(payload, dict):
        raise ToolInputError("Tool arguments must be a JSON object")
    return payload


async def run_call(args: argparse.Namespace) -> int:
    import ghprojects.cli as cli

    arguments = parse_arguments(args.arguments)
    config = cli.resolve_config(args.config)

    async with cli.open_context(config) as context:
        result = await cli.dispatch_tool(args.tool, arguments, context)

    if result.is_error:
        err = Console(stderr=True)
        err.print(f"error: {result.content}", style="red", markup=False, highlight=False)
        if result.retry_after is not None:
            err.print(f"retry after {result.retry_after} seconds", highlight=False)
        return 2

    Console().print_json(result.content)
    return 0


__all__ = ["parse_arguments", "run_call"]
