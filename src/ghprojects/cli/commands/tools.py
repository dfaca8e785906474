"""Tools command: tabulate the registry."""

from __future__ import annotations

import argparse

from rich.console import Console
from rich.table import Table

from ghprojects.tools import ALL_TOOLS, Tool


def build_tools_table(tools: list[Tool]) -> Table:
    table = Table(title="ghprojects tools")
    table.add_column("Tool", style="bold cyan", no_wrap=True)
    table.add_column("Category", style="magenta")
    table.add_column("Description")
    for tool in tools:
        table.add_row(tool.id, tool.category.value, tool.description)
    return table


def run_tools(args: argparse.Namespace) -> int:
    tools = [tool for tool in ALL_TOOLS if args.category in (None, tool.category)]
    Console().print(build_tools_table(tools))
    return 0


__all__ = ["build_tools_table", "run_tools"]
