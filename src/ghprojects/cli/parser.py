"""CLI parser construction."""

from __future__ import annotations

import argparse
from importlib.metadata import PackageNotFoundError, version

from ghprojects.contracts.tool import ToolCategory


def _package_version() -> str:
    try:
        return version("ghprojects")
    except PackageNotFoundError:
        return "0.0.0"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="ghprojects")
    parser.add_argument("--version", action="version", version=f"%(prog)s {_package_version()}")

    subparsers = parser.add_subparsers(dest="command", required=True)

    serve_parser = subparsers.add_parser("serve", help="Run the MCP server on stdio")
    serve_parser.add_argument("--config", default=None, help="Path to ghprojects.json (defaults when omitted)")
    serve_parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    call_parser = subparsers.add_parser("call", help="Run a single tool and print its result")
    call_parser.add_argument("tool", help="Tool id, e.g. LIST_ISSUES")
    call_parser.add_argument("arguments", nargs="?", default="{}", help="Tool input as a JSON object")
    call_parser.add_argument("--config", default=None, help="Path to ghprojects.json (defaults when omitted)")
    call_parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    tools_parser = subparsers.add_parser("tools", help="List available tools")
    tools_parser.add_argument(
        "--category",
        choices=[category.value for category in ToolCategory],
        default=None,
        help="Only list tools of this category",
    )

    return parser


__all__ = ["build_parser"]
