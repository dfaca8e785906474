"""Command-line interface for ghprojects."""

from __future__ import annotations

import asyncio
import logging as logging

from ghprojects.cli.app import main as main
from ghprojects.cli.commands import call as call_command
from ghprojects.cli.commands import serve as serve_command
from ghprojects.cli.commands import tools as tools_command
from ghprojects.cli.parser import _package_version as _package_version
from ghprojects.cli.parser import build_parser as build_parser
from ghprojects.config import resolve_config as resolve_config
from ghprojects.server import open_context as open_context
from ghprojects.server import run_stdio as run_stdio
from ghprojects.tools import dispatch_tool as dispatch_tool

_run_serve = serve_command.run_serve
_run_call = call_command.run_call
_run_tools = tools_command.run_tools

__all__ = ["asyncio", "main"]
