"""Serve command."""

from __future__ import annotations

import argparse


async def run_serve(args: argparse.Namespace) -> None:
    import ghprojects.cli as cli

    config = cli.resolve_config(args.config)
    await cli.run_stdio(config)


__all__ = ["run_serve"]
