"""CLI app entrypoint and error mapping."""

from __future__ import annotations

import sys

from ghprojects.contracts.exceptions import AuthenticationError, ConfigError, ProviderError, ToolInputError


def main(argv: list[str] | None = None) -> int:
    import ghprojects.cli as cli

    parser = cli.build_parser()
    args = parser.parse_args(argv)

    if args.command == "tools":
        return cli._run_tools(args)

    if args.verbose:
        cli.logging.basicConfig(level=cli.logging.DEBUG, format="%(name)s %(message)s", stream=sys.stderr)

    try:
        if args.command == "serve":
            cli.asyncio.run(cli._run_serve(args))
            return 0
        return cli.asyncio.run(cli._run_call(args))
    except (ConfigError, ToolInputError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 3
    except (AuthenticationError, ProviderError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 4
    except Exception as exc:  # pragma: no cover - defensive fallback
        print(f"error: {exc}", file=sys.stderr)
        return 1


__all__ = ["main"]
