"""ai-cli command-line interface.

Usage::

    ai-cli create                      # react preset in ./my-ai-chat-app
    ai-cli create express chat-api --no-typescript
    ai-cli create basic ./web --no-tailwind --install
    ai-cli build
    ai-cli test

Exit status is 0 on success and 1 on any error.
"""

from __future__ import annotations

import argparse
import asyncio
import sys

from pydantic import ValidationError

from ai_cli import __version__
from ai_cli.commands import build_project, create_project, test_project
from ai_cli.config import PRESET_NAMES, Config
from ai_cli.errors import AiCliError
from ai_cli.scaffolder import ProjectOptions
from ai_cli.utils import print_error, print_warning


def build_parser() -> argparse.ArgumentParser:
    """Return the argument parser for all sub-commands."""
    parser = argparse.ArgumentParser(
        prog="ai-cli",
        description="AI UI SDK development and scaffolding CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  ai-cli create react my-chat\n"
            "  ai-cli create express chat-api --no-typescript\n"
            "  ai-cli build\n"
        ),
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", metavar="<command>")
    subparsers.required = True

    create = subparsers.add_parser("create", help="Create a new AI chat project")
    create.add_argument(
        "preset",
        nargs="?",
        default=None,
        help=f"Project preset ({', '.join(PRESET_NAMES)}; default: react)",
    )
    create.add_argument(
        "directory",
        nargs="?",
        default=None,
        help="Project directory (its name becomes the project name)",
    )
    create.add_argument(
        "--typescript",
        action=argparse.BooleanOptionalAction,
        default=True,
        help="Use TypeScript (default: yes)",
    )
    create.add_argument(
        "--tailwind",
        action=argparse.BooleanOptionalAction,
        default=True,
        help="Use Tailwind CSS (default: yes)",
    )
    create.add_argument(
        "--install",
        action="store_true",
        help="Install dependencies with the package manager after generating",
    )

    subparsers.add_parser("build", help="Build all packages")
    subparsers.add_parser("test", help="Run tests for all packages")
    return parser


async def _dispatch(args: argparse.Namespace, config: Config) -> None:
    if args.command == "create":
        options = ProjectOptions(
            preset=args.preset or config.default_preset,
            directory=args.directory,
            typescript=args.typescript,
            tailwind=args.tailwind,
            install=args.install,
        )
        await create_project(options, config)
    elif args.command == "build":
        await build_project(config)
    elif args.command == "test":
        await test_project(config)


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``ai-cli`` and ``python -m ai_cli``."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = Config.from_env()
    except ValidationError as exc:
        print_error(f"Invalid configuration: {exc}")
        sys.exit(1)

    try:
        asyncio.run(_dispatch(args, config))
    except (AiCliError, OSError):
        # Already reported by the command.
        sys.exit(1)
    except KeyboardInterrupt:
        print_warning("Interrupted.")
        sys.exit(130)
    except Exception as exc:
        print_error(f"Unexpected error: {exc}")
        sys.exit(1)


if __name__ == "__main__":
    main()
