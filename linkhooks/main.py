"""Main CLI entry point for linkhooks.

Provides commands: configure, arch, nuget, npm
"""

import argparse
import logging
import sys
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

from linkhooks.cli.arch import arch_command
from linkhooks.cli.configure import configure_command
from linkhooks.cli.fetch import npm_cli_command, nuget_command
from linkhooks.fetchers.nuget import NUGET_URL

logger = logging.getLogger("linkhooks.cli")


def setup_logging(verbose: bool = False, console: Optional[Console] = None) -> None:
    """Setup logging configuration with Rich integration.

    Args:
        verbose: Enable verbose logging.
        console: Rich Console instance for coordinated output (optional).
    """
    if verbose:
        level = logging.DEBUG
    else:
        level = logging.WARNING

    handler = RichHandler(
        console=console,
        show_time=True,
        show_path=False,
        markup=False,
        rich_tracebacks=True,
        tracebacks_show_locals=verbose,
        log_time_format="[%H:%M:%S]",
    )

    logging.basicConfig(
        level=level,
        format="[%(name)s] [%(levelname)s] %(message)s",
        handlers=[handler],
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="linkhooks",
        description="Linkhooks - build configuration helpers with on-link hooks",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Configure command
    configure_parser = subparsers.add_parser(
        "configure",
        help="Replay a configure manifest (JSON/TOML) and report the link graph",
    )
    configure_parser.add_argument(
        "manifest",
        help="Manifest file (.json or .toml)",
    )
    configure_parser.add_argument(
        "-o",
        "--output",
        help="Write the resulting link graph as node-link JSON",
    )

    # Arch command
    arch_parser = subparsers.add_parser(
        "arch",
        help="Detect CPU and platform architecture from a compiler path",
    )
    arch_parser.add_argument(
        "--compiler",
        required=True,
        help="Full path of the C++ compiler",
    )

    # NuGet command
    nuget_parser = subparsers.add_parser(
        "nuget",
        help="Download nuget.exe and restore/install packages",
    )
    nuget_parser.add_argument(
        "--source-dir",
        default=".",
        help="Directory containing nuget.config and packages.config (default: .)",
    )
    nuget_parser.add_argument(
        "--binary-dir",
        default="build",
        help="Build directory; packages go to <binary-dir>/NuGet (default: build)",
    )
    nuget_parser.add_argument(
        "--url",
        default=NUGET_URL,
        help="nuget.exe download URL",
    )

    # npm command
    npm_parser = subparsers.add_parser(
        "npm",
        help="Run an npm operation for a module",
    )
    npm_parser.add_argument(
        "operation",
        help="npm operation, e.g. install",
    )
    npm_parser.add_argument(
        "--cwd",
        default=".",
        help="Working directory (default: .)",
    )
    npm_parser.add_argument(
        "--module",
        required=True,
        help="Module name used in progress messages",
    )
    npm_parser.add_argument(
        "--npm-arg",
        dest="options",
        action="append",
        default=[],
        help="Extra npm argument, repeatable (use --npm-arg=--flag for dashed values)",
    )

    return parser


def main(argv: Optional[list] = None) -> int:
    """Main CLI entry point.

    Returns:
        int: Exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)

    if args.command == "configure":
        return configure_command(args)
    elif args.command == "arch":
        return arch_command(args)
    elif args.command == "nuget":
        return nuget_command(args)
    elif args.command == "npm":
        return npm_cli_command(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
