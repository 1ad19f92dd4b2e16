"""Package-manager commands (nuget, npm)."""

import logging
from typing import Optional

from rich.console import Console

from linkhooks.errors import ConfigurationError
from linkhooks.fetchers.npm import npm
from linkhooks.fetchers.nuget import download_nuget

logger = logging.getLogger("linkhooks.cli.fetch")


def nuget_command(args, console: Optional[Console] = None) -> int:
    """Download nuget.exe if needed, then restore and install packages."""
    console = console or Console()
    try:
        nuget_path = download_nuget(args.source_dir, args.binary_dir, url=args.url)
    except ConfigurationError as e:
        logger.error("NuGet bootstrap failed: %s", e)
        return 1

    console.print(f"NUGET_PATH={nuget_path}", markup=False, highlight=False)
    return 0


def npm_cli_command(args) -> int:
    try:
        npm(args.operation, args.cwd, args.module, list(args.options or []))
    except ConfigurationError as e:
        logger.error("%s", e)
        return 1
    return 0
