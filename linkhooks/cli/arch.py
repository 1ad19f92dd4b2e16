"""Arch command: print CPU_ARCH/PLATFORM_ARCH for a compiler path."""

import logging
from typing import Optional

from rich.console import Console

from linkhooks.errors import UnrecognizedCompilerError
from linkhooks.toolchain.arch import detect_host_arch

logger = logging.getLogger("linkhooks.cli.arch")


def arch_command(args, console: Optional[Console] = None) -> int:
    console = console or Console()
    try:
        arch = detect_host_arch(args.compiler)
    except UnrecognizedCompilerError as e:
        logger.error("%s", e)
        return 1

    console.print(f"CPU_ARCH={arch.cpu_arch}", markup=False, highlight=False)
    console.print(f"PLATFORM_ARCH={arch.platform_arch}", markup=False, highlight=False)
    return 0
