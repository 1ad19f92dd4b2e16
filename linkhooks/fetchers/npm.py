"""npm invocation wrapper."""

import logging
import platform
from pathlib import Path
from typing import Optional, Sequence, Union

from linkhooks.fetchers.base import run_tool

logger = logging.getLogger("linkhooks.fetchers.npm")


def npm_command(host_system: Optional[str] = None) -> str:
    """Return the npm executable name for ``host_system`` (default: this host)."""
    system = host_system or platform.system()
    return "npm.cmd" if system == "Windows" else "npm"


def npm(
    operation: str,
    working_directory: Union[str, Path],
    module_name: str,
    options: Sequence[str] = (),
    host_system: Optional[str] = None,
) -> None:
    """Run ``npm <operation> <options...>`` for a module.

    Args:
        operation: npm sub-command, e.g. ``install`` or ``ci``.
        working_directory: Directory holding the module's package.json.
        module_name: Display name used in progress messages.
        options: Extra arguments appended after the operation.
        host_system: Host system name (``platform.system()`` value).

    Raises:
        PackageManagerError: If npm cannot be started or exits non-zero.
    """
    cmd = [npm_command(host_system), operation, *options]
    logger.info("Installing %s module", module_name)
    run_tool(cmd, working_directory, "npm")
    logger.info("Installing %s module - done", module_name)
