"""Shared helpers for package-manager fetchers.

Fetchers shell out to host package managers and download their bootstrap
executables. Unlike lookup failures elsewhere, every failure here aborts the
configuration pass.
"""

import logging
import subprocess
from pathlib import Path
from typing import List, Sequence, Union

import requests

from linkhooks.errors import FetchError, PackageManagerError

logger = logging.getLogger("linkhooks.fetchers.base")


def download_file(url: str, target_path: Path, timeout: int = 300) -> Path:
    """Download ``url`` to ``target_path``.

    Args:
        url: File URL.
        target_path: Destination path; parent directories are created.
        timeout: Request timeout in seconds.

    Returns:
        Path: ``target_path``.

    Raises:
        FetchError: On any HTTP or I/O failure. A partially written file is
            removed so the next pass downloads again.
    """
    target_path.parent.mkdir(parents=True, exist_ok=True)
    logger.info("Downloading file: %s", url)
    try:
        with requests.get(url, timeout=timeout, stream=True) as response:
            response.raise_for_status()
            with target_path.open("wb") as out:
                for chunk in response.iter_content(chunk_size=8192):
                    out.write(chunk)
    except (requests.RequestException, OSError) as e:
        target_path.unlink(missing_ok=True)
        raise FetchError(f"Failed to download {url}: {e}") from e

    logger.info("Downloaded to: %s", target_path)
    return target_path


def run_tool(
    command: Sequence[Union[str, Path]],
    working_directory: Union[str, Path],
    tool_name: str,
) -> subprocess.CompletedProcess:
    """Run a package-manager command and fail the pass on non-zero exit.

    Args:
        command: Executable followed by its arguments.
        working_directory: Directory the command runs in.
        tool_name: Name used in log and error messages.

    Returns:
        subprocess.CompletedProcess: The finished process.

    Raises:
        PackageManagerError: If the executable cannot be started or exits
            with a non-zero code.
    """
    cmd: List[str] = [str(part) for part in command]
    logger.debug("Running %s in %s: %s", tool_name, working_directory, " ".join(cmd))
    try:
        res = subprocess.run(
            cmd,
            cwd=str(working_directory),
            capture_output=True,
            text=True,
            check=False,
        )
    except OSError as e:
        raise PackageManagerError(f"{tool_name} could not be started: {e}") from e

    if res.returncode != 0:
        logger.error("%s failed (exit %d): %s", tool_name, res.returncode, res.stderr)
        raise PackageManagerError(
            f"{tool_name} command failed: {res.returncode}", returncode=res.returncode
        )
    return res
