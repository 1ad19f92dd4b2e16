"""NuGet bootstrap: fetch nuget.exe and restore the packages of a source dir."""

import logging
import shutil
from pathlib import Path
from typing import Union

from linkhooks.errors import FetchError
from linkhooks.fetchers.base import download_file, run_tool

logger = logging.getLogger("linkhooks.fetchers.nuget")

NUGET_URL = "https://dist.nuget.org/win-x86-commandline/latest/nuget.exe"
NUGET_DIRNAME = "NuGet"
NUGET_EXE = "nuget.exe"
NUGET_CONFIG_FILES = ("nuget.config", "packages.config")


def download_nuget(
    source_dir: Union[str, Path],
    binary_dir: Union[str, Path],
    url: str = NUGET_URL,
) -> Path:
    """Install the packages listed in ``source_dir``'s NuGet config files.

    ``nuget.exe`` is downloaded into ``<binary_dir>/NuGet`` unless already
    present, ``nuget.config`` and ``packages.config`` are copied next to it,
    then ``nuget.exe restore`` and ``nuget.exe install`` run there.

    Returns:
        Path: The NuGet directory packages were installed into.

    Raises:
        FetchError: If the download fails or a config file is missing.
        PackageManagerError: If restore or install exits non-zero.
    """
    nuget_path = Path(binary_dir) / NUGET_DIRNAME
    nuget_exe = nuget_path / NUGET_EXE

    if not nuget_exe.exists():
        download_file(url, nuget_exe)
    else:
        logger.debug("Using cached %s", nuget_exe)

    for name in NUGET_CONFIG_FILES:
        src = Path(source_dir) / name
        if not src.is_file():
            raise FetchError(f"Missing {name} in {source_dir}")
        shutil.copy2(src, nuget_path / name)

    for operation in ("restore", "install"):
        logger.info("Running nuget %s in %s", operation, nuget_path)
        run_tool([nuget_exe, operation], nuget_path, "nuget")

    return nuget_path
