"""Package-manager fetchers (NuGet bootstrap, npm wrapper)."""

from linkhooks.fetchers.base import download_file, run_tool
from linkhooks.fetchers.npm import npm, npm_command
from linkhooks.fetchers.nuget import NUGET_URL, download_nuget

__all__ = [
    "NUGET_URL",
    "download_file",
    "download_nuget",
    "npm",
    "npm_command",
    "run_tool",
]
