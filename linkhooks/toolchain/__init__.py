"""Toolchain helpers: architecture detection and warning policies."""

from linkhooks.toolchain.arch import COMPILER_PATTERNS, HostArch, detect_host_arch
from linkhooks.toolchain.warning_flags import GNU, MSVC, disable_warnings, warnings_as_errors

__all__ = [
    "COMPILER_PATTERNS",
    "GNU",
    "HostArch",
    "MSVC",
    "detect_host_arch",
    "disable_warnings",
    "warnings_as_errors",
]
