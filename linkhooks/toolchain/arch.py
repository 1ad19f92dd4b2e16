"""Host architecture detection from the active C++ compiler path."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import PurePath
from typing import List, Tuple, Union

from linkhooks.errors import UnrecognizedCompilerError

logger = logging.getLogger("linkhooks.toolchain.arch")


@dataclass(frozen=True)
class HostArch:
    """CPU architecture and platform pair (``CPU_ARCH``/``PLATFORM_ARCH``)."""

    cpu_arch: str
    platform_arch: str


# Checked in order; first match wins.
COMPILER_PATTERNS: List[Tuple[re.Pattern, HostArch]] = [
    (re.compile(r"x86/cl\.exe$"), HostArch("x86", "win")),
    (re.compile(r"x64/cl\.exe$"), HostArch("x64", "win")),
    (re.compile(r"arm/cl\.exe$"), HostArch("ARM", "win")),
    (re.compile(r"arm64/cl\.exe$"), HostArch("ARM64", "win")),
    (re.compile(r"windows-x86_64/bin/clang\+\+\.exe$"), HostArch("x64", "win")),
    (re.compile(r"linux-x86_64/bin/clang\+\+$"), HostArch("x64", "linux")),
    (re.compile(r"darwin-x86_64/bin/clang\+\+$"), HostArch("x64", "darwin")),
]


def detect_host_arch(compiler_path: Union[str, PurePath]) -> HostArch:
    """Map a compiler path to its (cpu, platform) architecture pair.

    Args:
        compiler_path: Full path of the C++ compiler. Backslashes are
            treated as path separators.

    Returns:
        HostArch: The detected architecture.

    Raises:
        UnrecognizedCompilerError: If no known pattern matches.
    """
    normalized = str(compiler_path).replace("\\", "/")
    for pattern, arch in COMPILER_PATTERNS:
        if pattern.search(normalized):
            logger.debug("Compiler %s -> %s/%s", normalized, arch.cpu_arch, arch.platform_arch)
            return arch
    raise UnrecognizedCompilerError(f"Unrecognized compiler: {compiler_path}")
