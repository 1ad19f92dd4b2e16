"""Compiler-warning policy toggles for individual targets."""

from __future__ import annotations

import logging
from typing import Dict, List

from linkhooks.graph.registry import TargetRegistry
from linkhooks.graph.schema import COMPILE_OPTIONS_PROPERTY, STATIC_LIBRARY_OPTIONS_PROPERTY

logger = logging.getLogger("linkhooks.toolchain.warning_flags")

MSVC = "MSVC"
GNU = "GNU"

_STRICT_OPTIONS: Dict[str, List[str]] = {
    # 5205: delete of an abstract class with a non-virtual destructor (WinRT headers)
    MSVC: ["/W4", "/WX", "/wd5205"],
    GNU: ["-Wall", "-Wextra", "-Wpedantic", "-Werror"],
}
# c99-extensions and gnu-zero-variadic-macro-arguments come from bgfx headers
_STRICT_CLANG = [
    "-Wall",
    "-Wextra",
    "-pedantic",
    "-Werror",
    "-Wno-c99-extensions",
    "-Wno-gnu-zero-variadic-macro-arguments",
]

_SILENT_OPTIONS: Dict[str, List[str]] = {
    MSVC: ["/W0"],
    GNU: ["-Wno-cpp"],
}
_SILENT_CLANG = ["-Wno-everything"]

# LNK4264: archiving /ZW objects into a static library
_MSVC_SILENT_ARCHIVER = ["/ignore:4264"]


def warnings_as_errors(registry: TargetRegistry, target: str, compiler_id: str) -> List[str]:
    """Enable the strict warning set for ``target`` and make warnings fatal.

    Any compiler id other than ``MSVC`` or ``GNU`` gets the Clang flags.

    Returns:
        List[str]: The compile options that were added.
    """
    options = list(_STRICT_OPTIONS.get(compiler_id, _STRICT_CLANG))
    registry.append_property(target, COMPILE_OPTIONS_PROPERTY, options)
    logger.debug("Warnings as errors on %s (%s): %s", target, compiler_id, options)
    return options


def disable_warnings(registry: TargetRegistry, target: str, compiler_id: str) -> List[str]:
    """Silence compiler warnings for ``target`` (third-party code)."""
    options = list(_SILENT_OPTIONS.get(compiler_id, _SILENT_CLANG))
    registry.append_property(target, COMPILE_OPTIONS_PROPERTY, options)
    if compiler_id == MSVC:
        registry.set_property(target, STATIC_LIBRARY_OPTIONS_PROPERTY, list(_MSVC_SILENT_ARCHIVER))
    logger.debug("Warnings disabled on %s (%s): %s", target, compiler_id, options)
    return options
