"""Hook-file loader.

A hook file is a Python file that may define ``on_linked_as_dependency``.
Each load executes the file in a brand-new module namespace, so a callback
defined by one hook file can never be picked up while processing another.
"""

from __future__ import annotations

import logging
import runpy
from pathlib import Path
from typing import Callable, Optional, Union

from linkhooks.errors import HookLoadError
from linkhooks.graph.registry import Target

logger = logging.getLogger("linkhooks.linking.loader")

HOOK_CALLBACK_NAME = "on_linked_as_dependency"

HookCallback = Callable[[Target], None]


class HookLoader:
    """Load hook files and hand back their optional callback.

    Relative references are resolved against ``base_dir`` (the current
    working directory when unset). There is no caching: loading the same
    reference twice executes the file twice.
    """

    def __init__(self, base_dir: Optional[Union[str, Path]] = None) -> None:
        self.base_dir = Path(base_dir) if base_dir else None

    def resolve(self, reference: Union[str, Path]) -> Path:
        path = Path(reference).expanduser()
        if not path.is_absolute() and self.base_dir is not None:
            path = self.base_dir / path
        return path

    def load(self, reference: Union[str, Path]) -> Optional[HookCallback]:
        """Execute a hook file and return its callback, if it defines one.

        Args:
            reference: Hook-file reference as registered on a target.

        Returns:
            Optional[HookCallback]: The ``on_linked_as_dependency`` callable,
            or None when the file does not define it.

        Raises:
            HookLoadError: If the file is missing, fails to execute, or binds
                ``on_linked_as_dependency`` to something that is not callable.
        """
        path = self.resolve(reference)
        if not path.is_file():
            raise HookLoadError(f"Hook file not found: {reference} (resolved to {path})")

        logger.debug("Loading hook file %s", path)
        try:
            namespace = runpy.run_path(str(path), run_name=f"linkhooks_hook_{path.stem}")
        except Exception as exc:
            raise HookLoadError(f"Failed to load hook file {path}: {exc}") from exc

        callback = namespace.get(HOOK_CALLBACK_NAME)
        if callback is None:
            logger.debug("Hook file %s defines no %s", path, HOOK_CALLBACK_NAME)
            return None
        if not callable(callback):
            raise HookLoadError(
                f"Hook file {path} binds {HOOK_CALLBACK_NAME} to a non-callable "
                f"{type(callback).__name__}"
            )
        return callback
