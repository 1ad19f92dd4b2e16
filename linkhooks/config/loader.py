"""Load configure manifests from JSON or TOML files."""

import json
import logging
import tomllib
from pathlib import Path
from typing import Any, Dict, Union

from pydantic import ValidationError

from linkhooks.config.schema import ConfigureManifest
from linkhooks.errors import ConfigurationError

logger = logging.getLogger("linkhooks.config.loader")


def _read_raw(path: Path) -> Dict[str, Any]:
    suffix = path.suffix.lower()
    try:
        if suffix == ".toml":
            with path.open("rb") as f:
                return tomllib.load(f)
        if suffix == ".json":
            with path.open("r", encoding="utf-8") as f:
                return json.load(f)
    except (OSError, json.JSONDecodeError, tomllib.TOMLDecodeError) as e:
        raise ConfigurationError(f"Cannot read manifest {path}: {e}") from e
    raise ConfigurationError(f"Unsupported manifest format: {path} (expected .json or .toml)")


def load_manifest(path: Union[str, Path]) -> ConfigureManifest:
    """Read and validate a manifest.

    Relative directories in ``settings`` are resolved against the manifest's
    own directory.

    Raises:
        ConfigurationError: If the file cannot be read or fails validation.
    """
    manifest_path = Path(path)
    raw = _read_raw(manifest_path)
    try:
        manifest = ConfigureManifest.model_validate(raw)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid manifest {manifest_path}:\n{e}") from e

    root = manifest_path.resolve().parent
    manifest.settings = manifest.settings.resolve_paths(root)
    logger.info("Loaded manifest %s (%d steps)", manifest_path, len(manifest.steps))
    return manifest
