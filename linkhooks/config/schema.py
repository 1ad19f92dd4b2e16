"""Configuration schema definitions using Pydantic for validation.

A configure manifest carries the build settings for one configuration pass
and the ordered steps that are replayed against a fresh target registry.
Using Pydantic means a malformed manifest is rejected before any step runs.
"""

from pathlib import Path
from typing import Annotated, Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, Field, field_validator

from linkhooks.fetchers.nuget import NUGET_URL
from linkhooks.graph.schema import TargetType


class BuildSettings(BaseModel):
    """Settings shared by every step of a configuration pass.

    Attributes:
        compiler_id: Compiler family (``MSVC``, ``GNU``, anything else is
            treated as Clang).
        cxx_compiler: Full path of the C++ compiler, for architecture detection.
        host_system: Host system name (``Windows``, ``Linux``, ``Darwin``).
        source_dir: Source directory (NuGet config files live here).
        binary_dir: Build output directory.
        hook_dir: Base directory for relative hook-file references
            (defaults to ``source_dir``).
        nuget_url: Download location of nuget.exe.
    """

    compiler_id: str = "GNU"
    cxx_compiler: Optional[str] = None
    host_system: Optional[str] = None
    source_dir: Path = Path(".")
    binary_dir: Path = Path("build")
    hook_dir: Optional[Path] = None
    nuget_url: str = NUGET_URL

    model_config = {"extra": "forbid"}

    @field_validator("compiler_id")
    @classmethod
    def validate_compiler_id(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("compiler_id must not be empty")
        return v.strip()

    @property
    def hook_base_dir(self) -> Path:
        return self.hook_dir if self.hook_dir is not None else self.source_dir

    def resolve_paths(self, root: Path) -> "BuildSettings":
        """Return a copy with relative directories anchored at ``root``."""
        updates: Dict[str, Any] = {}
        for name in ("source_dir", "binary_dir", "hook_dir"):
            value = getattr(self, name)
            if value is not None and not value.is_absolute():
                updates[name] = root / value
        return self.model_copy(update=updates)


class _Step(BaseModel):
    model_config = {"extra": "forbid"}


class DeclareStep(_Step):
    """Declare a target."""

    action: Literal["declare"]
    name: str = Field(min_length=1)
    type: TargetType = TargetType.STATIC_LIBRARY
    properties: Dict[str, Any] = Field(default_factory=dict)


class SetPropertyStep(_Step):
    action: Literal["set_property"]
    target: str = Field(min_length=1)
    property: str = Field(min_length=1)
    value: Any = None


class RegisterHookStep(_Step):
    """Attach a hook file to a target (duplicates allowed)."""

    action: Literal["register_hook"]
    target: str = Field(min_length=1)
    hook_file: str = Field(min_length=1)


class PropagateHooksStep(_Step):
    """Inherit a library's hook files onto a target (deduplicated)."""

    action: Literal["propagate_hooks"]
    library: str = Field(min_length=1)
    target: str = Field(min_length=1)


class LinkStep(_Step):
    """Link with hooks; ``args`` mixes scope keywords and library names."""

    action: Literal["link"]
    consumer: str = Field(min_length=1)
    args: List[str] = Field(default_factory=list)


class DetectArchStep(_Step):
    """Set ``CPU_ARCH``/``PLATFORM_ARCH`` from the C++ compiler path.

    ``compiler`` overrides ``settings.cxx_compiler``.
    """

    action: Literal["detect_arch"]
    compiler: Optional[str] = None


class DownloadNugetStep(_Step):
    """Restore NuGet packages using the source, binary dir and URL settings."""

    action: Literal["download_nuget"]


class NpmStep(_Step):
    """Run an npm operation; ``working_directory`` is relative to ``source_dir``."""

    action: Literal["npm"]
    operation: str = Field(min_length=1)
    module: str = Field(min_length=1)
    working_directory: Path = Path(".")
    options: List[str] = Field(default_factory=list)


class WarningsAsErrorsStep(_Step):
    action: Literal["warnings_as_errors"]
    target: str = Field(min_length=1)


class DisableWarningsStep(_Step):
    action: Literal["disable_warnings"]
    target: str = Field(min_length=1)


ConfigureStep = Annotated[
    Union[
        DeclareStep,
        SetPropertyStep,
        RegisterHookStep,
        PropagateHooksStep,
        LinkStep,
        WarningsAsErrorsStep,
        DisableWarningsStep,
        DetectArchStep,
        DownloadNugetStep,
        NpmStep,
    ],
    Field(discriminator="action"),
]


class ConfigureManifest(BaseModel):
    """A complete configuration pass: settings plus ordered steps."""

    settings: BuildSettings = Field(default_factory=BuildSettings)
    steps: List[ConfigureStep] = Field(default_factory=list)

    model_config = {"extra": "forbid"}
