"""Configuration schema and manifest loading for linkhooks."""

from .loader import load_manifest
from .schema import (
    BuildSettings,
    ConfigureManifest,
    ConfigureStep,
    DeclareStep,
    DetectArchStep,
    DisableWarningsStep,
    DownloadNugetStep,
    LinkStep,
    NpmStep,
    PropagateHooksStep,
    RegisterHookStep,
    SetPropertyStep,
    WarningsAsErrorsStep,
)

__all__ = [
    "BuildSettings",
    "ConfigureManifest",
    "ConfigureStep",
    "DeclareStep",
    "DetectArchStep",
    "DisableWarningsStep",
    "DownloadNugetStep",
    "LinkStep",
    "NpmStep",
    "PropagateHooksStep",
    "RegisterHookStep",
    "SetPropertyStep",
    "WarningsAsErrorsStep",
    "load_manifest",
]
