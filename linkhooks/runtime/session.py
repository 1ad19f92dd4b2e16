"""Configuration session: replay a manifest's steps against a registry."""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from linkhooks.config.schema import (
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
from linkhooks.errors import ConfigurationError
from linkhooks.fetchers.npm import npm
from linkhooks.fetchers.nuget import download_nuget
from linkhooks.graph.registry import TargetRegistry
from linkhooks.linking.annotator import link_with_hooks
from linkhooks.linking.hook_files import propagate_hooks, register_hook
from linkhooks.linking.loader import HookLoader
from linkhooks.runtime.eventbus import Event, EventBus, EventType
from linkhooks.toolchain.arch import detect_host_arch
from linkhooks.toolchain.warning_flags import disable_warnings, warnings_as_errors

logger = logging.getLogger("linkhooks.runtime.session")


@dataclass
class ConfigureTrace:
    """Observer that records what happened during a pass.

    Attributes:
        counts: Number of events seen per event type name.
        hook_calls: ``(consumer, dependency, hook_file)`` per invoked hook,
            in invocation order.
    """

    counts: Counter = field(default_factory=Counter)
    hook_calls: List[tuple] = field(default_factory=list)

    def attach(self, eventbus: EventBus) -> None:
        eventbus.subscribe_all(self._on_event, name="configure-trace")

    def _on_event(self, event: Event) -> None:
        self.counts[event.event_type.name] += 1
        if event.event_type is EventType.HOOK_INVOKED:
            data = event.data
            self.hook_calls.append((data["consumer"], data["dependency"], data["hook_file"]))


class ConfigureSession:
    """Run one configuration pass described by a manifest.

    The first failing step raises and ends the pass; nothing is retried.
    Steps that produce pass-wide values (``CPU_ARCH``, ``PLATFORM_ARCH``,
    ``NUGET_PATH``) store them in :attr:`variables`.
    """

    def __init__(
        self,
        manifest: ConfigureManifest,
        eventbus: Optional[EventBus] = None,
    ) -> None:
        self.manifest = manifest
        self.settings = manifest.settings
        self.eventbus = eventbus or EventBus()
        self.registry = TargetRegistry(eventbus=self.eventbus)
        self.loader = HookLoader(self.settings.hook_base_dir)
        self.variables: Dict[str, str] = {}
        self.trace = ConfigureTrace()
        self.trace.attach(self.eventbus)

    def run(self) -> TargetRegistry:
        logger.info("Configuring %d step(s)", len(self.manifest.steps))
        for index, step in enumerate(self.manifest.steps, start=1):
            logger.debug("Step %d: %s", index, step.action)
            self.apply(step)
        logger.info(
            "Configuration done: %d target(s), %d link(s), %d hook call(s)",
            len(self.registry.targets()),
            self.registry.edge_count(),
            len(self.trace.hook_calls),
        )
        return self.registry

    def apply(self, step: ConfigureStep) -> None:
        """Apply a single manifest step to the session registry."""
        registry = self.registry
        compiler_id = self.settings.compiler_id
        if isinstance(step, DeclareStep):
            registry.declare(step.name, step.type, step.properties)
        elif isinstance(step, SetPropertyStep):
            registry.set_property(step.target, step.property, step.value)
        elif isinstance(step, RegisterHookStep):
            register_hook(registry, step.target, step.hook_file)
        elif isinstance(step, PropagateHooksStep):
            propagate_hooks(registry, step.library, step.target)
        elif isinstance(step, LinkStep):
            link_with_hooks(registry, step.consumer, *step.args, loader=self.loader)
        elif isinstance(step, WarningsAsErrorsStep):
            warnings_as_errors(registry, step.target, compiler_id)
        elif isinstance(step, DisableWarningsStep):
            disable_warnings(registry, step.target, compiler_id)
        elif isinstance(step, DetectArchStep):
            self._detect_arch(step)
        elif isinstance(step, DownloadNugetStep):
            nuget_path = download_nuget(
                self.settings.source_dir, self.settings.binary_dir, url=self.settings.nuget_url
            )
            self.variables["NUGET_PATH"] = str(nuget_path)
        elif isinstance(step, NpmStep):
            npm(
                step.operation,
                self.settings.source_dir / step.working_directory,
                step.module,
                step.options,
                host_system=self.settings.host_system,
            )
        else:
            raise TypeError(f"Unsupported step: {step!r}")

    def _detect_arch(self, step: DetectArchStep) -> None:
        compiler = step.compiler or self.settings.cxx_compiler
        if not compiler:
            raise ConfigurationError("detect_arch needs a compiler path (settings.cxx_compiler)")
        arch = detect_host_arch(compiler)
        self.variables["CPU_ARCH"] = arch.cpu_arch
        self.variables["PLATFORM_ARCH"] = arch.platform_arch

    def summary(self) -> Dict[str, int]:
        return dict(self.trace.counts)
