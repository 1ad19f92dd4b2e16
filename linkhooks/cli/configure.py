"""Configure command implementation."""

import logging
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.table import Table

from linkhooks.config.loader import load_manifest
from linkhooks.errors import ConfigurationError
from linkhooks.export.json import export_json
from linkhooks.graph.registry import TargetRegistry
from linkhooks.linking.hook_files import hook_files
from linkhooks.runtime.session import ConfigureSession

logger = logging.getLogger("linkhooks.cli.configure")


def render_targets(registry: TargetRegistry, console: Optional[Console] = None) -> None:
    """Print a table of targets, their links and hook files."""
    console = console or Console()
    table = Table(title=f"Targets ({len(registry.targets())})")
    table.add_column("Target", style="bold")
    table.add_column("Type")
    table.add_column("Links")
    table.add_column("Hook files")

    for name in registry.targets():
        links = ", ".join(
            f"{edge.item} ({edge.scope.value})" for edge in registry.links(name)
        )
        table.add_row(
            name,
            registry.target_type(name).value,
            links or "-",
            "\n".join(hook_files(registry, name)) or "-",
        )
    console.print(table)


def configure_command(args, console: Optional[Console] = None) -> int:
    """Execute configure command.

    Args:
        args: Parsed command-line arguments.
        console: Console for the summary table (stdout when omitted).

    Returns:
        int: Exit code.
    """
    try:
        manifest = load_manifest(args.manifest)
        session = ConfigureSession(manifest)
        registry = session.run()
    except ConfigurationError as e:
        logger.error("Configuration failed: %s", e)
        return 1

    console = console or Console()
    render_targets(registry, console)
    for key, value in session.variables.items():
        console.print(f"{key}={value}", markup=False, highlight=False)

    output = getattr(args, "output", None)
    if output:
        export_json(registry, Path(output))
    return 0
