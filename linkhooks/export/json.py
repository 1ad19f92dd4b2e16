"""JSON export for target registries."""

import json
import logging
from pathlib import Path

import networkx as nx

from linkhooks.graph.registry import TargetRegistry

logger = logging.getLogger("linkhooks.export.json")


def registry_to_dict(registry: TargetRegistry) -> dict:
    """Return the registry graph as networkx node-link data."""
    return nx.readwrite.json_graph.node_link_data(registry.native_graph, edges="edges")


def export_json(registry: TargetRegistry, output_path: Path) -> None:
    """Export the registry graph to JSON format.

    Args:
        registry: Registry to export.
        output_path: Output file path.
    """
    logger.info("Exporting graph to JSON: %s", output_path)

    output_path.parent.mkdir(parents=True, exist_ok=True)
    data = registry_to_dict(registry)

    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False, default=str)

    logger.info("JSON export completed: %d nodes, %d edges",
                registry.node_count(), registry.edge_count())
