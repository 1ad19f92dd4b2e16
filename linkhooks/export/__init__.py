"""Graph export formats."""

from linkhooks.export.json import export_json, registry_to_dict

__all__ = ["export_json", "registry_to_dict"]
