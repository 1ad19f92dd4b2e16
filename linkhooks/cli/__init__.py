"""Command implementations for the linkhooks CLI."""
