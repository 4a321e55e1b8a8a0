"""Command-line adapters package."""
