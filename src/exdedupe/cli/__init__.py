"""Command-line interface for exdedupe."""
