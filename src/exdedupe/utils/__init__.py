"""Shared utility functions: timestamps and artifact hashing."""

from exdedupe.utils.hashing import calculate_file_sha256, format_sha256
from exdedupe.utils.timestamps import elapsed_seconds, get_iso_timestamp

__all__ = [
    "get_iso_timestamp",
    "elapsed_seconds",
    "calculate_file_sha256",
    "format_sha256",
]
