"""Name normalization and auto-correction.

- normalize: raw name → CanonicalKey used for every comparison
- lookup_key: trimmed, lower-cased form used by the correction table
- autocorrect: known informal spellings → canonical display name
"""

from exdedupe.normalize.corrections import (
    DEFAULT_CORRECTIONS,
    autocorrect,
    build_corrections,
    load_corrections,
)
from exdedupe.normalize.keys import lookup_key, normalize

__all__ = [
    "normalize",
    "lookup_key",
    "autocorrect",
    "build_corrections",
    "load_corrections",
    "DEFAULT_CORRECTIONS",
]
