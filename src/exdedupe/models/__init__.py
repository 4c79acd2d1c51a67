"""Shared data types for exdedupe.

Domain-specific types live closer to their consumers:
- Cluster types → exdedupe.clustering.models
- Validation results → exdedupe.validation.models
- Rename plans → exdedupe.merge.models
"""

from exdedupe.models.records import NameRecord

__all__ = [
    "NameRecord",
]
