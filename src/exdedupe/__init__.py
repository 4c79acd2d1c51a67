"""Fuzzy matching and deduplication of exercise names.

This package provides:
- Data models (exdedupe.models) — name records
- Normalization (exdedupe.normalize) — comparison keys and auto-correction
- Scoring (exdedupe.scoring) — edit-distance similarity
- Clustering (exdedupe.clustering) — duplicate clusters for review
- Validation (exdedupe.validation) — live checks of proposed names
- Merge (exdedupe.merge) — rename plans
- Reconcile (exdedupe.reconcile) — comparing two record sources
- Engine (exdedupe.engine) — configuration and audited review runs
- Audit (exdedupe.audit) — event log and run manifest
- CLI (exdedupe.cli) — command-line interface
- Public API (exdedupe.api) — high-level convenience functions
"""

__version__ = "0.4.0"
__license__ = "MIT"

from exdedupe.api import check_name, load_records, review, write_jsonl
from exdedupe.clustering import Cluster, SimilarMember, build_clusters
from exdedupe.errors import (
    DedupeError,
    EmptySelectionError,
    InvalidInputError,
    RecordFormatError,
    SimilarNameError,
)
from exdedupe.merge import Rename, apply_plan, plan_auto_merge, plan_merge, plan_rename
from exdedupe.models import NameRecord
from exdedupe.normalize import autocorrect, normalize
from exdedupe.scoring import edit_distance, similarity
from exdedupe.validation import (
    ExactMatch,
    NewName,
    Rejected,
    Suggestion,
    ValidationResult,
    Warned,
    validate,
)

__all__ = [
    "__version__",
    "__license__",
    "NameRecord",
    "Cluster",
    "SimilarMember",
    "Suggestion",
    "Rename",
    "ValidationResult",
    "Rejected",
    "ExactMatch",
    "Warned",
    "NewName",
    "normalize",
    "autocorrect",
    "edit_distance",
    "similarity",
    "build_clusters",
    "validate",
    "plan_merge",
    "plan_auto_merge",
    "plan_rename",
    "apply_plan",
    "load_records",
    "write_jsonl",
    "check_name",
    "review",
    "DedupeError",
    "InvalidInputError",
    "EmptySelectionError",
    "SimilarNameError",
    "RecordFormatError",
]
