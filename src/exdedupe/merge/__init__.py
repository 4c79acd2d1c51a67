"""Rename planning for merging duplicate names.

The planner only computes what to change. Applying the plan atomically is
the persistence layer's job.
"""

from exdedupe.merge.models import DEFAULT_AUTO_MERGE_THRESHOLD, MergeSummary, Rename
from exdedupe.merge.planner import (
    apply_plan,
    plan_auto_merge,
    plan_merge,
    plan_rename,
    summarize_plan,
)

__all__ = [
    "DEFAULT_AUTO_MERGE_THRESHOLD",
    "MergeSummary",
    "Rename",
    "apply_plan",
    "plan_auto_merge",
    "plan_merge",
    "plan_rename",
    "summarize_plan",
]
