"""Audit trail of a duplicate review.

Main Components
---------------
- RunContext: one audited review, with a ``stage()`` timer
- AuditLogger: events.jsonl writer
- ManifestWriter: run.json builder
- ReviewThresholds, ReviewCounts: typed manifest fields
"""

from exdedupe.audit.context import RunContext
from exdedupe.audit.environment import collect_environment, new_run_id
from exdedupe.audit.logger import AuditLogger
from exdedupe.audit.manifest import MANIFEST_VERSION, ManifestWriter
from exdedupe.audit.models import (
    EventLevel,
    ReviewCounts,
    ReviewEvent,
    ReviewThresholds,
    RunStatus,
)

__all__ = [
    "MANIFEST_VERSION",
    "RunContext",
    "AuditLogger",
    "ManifestWriter",
    "EventLevel",
    "ReviewEvent",
    "ReviewCounts",
    "ReviewThresholds",
    "RunStatus",
    "collect_environment",
    "new_run_id",
]
