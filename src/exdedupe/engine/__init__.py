"""Review orchestration.

Runs clustering and auto-merge planning over one snapshot with a full
audit trail, and holds the engine configuration.
"""

from exdedupe.engine.config import EngineConfig, ReviewResult
from exdedupe.engine.runner import run_review

__all__ = [
    "EngineConfig",
    "ReviewResult",
    "run_review",
]
