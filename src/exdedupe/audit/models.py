"""Typed records of a review run: its events and its manifest.

The manifest describes one review of one snapshot: which thresholds were
used, what the stages found, and which files were written. Free-form
dictionaries are kept to event payloads and stage counters.
"""

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

__all__ = [
    "EventLevel",
    "ReviewEvent",
    "RunStatus",
    "ReviewThresholds",
    "ReviewCounts",
    "RunEnvironment",
    "StageRecord",
    "ArtifactRecord",
    "RunError",
    "ReviewManifest",
    "LogEvent",
]


class EventLevel(StrEnum):
    """Severity of an audit event."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARN = "WARN"
    ERROR = "ERROR"


class ReviewEvent(StrEnum):
    """Event types written to events.jsonl.

    Attributes
    ----------
    RUN_STARTED, RUN_FINISHED : str
        Run boundaries.
    STAGE_STARTED, STAGE_FINISHED : str
        Stage boundaries.
    CLUSTER_FOUND : str
        One duplicate cluster, keyed by its main record.
    RENAME_PLANNED : str
        One auto-merge rename, keyed by the renamed record.
    ERROR : str
        An exception that ended the run.
    """

    RUN_STARTED = "run_started"
    RUN_FINISHED = "run_finished"
    STAGE_STARTED = "stage_started"
    STAGE_FINISHED = "stage_finished"
    CLUSTER_FOUND = "cluster_found"
    RENAME_PLANNED = "rename_planned"
    ERROR = "error"


class RunStatus(StrEnum):
    """Final state of a run. ``partial`` until the run is finished."""

    SUCCESS = "success"
    FAILED = "failed"
    PARTIAL = "partial"


@dataclass(frozen=True)
class ReviewThresholds:
    """The three similarity gates a review ran with.

    Attributes
    ----------
    warn : float
        Suggestion threshold used by name validation.
    cluster : float
        Minimum similarity to join a review cluster.
    auto_merge : float
        Similarity strictly above which a member is renamed unattended.
    """

    warn: float
    cluster: float
    auto_merge: float


@dataclass
class ReviewCounts:
    """What the review found, filled in as stages complete.

    Attributes
    ----------
    records_in : int
        Records in the snapshot.
    clusters : int
        Duplicate clusters found.
    records_in_clusters : int
        Records belonging to some cluster.
    singletons : int
        Records with no similar neighbour.
    renames_planned : int
        Renames in the auto-merge plan.
    noop_renames : int
        Planned renames whose record already carries the target name.
    """

    records_in: int = 0
    clusters: int = 0
    records_in_clusters: int = 0
    singletons: int = 0
    renames_planned: int = 0
    noop_renames: int = 0


@dataclass(frozen=True)
class RunEnvironment:
    """Invocation and interpreter a run was produced by."""

    argv: list[str]
    python_version: str
    platform: str
    exdedupe_version: str
    click_version: str


@dataclass
class StageRecord:
    """Timing and counters of one stage. Unfinished stages keep None timings."""

    name: str
    started_at: str
    finished_at: str | None = None
    duration_seconds: float | None = None
    counters: dict[str, int] = field(default_factory=dict)


@dataclass(frozen=True)
class ArtifactRecord:
    """A file written by the run.

    Attributes
    ----------
    path : str
        POSIX path relative to the run's output directory.
    sha256 : str
        Digest with "sha256:" prefix.
    bytes : int
        File size.
    lines : int | None
        JSONL lines written, None for other files.
    """

    path: str
    sha256: str
    bytes: int
    lines: int | None = None


@dataclass(frozen=True)
class RunError:
    """An exception recorded against the run."""

    timestamp: str
    exception_class: str
    message: str
    stage: str | None = None
    traceback: str | None = None


@dataclass
class ReviewManifest:
    """Contents of run.json."""

    manifest_version: str
    run_id: str
    created_at: str
    environment: RunEnvironment
    thresholds: ReviewThresholds
    status: RunStatus = RunStatus.PARTIAL
    counts: ReviewCounts = field(default_factory=ReviewCounts)
    stages: list[StageRecord] = field(default_factory=list)
    artifacts: list[ArtifactRecord] = field(default_factory=list)
    errors: list[RunError] = field(default_factory=list)
    finished_at: str | None = None
    duration_seconds: float | None = None


@dataclass(frozen=True)
class LogEvent:
    """One line of events.jsonl."""

    ts: str
    run_id: str
    level: EventLevel
    event: ReviewEvent
    data: dict[str, Any]
    stage: str | None = None
    rid: str | None = None
