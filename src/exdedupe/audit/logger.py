"""Append-only JSONL log of a review run.

One JSON object per line, flushed as soon as it is written, so the log
of a run that crashed still ends at the last thing that happened.
"""

from __future__ import annotations

import json
from dataclasses import asdict
from pathlib import Path
from typing import TYPE_CHECKING, Any

from exdedupe.audit.models import EventLevel, LogEvent, ReviewEvent, ReviewThresholds
from exdedupe.utils import get_iso_timestamp

if TYPE_CHECKING:
    from exdedupe.clustering import Cluster
    from exdedupe.merge import Rename

__all__ = ["AuditLogger"]


class AuditLogger:
    """Writes the events of one run to ``events.jsonl``.

    Attributes
    ----------
    run_id : str
        Run the events belong to.
    log_path : Path
        JSONL file, opened for appending.
    current_stage : str | None
        Stage attached to events that do not name one.
    """

    def __init__(self, run_id: str, log_path: Path) -> None:
        self.run_id = run_id
        self.log_path = log_path
        self.current_stage: str | None = None
        log_path.parent.mkdir(parents=True, exist_ok=True)
        self._stream = log_path.open("a", encoding="utf-8")

    def __enter__(self) -> AuditLogger:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    @property
    def closed(self) -> bool:
        """True once the log has been closed."""
        return self._stream.closed

    def close(self) -> None:
        """Close the log. Safe to call more than once."""
        if not self._stream.closed:
            self._stream.close()

    def emit(
        self,
        event: ReviewEvent,
        data: dict[str, Any] | None = None,
        *,
        level: EventLevel = EventLevel.INFO,
        stage: str | None = None,
        rid: str | None = None,
    ) -> LogEvent:
        """Append one event and flush it.

        Parameters
        ----------
        event : ReviewEvent
            Event type.
        data : dict[str, Any] | None, optional
            JSON-serializable payload.
        level : EventLevel, optional
            Severity, by default INFO.
        stage : str | None, optional
            Stage name, defaults to ``current_stage``.
        rid : str | None, optional
            Record the event is about.

        Returns
        -------
        LogEvent
            The event as written.
        """
        record = LogEvent(
            ts=get_iso_timestamp(),
            run_id=self.run_id,
            level=level,
            event=event,
            data=data or {},
            stage=stage or self.current_stage,
            rid=rid,
        )
        self._stream.write(json.dumps(asdict(record), ensure_ascii=False) + "\n")
        self._stream.flush()
        return record

    # Run and stage boundaries

    def run_started(self, thresholds: ReviewThresholds, records_in: int, argv: list[str]) -> None:
        """Log the start of a review with its thresholds and input size."""
        self.emit(
            ReviewEvent.RUN_STARTED,
            {"argv": argv, "records_in": records_in, "thresholds": asdict(thresholds)},
        )

    def run_finished(self, status: str, duration_seconds: float) -> None:
        """Log the end of a run."""
        self.emit(
            ReviewEvent.RUN_FINISHED,
            {"status": str(status), "duration_seconds": duration_seconds},
            stage=None,
        )

    def stage_started(self, stage: str, expected: int | None = None) -> None:
        """Log a stage start and make it the current stage."""
        self.current_stage = stage
        data = {} if expected is None else {"expected": expected}
        self.emit(ReviewEvent.STAGE_STARTED, data, stage=stage)

    def stage_finished(self, stage: str, duration_seconds: float, counters: dict[str, int]) -> None:
        """Log a stage end and clear the current stage."""
        self.emit(
            ReviewEvent.STAGE_FINISHED,
            {"duration_seconds": duration_seconds, "counters": dict(counters)},
            stage=stage,
        )
        self.current_stage = None

    # Review findings

    def cluster_found(self, cluster: Cluster) -> None:
        """Log one duplicate cluster under its main record's id."""
        self.emit(
            ReviewEvent.CLUSTER_FOUND,
            {
                "main_name": cluster.main.name,
                "members": [
                    {"rid": m.record.rid, "name": m.record.name, "similarity": m.similarity}
                    for m in cluster.similar
                ],
            },
            rid=cluster.main.rid,
        )

    def rename_planned(self, rename: Rename) -> None:
        """Log one planned rename under the renamed record's id."""
        self.emit(
            ReviewEvent.RENAME_PLANNED,
            {
                "old_name": rename.record.name,
                "new_name": rename.new_name,
                "noop": rename.is_noop,
            },
            rid=rename.record.rid,
        )

    def error(self, exc: BaseException, traceback: str | None = None) -> None:
        """Log an exception at ERROR level in the current stage."""
        data: dict[str, Any] = {"exception_class": type(exc).__name__, "message": str(exc)}
        if traceback is not None:
            data["traceback"] = traceback
        self.emit(ReviewEvent.ERROR, data, level=EventLevel.ERROR)
