"""One audited review run: its event log and its manifest."""

import traceback
from collections.abc import Iterator
from contextlib import contextmanager
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

from exdedupe.audit.environment import collect_environment, new_run_id
from exdedupe.audit.logger import AuditLogger
from exdedupe.audit.manifest import ManifestWriter
from exdedupe.audit.models import ReviewThresholds, RunError, RunStatus
from exdedupe.utils import elapsed_seconds, get_iso_timestamp

__all__ = ["RunContext"]


class RunContext:
    """Lifecycle of one audited review.

    Owns ``events.jsonl`` and ``run.json`` in the run's output directory.
    Used in a ``with`` block, an exception escaping the block is recorded
    and the run is closed as failed.

    Attributes
    ----------
    run_id : str
        Unique run identifier.
    output_dir : Path
        Directory for every file the run writes.
    audit_logger : AuditLogger
        Event log.
    manifest_writer : ManifestWriter
        Manifest builder.
    start_time : datetime
        Run start (UTC).
    status : RunStatus | None
        Final status, None while the run is open.
    """

    def __init__(
        self,
        run_id: str,
        output_dir: Path,
        audit_logger: AuditLogger,
        manifest_writer: ManifestWriter,
    ) -> None:
        self.run_id = run_id
        self.output_dir = output_dir
        self.audit_logger = audit_logger
        self.manifest_writer = manifest_writer
        self.start_time = datetime.now(UTC)
        self.status: RunStatus | None = None

    @classmethod
    def start(
        cls,
        output_dir: Path,
        thresholds: ReviewThresholds,
        records_in: int = 0,
        command_argv: list[str] | None = None,
    ) -> "RunContext":
        """Open a run and log ``run_started``.

        Creates ``output_dir`` and its ``reports`` subdirectory.

        Parameters
        ----------
        output_dir : Path
            Output directory for run artifacts.
        thresholds : ReviewThresholds
            Similarity gates the review runs with.
        records_in : int, optional
            Size of the snapshot under review.
        command_argv : list[str] | None, optional
            Command line, ``sys.argv`` if None.

        Returns
        -------
        RunContext
            Started run.
        """
        run_id = new_run_id()
        output_dir.mkdir(parents=True, exist_ok=True)
        (output_dir / "reports").mkdir(exist_ok=True)

        environment = collect_environment(command_argv)
        audit_logger = AuditLogger(run_id=run_id, log_path=output_dir / "events.jsonl")
        manifest_writer = ManifestWriter(
            run_id=run_id,
            output_dir=output_dir,
            environment=environment,
            thresholds=thresholds,
        )
        manifest_writer.update_counts(records_in=records_in)
        audit_logger.run_started(thresholds, records_in, environment.argv)

        return cls(run_id, output_dir, audit_logger, manifest_writer)

    @contextmanager
    def stage(self, name: str, expected: int | None = None) -> Iterator[dict[str, int]]:
        """Time a stage and yield the counters dict it fills in.

        The stage is stamped finished, in the manifest and the log, only
        when the block completes. If it raises, the stage stays open so the
        error is attributed to it.

        Examples
        --------
            >>> with run.stage("stage1_cluster", expected=len(records)) as counters:
            ...     counters["clusters"] = len(clusters)
        """
        started = datetime.now(UTC)
        self.manifest_writer.add_stage(name)
        self.audit_logger.stage_started(name, expected)
        counters: dict[str, int] = {}

        yield counters

        duration = elapsed_seconds(started)
        self.manifest_writer.finish_stage(name, duration, counters)
        self.audit_logger.stage_finished(name, duration, counters)

    def record_error(self, exception: BaseException, include_traceback: bool = False) -> None:
        """Record an exception against the current stage, in log and manifest."""
        tb = None
        if include_traceback:
            tb = "".join(
                traceback.format_exception(type(exception), exception, exception.__traceback__)
            )

        self.manifest_writer.add_error(
            RunError(
                timestamp=get_iso_timestamp(),
                exception_class=type(exception).__name__,
                message=str(exception),
                stage=self.audit_logger.current_stage,
                traceback=tb,
            )
        )
        self.audit_logger.error(exception, traceback=tb)

    def finish(self, status: RunStatus = RunStatus.SUCCESS) -> None:
        """Close the event log and write the manifest.

        The log is closed before it is hashed so the recorded digest
        matches the file on disk. A second call does nothing.
        """
        if self.status is not None:
            return
        self.status = status

        duration = elapsed_seconds(self.start_time)
        self.audit_logger.run_finished(status, duration)
        self.audit_logger.close()

        self.manifest_writer.add_artifact(self.audit_logger.log_path)
        self.manifest_writer.finish(status, duration)

    def __enter__(self) -> "RunContext":
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        if exc_type is not None:
            self.record_error(exc_val, include_traceback=True)
            self.finish(RunStatus.FAILED)
        else:
            self.finish(RunStatus.SUCCESS)
