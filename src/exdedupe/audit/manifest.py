"""run.json: what one review found and the files it wrote."""

import json
import os
from dataclasses import asdict
from pathlib import Path
from typing import Any

from exdedupe.audit.models import (
    ArtifactRecord,
    ReviewManifest,
    ReviewThresholds,
    RunEnvironment,
    RunError,
    RunStatus,
    StageRecord,
)
from exdedupe.utils import calculate_file_sha256, get_iso_timestamp

__all__ = ["ManifestWriter", "MANIFEST_VERSION"]

MANIFEST_VERSION = "2.0.0"


class ManifestWriter:
    """Builds a ReviewManifest in memory and writes it once, atomically.

    Attributes
    ----------
    manifest : ReviewManifest
        Manifest being built.
    output_dir : Path
        Run output directory. Artifact paths are stored relative to it.
    manifest_path : Path
        Final location of run.json.
    """

    def __init__(
        self,
        run_id: str,
        output_dir: Path,
        environment: RunEnvironment,
        thresholds: ReviewThresholds,
    ) -> None:
        self.output_dir = output_dir
        self.manifest_path = output_dir / "run.json"
        self.manifest = ReviewManifest(
            manifest_version=MANIFEST_VERSION,
            run_id=run_id,
            created_at=get_iso_timestamp(),
            environment=environment,
            thresholds=thresholds,
        )

    def update_counts(self, **counts: int) -> None:
        """Set review counts by field name.

        Raises
        ------
        AttributeError
            If a name is not a ReviewCounts field.
        """
        for name, value in counts.items():
            if not hasattr(self.manifest.counts, name):
                raise AttributeError(f"Unknown review count: {name}")
            setattr(self.manifest.counts, name, value)

    def stage(self, name: str) -> StageRecord:
        """Return the registered stage called ``name``.

        Raises
        ------
        ValueError
            If the stage was never added.
        """
        for stage in self.manifest.stages:
            if stage.name == name:
                return stage
        raise ValueError(f"Stage not found: {name}")

    def add_stage(self, name: str) -> StageRecord:
        """Register a stage as started now."""
        stage = StageRecord(name=name, started_at=get_iso_timestamp())
        self.manifest.stages.append(stage)
        return stage

    def finish_stage(self, name: str, duration_seconds: float, counters: dict[str, int]) -> None:
        """Stamp a stage finished and store its counters."""
        stage = self.stage(name)
        stage.finished_at = get_iso_timestamp()
        stage.duration_seconds = duration_seconds
        stage.counters.update(counters)

    def add_artifact(self, path: Path, lines: int | None = None) -> ArtifactRecord:
        """Hash a written file and register it.

        Parameters
        ----------
        path : Path
            File inside the output directory.
        lines : int | None, optional
            JSONL lines written, if the file is JSONL.

        Returns
        -------
        ArtifactRecord
            The registered artifact.
        """
        artifact = ArtifactRecord(
            path=path.relative_to(self.output_dir).as_posix(),
            sha256=calculate_file_sha256(path),
            bytes=path.stat().st_size,
            lines=lines,
        )
        self.manifest.artifacts.append(artifact)
        return artifact

    def add_error(self, error: RunError) -> None:
        self.manifest.errors.append(error)

    def finish(self, status: RunStatus, duration_seconds: float) -> None:
        """Set the final status and write run.json."""
        self.manifest.status = status
        self.manifest.finished_at = get_iso_timestamp()
        self.manifest.duration_seconds = duration_seconds
        self._write_atomic(self.manifest_path)

    def _write_atomic(self, path: Path) -> None:
        # Readers see either the previous run.json or the complete new one
        temp_path = path.with_suffix(".tmp")
        with temp_path.open("w", encoding="utf-8") as f:
            json.dump(self.to_dict(), f, indent=2, ensure_ascii=False)
            f.write("\n")
            f.flush()
            os.fsync(f.fileno())
        temp_path.replace(path)

    def to_dict(self) -> dict[str, Any]:
        """Return the manifest as a JSON-ready dictionary."""
        return asdict(self.manifest)
