"""Engine configuration and review result dataclasses."""

from collections.abc import Mapping
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any

from exdedupe.clustering import DEFAULT_CLUSTER_THRESHOLD
from exdedupe.merge import DEFAULT_AUTO_MERGE_THRESHOLD
from exdedupe.normalize import DEFAULT_CORRECTIONS, load_corrections
from exdedupe.validation import (
    DEFAULT_MAX_SUGGESTIONS,
    DEFAULT_MIN_LENGTH,
    DEFAULT_WARN_THRESHOLD,
)


@dataclass
class EngineConfig:
    """Thresholds and limits shared by all engine operations.

    The three thresholds gate increasingly consequential actions and must
    not decrease: warning a user < grouping for review < renaming without
    confirmation.

    Attributes
    ----------
    warn_threshold : float
        Similarity that triggers a suggestion during validation (default: 0.7).
    cluster_threshold : float
        Similarity that groups records for review (default: 0.85).
    auto_merge_threshold : float
        Similarity strictly above which a member is renamed without
        confirmation (default: 0.9).
    max_suggestions : int
        Suggestions returned by validation (default: 5).
    min_name_length : int
        Minimum trimmed length of a new name (default: 2).
    corrections_path : Path | None
        Optional JSON file of extra auto-corrections.
    output_dir : Path
        Base directory for review outputs.
    """

    warn_threshold: float = DEFAULT_WARN_THRESHOLD
    cluster_threshold: float = DEFAULT_CLUSTER_THRESHOLD
    auto_merge_threshold: float = DEFAULT_AUTO_MERGE_THRESHOLD
    max_suggestions: int = DEFAULT_MAX_SUGGESTIONS
    min_name_length: int = DEFAULT_MIN_LENGTH
    corrections_path: Path | None = None
    output_dir: Path = field(default_factory=lambda: Path("out"))

    def __post_init__(self) -> None:
        """Coerce paths and validate."""
        for name in ("warn_threshold", "cluster_threshold", "auto_merge_threshold"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"{name} must be in [0, 1], got {value}")

        if not self.warn_threshold <= self.cluster_threshold <= self.auto_merge_threshold:
            raise ValueError(
                "thresholds must satisfy warn <= cluster <= auto_merge, got "
                f"{self.warn_threshold}, {self.cluster_threshold}, {self.auto_merge_threshold}"
            )

        if self.max_suggestions < 1:
            raise ValueError(f"max_suggestions must be >= 1, got {self.max_suggestions}")

        if self.min_name_length < 1:
            raise ValueError(f"min_name_length must be >= 1, got {self.min_name_length}")

        self.output_dir = Path(self.output_dir)
        if self.corrections_path is not None:
            self.corrections_path = Path(self.corrections_path)

    def corrections(self) -> Mapping[str, str]:
        """Return the effective auto-correction table."""
        if self.corrections_path is None:
            return DEFAULT_CORRECTIONS
        return load_corrections(self.corrections_path)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        data = asdict(self)
        data["output_dir"] = str(self.output_dir)
        data["corrections_path"] = (
            str(self.corrections_path) if self.corrections_path is not None else None
        )
        return data


@dataclass
class ReviewResult:
    """Outcome of one review run.

    Attributes
    ----------
    success : bool
        Whether the run completed.
    total_records : int
        Records in the snapshot.
    total_clusters : int
        Duplicate clusters found.
    records_in_clusters : int
        Records belonging to some cluster.
    auto_merge_renames : int
        Renames in the auto-merge plan.
    output_files : dict[str, str]
        Artifact name -> path.
    error_message : str | None
        Error message if the run failed.
    """

    success: bool
    total_records: int
    total_clusters: int = 0
    records_in_clusters: int = 0
    auto_merge_renames: int = 0
    output_files: dict[str, str] = field(default_factory=dict)
    error_message: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)
