"""Data models for rename plans."""

from dataclasses import asdict, dataclass, field
from typing import Any

from exdedupe.models import NameRecord

DEFAULT_AUTO_MERGE_THRESHOLD = 0.9


@dataclass(frozen=True)
class Rename:
    """One proposed rewrite of a record's name.

    Attributes
    ----------
    record : NameRecord
        Record to rewrite, as it was in the snapshot.
    new_name : str
        Name to write.
    """

    record: NameRecord
    new_name: str

    @property
    def is_noop(self) -> bool:
        """True when the record already carries the new name."""
        return self.record.name == self.new_name

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization.

        Returns
        -------
        dict[str, Any]
            Dictionary with rid, old and new name.
        """
        return {
            "rid": self.record.rid,
            "old_name": self.record.name,
            "new_name": self.new_name,
        }


@dataclass
class MergeSummary:
    """Summary statistics for a rename plan.

    Attributes
    ----------
    renames : int
        Number of records the plan rewrites.
    targets : dict[str, int]
        Renamed record count per target name.
    noops : int
        Renames whose record already carries the target name.
    """

    renames: int = 0
    targets: dict[str, int] = field(default_factory=dict)
    noops: int = 0

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)
