"""Compare two record sources by canonical key.

Typical use is checking a bundled exercise catalogue against what a
store actually holds: which names exist on both sides, and which are
missing from either.
"""

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import Any

from exdedupe.models import NameRecord
from exdedupe.normalize import normalize

__all__ = ["SourceComparison", "compare_sources"]


@dataclass
class SourceComparison:
    """Result of comparing two sources.

    Attributes
    ----------
    left_total : int
        Records in the left source.
    right_total : int
        Records in the right source.
    matches : list[tuple[NameRecord, NameRecord]]
        (left, right) pairs sharing a key, in left order.
    missing_in_right : list[NameRecord]
        Left records whose key the right source lacks.
    missing_in_left : list[NameRecord]
        Right records whose key the left source lacks.
    """

    left_total: int
    right_total: int
    matches: list[tuple[NameRecord, NameRecord]] = field(default_factory=list)
    missing_in_right: list[NameRecord] = field(default_factory=list)
    missing_in_left: list[NameRecord] = field(default_factory=list)

    def summary(self) -> dict[str, int]:
        """Return the comparison counts."""
        return {
            "left_total": self.left_total,
            "right_total": self.right_total,
            "matches": len(self.matches),
            "missing_in_right": len(self.missing_in_right),
            "missing_in_left": len(self.missing_in_left),
        }

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "summary": self.summary(),
            "matches": [
                {"left": left.to_dict(), "right": right.to_dict()} for left, right in self.matches
            ],
            "missing_in_right": [record.to_dict() for record in self.missing_in_right],
            "missing_in_left": [record.to_dict() for record in self.missing_in_left],
        }


def _index(records: Sequence[NameRecord], key: Callable[[str], str]) -> dict[str, NameRecord]:
    index: dict[str, NameRecord] = {}
    for record in records:
        # First record per key wins
        index.setdefault(key(record.name), record)
    return index


def compare_sources(
    left: Sequence[NameRecord],
    right: Sequence[NameRecord],
    key: Callable[[str], str] = normalize,
) -> SourceComparison:
    """Compare the names of two record sources.

    Parameters
    ----------
    left : Sequence[NameRecord]
        First source (e.g. a reference catalogue).
    right : Sequence[NameRecord]
        Second source (e.g. a user's store).
    key : Callable[[str], str], optional
        Key function, by default :func:`normalize`.

    Returns
    -------
    SourceComparison
        Matches and the records missing on each side.
    """
    left_index = _index(left, key)
    right_index = _index(right, key)

    result = SourceComparison(left_total=len(left), right_total=len(right))

    for record in left:
        match = right_index.get(key(record.name))
        if match is None:
            result.missing_in_right.append(record)
        else:
            result.matches.append((record, match))

    result.missing_in_left = [
        record for record in right if key(record.name) not in left_index
    ]

    return result
