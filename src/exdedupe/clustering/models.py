"""Data models for duplicate clusters."""

from collections.abc import Sequence
from dataclasses import asdict, dataclass
from typing import Any

from exdedupe.models import NameRecord

DEFAULT_CLUSTER_THRESHOLD = 0.85


@dataclass(frozen=True)
class SimilarMember:
    """A record found similar to a cluster's main record.

    Attributes
    ----------
    record : NameRecord
        The similar record.
    similarity : float
        Score of this record's key against the main record's key.
    """

    record: NameRecord
    similarity: float

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {"record": self.record.to_dict(), "similarity": self.similarity}


@dataclass(frozen=True)
class Cluster:
    """Group of records believed to name the same exercise.

    Attributes
    ----------
    main : NameRecord
        Representative record (the first one seen in input order).
    similar : tuple[SimilarMember, ...]
        Members sorted by similarity, highest first.
    """

    main: NameRecord
    similar: tuple[SimilarMember, ...]

    @property
    def total_count(self) -> int:
        """Number of records in the cluster, main included."""
        return 1 + len(self.similar)

    @property
    def records(self) -> tuple[NameRecord, ...]:
        """All records, main first."""
        return (self.main, *(member.record for member in self.similar))

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization.

        Returns
        -------
        dict[str, Any]
            Dictionary representation.
        """
        return {
            "main": self.main.to_dict(),
            "similar": [member.to_dict() for member in self.similar],
            "total_count": self.total_count,
        }

    @staticmethod
    def from_dict(data: dict[str, Any]) -> "Cluster":
        """Deserialize cluster from dictionary.

        Parameters
        ----------
        data : dict[str, Any]
            Dictionary representation (e.g., from JSONL).

        Returns
        -------
        Cluster
            Deserialized cluster.
        """
        return Cluster(
            main=NameRecord.from_dict(data["main"]),
            similar=tuple(
                SimilarMember(
                    record=NameRecord.from_dict(member["record"]),
                    similarity=member["similarity"],
                )
                for member in data.get("similar", [])
            ),
        )


@dataclass(frozen=True)
class ClusterSummary:
    """Counts describing one clustering run.

    Attributes
    ----------
    total_records : int
        Records in the input snapshot.
    clusters : int
        Clusters kept (two or more records each).
    records_in_clusters : int
        Records that belong to some cluster.
    singletons : int
        Records with no qualifying neighbour.
    largest_cluster : int
        Size of the biggest cluster, 0 when there is none.
    """

    total_records: int
    clusters: int
    records_in_clusters: int
    singletons: int
    largest_cluster: int

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)


def summarize_clusters(clusters: Sequence[Cluster], total_records: int) -> ClusterSummary:
    """Summarize a clustering result.

    Parameters
    ----------
    clusters : Sequence[Cluster]
        Output of ``build_clusters``.
    total_records : int
        Size of the snapshot that was clustered.

    Returns
    -------
    ClusterSummary
        Aggregate counts.
    """
    in_clusters = sum(cluster.total_count for cluster in clusters)
    return ClusterSummary(
        total_records=total_records,
        clusters=len(clusters),
        records_in_clusters=in_clusters,
        singletons=total_records - in_clusters,
        largest_cluster=max((cluster.total_count for cluster in clusters), default=0),
    )
