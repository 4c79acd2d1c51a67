"""Build duplicate clusters from a snapshot of name records."""

from collections.abc import Sequence

from exdedupe.clustering.models import DEFAULT_CLUSTER_THRESHOLD, Cluster, SimilarMember
from exdedupe.models import NameRecord
from exdedupe.normalize import normalize
from exdedupe.scoring import similarity


def build_clusters(
    records: Sequence[NameRecord],
    threshold: float = DEFAULT_CLUSTER_THRESHOLD,
) -> list[Cluster]:
    """Partition records into clusters of likely-duplicate names.

    Greedy single linkage in input order: each record not yet assigned
    becomes the main record of a new cluster and absorbs every other
    unassigned record scoring at least ``threshold`` against it. Similarity
    is never recomputed transitively, so the result depends on input order.

    Parameters
    ----------
    records : Sequence[NameRecord]
        Snapshot to cluster, in insertion order. Never re-sorted.
    threshold : float, optional
        Minimum similarity to join a cluster, by default 0.85.

    Returns
    -------
    list[Cluster]
        Clusters with at least one similar member, largest first. Ties keep
        creation order.

    Raises
    ------
    ValueError
        If threshold is outside [0, 1].
    """
    if not 0.0 <= threshold <= 1.0:
        raise ValueError(f"threshold must be in [0, 1], got {threshold}")

    # Keys are memoized for this call only
    keys = [normalize(record.name) for record in records]
    visited: set[int] = set()
    clusters: list[Cluster] = []

    for i, main in enumerate(records):
        if i in visited:
            continue
        visited.add(i)

        members = _collect_members(i, records, keys, visited, threshold)
        if not members:
            continue

        members.sort(key=lambda member: member.similarity, reverse=True)
        clusters.append(Cluster(main=main, similar=tuple(members)))

    clusters.sort(key=lambda cluster: cluster.total_count, reverse=True)
    return clusters


def _collect_members(
    main_index: int,
    records: Sequence[NameRecord],
    keys: list[str],
    visited: set[int],
    threshold: float,
) -> list[SimilarMember]:
    """Scan unvisited records against one main record.

    Marks every absorbed index as visited.

    Returns
    -------
    list[SimilarMember]
        Members in scan order.
    """
    main_key = keys[main_index]
    members: list[SimilarMember] = []

    for j, other in enumerate(records):
        if j == main_index or j in visited:
            continue

        score = similarity(main_key, keys[j])
        if score >= threshold:
            members.append(SimilarMember(record=other, similarity=score))
            visited.add(j)

    return members
