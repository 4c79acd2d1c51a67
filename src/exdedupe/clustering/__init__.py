"""Greedy single-linkage clustering of near-duplicate names.

Clusters are review material: one main record and the records found
similar to it, rebuilt from a full snapshot on every run.
"""

from exdedupe.clustering.cluster_builder import build_clusters
from exdedupe.clustering.models import (
    DEFAULT_CLUSTER_THRESHOLD,
    Cluster,
    ClusterSummary,
    SimilarMember,
    summarize_clusters,
)

__all__ = [
    "Cluster",
    "ClusterSummary",
    "DEFAULT_CLUSTER_THRESHOLD",
    "SimilarMember",
    "build_clusters",
    "summarize_clusters",
]
