"""Tests for greedy single-linkage clustering."""

from collections.abc import Callable

import pytest

from exdedupe.clustering import (
    Cluster,
    SimilarMember,
    build_clusters,
    summarize_clusters,
)
from exdedupe.models import NameRecord

Records = Callable[..., list[NameRecord]]


def _names(cluster: Cluster) -> list[str]:
    return [record.name for record in cluster.records]


# ---------------------------------------------------------------------------
# build_clusters — happy path
# ---------------------------------------------------------------------------


@pytest.mark.unit
def test_empty_input() -> None:
    """Test no records give no clusters."""
    assert build_clusters([]) == []


@pytest.mark.unit
def test_bench_press_example(make_records: Records) -> None:
    """Test punctuation-only variants cluster with similarity 1.0."""
    records = make_records("Bench Press", "bench press!", "Squat")

    clusters = build_clusters(records, threshold=0.85)

    assert len(clusters) == 1
    cluster = clusters[0]
    assert cluster.main == records[0]
    assert cluster.similar == (SimilarMember(record=records[1], similarity=1.0),)
    assert cluster.total_count == 2


@pytest.mark.unit
def test_record_without_neighbour_produces_no_cluster(make_records: Records) -> None:
    """Test singletons are dropped from the result."""
    records = make_records("Squat", "Deadlift", "Overhead Press")

    assert build_clusters(records) == []


@pytest.mark.unit
def test_members_sorted_by_similarity(make_records: Records) -> None:
    """Test members are ordered highest similarity first."""
    records = make_records("Bench Press", "Bench Pres", "bench press")

    clusters = build_clusters(records, threshold=0.85)

    assert len(clusters) == 1
    assert [m.record.name for m in clusters[0].similar] == ["bench press", "Bench Pres"]
    assert [m.similarity for m in clusters[0].similar] == [1.0, pytest.approx(10 / 11)]


@pytest.mark.unit
def test_member_ties_keep_scan_order(make_records: Records) -> None:
    """Test equal similarities keep input order."""
    records = make_records("Deadlift", "deadlift", "DEADLIFT")

    clusters = build_clusters(records)

    assert [m.record.rid for m in clusters[0].similar] == [records[1].rid, records[2].rid]


@pytest.mark.unit
def test_clusters_sorted_by_size_then_creation(make_records: Records) -> None:
    """Test larger clusters first, ties in creation order."""
    records = make_records(
        "Lunge", "lunge", "Deadlift", "deadlift", "Deadlift!", "Curl", "curl"
    )

    clusters = build_clusters(records)

    assert [c.main.name for c in clusters] == ["Deadlift", "Lunge", "Curl"]
    assert [c.total_count for c in clusters] == [3, 2, 2]


# ---------------------------------------------------------------------------
# build_clusters — greedy semantics
# ---------------------------------------------------------------------------


@pytest.mark.unit
def test_clustering_depends_on_input_order(make_records: Records) -> None:
    """Test the first unvisited record becomes main and links are not transitive."""
    forward = build_clusters(make_records("Squat", "Squats", "Squatss"), threshold=0.8)
    backward = build_clusters(make_records("Squatss", "Squats", "Squat"), threshold=0.8)

    assert [_names(c) for c in forward] == [["Squat", "Squats"]]
    assert [_names(c) for c in backward] == [["Squatss", "Squats"]]


@pytest.mark.unit
def test_clustering_is_a_partition(make_records: Records) -> None:
    """Test every record appears at most once across clusters."""
    records = make_records(
        "Bench Press",
        "Bench Pres",
        "bench press",
        "Incline Bench Press",
        "Squat",
        "Squats",
        "Front Squat",
        "Deadlift",
        "Dead Lift",
        "Deadlifts",
        "Row",
    )

    clusters = build_clusters(records, threshold=0.75)

    seen = [record.rid for cluster in clusters for record in cluster.records]
    assert len(seen) == len(set(seen))
    assert set(seen) <= {record.rid for record in records}


@pytest.mark.unit
def test_threshold_one_only_groups_exact_keys(make_records: Records) -> None:
    """Test threshold 1.0 restricts clusters to identical canonical keys."""
    records = make_records("Squat", "Squats", "the squat")

    clusters = build_clusters(records, threshold=1.0)

    assert [_names(c) for c in clusters] == [["Squat", "the squat"]]


@pytest.mark.unit
def test_threshold_zero_groups_everything(make_records: Records) -> None:
    """Test threshold 0.0 puts every record in the first cluster."""
    records = make_records("Squat", "Deadlift", "Row")

    clusters = build_clusters(records, threshold=0.0)

    assert len(clusters) == 1
    assert clusters[0].total_count == 3


@pytest.mark.unit
@pytest.mark.parametrize("threshold", [-0.1, 1.5])
def test_invalid_threshold(threshold: float) -> None:
    """Test thresholds outside [0, 1] are rejected."""
    with pytest.raises(ValueError, match="threshold"):
        build_clusters([], threshold=threshold)


@pytest.mark.unit
def test_records_are_not_mutated(make_records: Records) -> None:
    """Test clustering leaves the snapshot as it was."""
    records = make_records("Squat", "squat")
    before = [(r.rid, r.name) for r in records]

    build_clusters(records)

    assert [(r.rid, r.name) for r in records] == before


# ---------------------------------------------------------------------------
# Models
# ---------------------------------------------------------------------------


@pytest.mark.unit
def test_cluster_dict_round_trip(make_records: Records) -> None:
    """Test Cluster survives to_dict/from_dict."""
    records = make_records("Bench Press", "bench press!")
    cluster = build_clusters(records)[0]

    data = cluster.to_dict()

    assert data["total_count"] == 2
    assert Cluster.from_dict(data) == cluster


@pytest.mark.unit
def test_summarize_clusters(make_records: Records) -> None:
    """Test aggregate counts."""
    records = make_records("Squat", "squat", "SQUAT", "Row", "row", "Deadlift")
    clusters = build_clusters(records)

    summary = summarize_clusters(clusters, total_records=len(records))

    assert summary.clusters == 2
    assert summary.records_in_clusters == 5
    assert summary.singletons == 1
    assert summary.largest_cluster == 3


@pytest.mark.unit
def test_summarize_no_clusters() -> None:
    """Test summary of an empty result."""
    summary = summarize_clusters([], total_records=4)

    assert summary.to_dict() == {
        "total_records": 4,
        "clusters": 0,
        "records_in_clusters": 0,
        "singletons": 4,
        "largest_cluster": 0,
    }
