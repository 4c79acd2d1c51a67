"""Tests for the JSONL audit logger."""

import json
from collections.abc import Callable
from pathlib import Path

import pytest

from exdedupe.audit import AuditLogger, EventLevel, ReviewEvent, ReviewThresholds
from exdedupe.clustering import Cluster, SimilarMember
from exdedupe.merge import Rename
from exdedupe.models import NameRecord


def _read_events(path: Path) -> list[dict]:
    with path.open() as f:
        return [json.loads(line) for line in f if line.strip()]


@pytest.mark.unit
def test_event_fields(tmp_path: Path) -> None:
    """Test one event carries every field, with null defaults."""
    log_path = tmp_path / "logs" / "events.jsonl"

    with AuditLogger(run_id="run-1", log_path=log_path) as logger:
        written = logger.emit(ReviewEvent.RUN_STARTED, {"n": 1})

    (event,) = _read_events(log_path)
    assert event["run_id"] == "run-1"
    assert event["event"] == "run_started"
    assert event["level"] == "INFO"
    assert event["data"] == {"n": 1}
    assert event["stage"] is None
    assert event["rid"] is None
    assert event["ts"].endswith("Z")
    assert written.event is ReviewEvent.RUN_STARTED
    assert written.level is EventLevel.INFO


@pytest.mark.unit
def test_events_flushed_immediately(tmp_path: Path) -> None:
    """Test events are readable before the logger is closed."""
    log_path = tmp_path / "events.jsonl"
    logger = AuditLogger(run_id="run-1", log_path=log_path)

    logger.stage_started("stage1_cluster")

    assert len(_read_events(log_path)) == 1
    logger.close()
    logger.close()
    assert logger.closed


@pytest.mark.unit
def test_run_started_carries_thresholds(tmp_path: Path) -> None:
    """Test the first event records thresholds, input size and argv."""
    log_path = tmp_path / "events.jsonl"
    thresholds = ReviewThresholds(warn=0.7, cluster=0.85, auto_merge=0.9)

    with AuditLogger(run_id="run-1", log_path=log_path) as logger:
        logger.run_started(thresholds, records_in=12, argv=["exdedupe", "review"])

    (event,) = _read_events(log_path)
    assert event["data"] == {
        "argv": ["exdedupe", "review"],
        "records_in": 12,
        "thresholds": {"warn": 0.7, "cluster": 0.85, "auto_merge": 0.9},
    }


@pytest.mark.unit
def test_stage_attached_until_finished(tmp_path: Path) -> None:
    """Test events between stage start and finish carry the stage name."""
    log_path = tmp_path / "events.jsonl"

    with AuditLogger(run_id="run-1", log_path=log_path) as logger:
        logger.stage_started("stage1_cluster", expected=3)
        logger.error(ValueError("inside"))
        logger.stage_finished("stage1_cluster", duration_seconds=0.1, counters={"clusters": 1})
        logger.run_finished("success", duration_seconds=0.2)

    events = _read_events(log_path)
    assert [e["stage"] for e in events] == [
        "stage1_cluster",
        "stage1_cluster",
        "stage1_cluster",
        None,
    ]
    assert events[0]["data"] == {"expected": 3}
    assert events[2]["data"]["counters"] == {"clusters": 1}
    assert logger.current_stage is None


@pytest.mark.unit
def test_cluster_found_event(tmp_path: Path, make_record: Callable[..., NameRecord]) -> None:
    """Test a cluster is logged under its main record with every member."""
    log_path = tmp_path / "events.jsonl"
    main = make_record("Squat")
    cluster = Cluster(
        main=main,
        similar=(
            SimilarMember(record=make_record("squats"), similarity=0.92),
            SimilarMember(record=make_record("Squatt"), similarity=0.875),
        ),
    )

    with AuditLogger(run_id="run-1", log_path=log_path) as logger:
        logger.cluster_found(cluster)

    (event,) = _read_events(log_path)
    assert event["event"] == "cluster_found"
    assert event["rid"] == "r1"
    assert event["data"] == {
        "main_name": "Squat",
        "members": [
            {"rid": "r2", "name": "squats", "similarity": 0.92},
            {"rid": "r3", "name": "Squatt", "similarity": 0.875},
        ],
    }


@pytest.mark.unit
def test_rename_planned_flags_noop(tmp_path: Path, make_record: Callable[..., NameRecord]) -> None:
    """Test renames are keyed by the renamed record and flag no-ops."""
    log_path = tmp_path / "events.jsonl"
    squats = make_record("squats", rid="r2")
    already = make_record("Squat", rid="r3")

    with AuditLogger(run_id="run-1", log_path=log_path) as logger:
        logger.rename_planned(Rename(record=squats, new_name="Squat"))
        logger.rename_planned(Rename(record=already, new_name="Squat"))

    first, second = _read_events(log_path)
    assert first["rid"] == "r2"
    assert first["data"] == {"old_name": "squats", "new_name": "Squat", "noop": False}
    assert second["data"]["noop"] is True


@pytest.mark.unit
def test_error_event(tmp_path: Path) -> None:
    """Test errors are logged at ERROR level with the exception class."""
    log_path = tmp_path / "events.jsonl"

    with AuditLogger(run_id="run-1", log_path=log_path) as logger:
        logger.stage_started("stage2_auto_merge")
        logger.error(ValueError("bad threshold"), traceback="Traceback ...")

    event = _read_events(log_path)[-1]
    assert event["level"] == "ERROR"
    assert event["stage"] == "stage2_auto_merge"
    assert event["data"] == {
        "exception_class": "ValueError",
        "message": "bad threshold",
        "traceback": "Traceback ...",
    }


@pytest.mark.unit
def test_log_is_appended(tmp_path: Path) -> None:
    """Test reopening a log appends instead of truncating."""
    log_path = tmp_path / "events.jsonl"

    with AuditLogger(run_id="run-1", log_path=log_path) as logger:
        logger.stage_started("stage1_cluster")
    with AuditLogger(run_id="run-2", log_path=log_path) as logger:
        logger.stage_started("stage1_cluster")

    assert [e["run_id"] for e in _read_events(log_path)] == ["run-1", "run-2"]
