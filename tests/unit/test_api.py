"""Tests for the public API module."""

import json
from collections.abc import Callable
from pathlib import Path

import pytest

from exdedupe import (
    ExactMatch,
    NameRecord,
    RecordFormatError,
    Warned,
    check_name,
    load_records,
    write_jsonl,
)
from exdedupe.engine import EngineConfig

# ---------------------------------------------------------------------------
# load_records
# ---------------------------------------------------------------------------


@pytest.mark.unit
def test_load_jsonl(write_records: Callable[..., Path]) -> None:
    """Test JSONL store exports load in file order."""
    path = write_records(
        [
            {"id": "a", "exerciseName": "Squat", "weight": 100},
            {"id": "b", "exerciseName": "Bench Press", "weight": 80},
        ]
    )

    records = load_records(path)

    assert [(r.rid, r.name) for r in records] == [("a", "Squat"), ("b", "Bench Press")]
    assert records[0].payload == {"weight": 100}


@pytest.mark.unit
def test_load_json_array(tmp_path: Path) -> None:
    """Test a JSON array file is detected by content."""
    path = tmp_path / "catalogue.json"
    path.write_text(
        json.dumps([{"rid": "c1", "name": "Deadlift"}, {"rid": "c2", "name": "Row"}], indent=2),
        encoding="utf-8",
    )

    records = load_records(path)

    assert [r.name for r in records] == ["Deadlift", "Row"]


@pytest.mark.unit
def test_load_skips_blank_lines(tmp_path: Path) -> None:
    """Test blank JSONL lines are ignored."""
    path = tmp_path / "records.jsonl"
    path.write_text('{"id": 1, "name": "Row"}\n\n   \n{"id": 2, "name": "Squat"}\n')

    assert [r.rid for r in load_records(path)] == ["1", "2"]


@pytest.mark.unit
def test_load_missing_file(tmp_path: Path) -> None:
    """Test a missing file raises FileNotFoundError."""
    with pytest.raises(FileNotFoundError, match="File not found"):
        load_records(tmp_path / "nope.jsonl")


@pytest.mark.unit
def test_load_invalid_json_line(tmp_path: Path) -> None:
    """Test malformed JSONL reports the line number."""
    path = tmp_path / "records.jsonl"
    path.write_text('{"id": 1, "name": "Row"}\n{not json}\n')

    with pytest.raises(RecordFormatError, match="line 2") as exc_info:
        load_records(path)

    assert exc_info.value.line == 2
    assert exc_info.value.file == str(path)


@pytest.mark.unit
def test_load_record_without_name(write_records: Callable[..., Path]) -> None:
    """Test a record lacking a name is reported with its line."""
    path = write_records([{"id": "a", "name": "Row"}, {"id": "b"}])

    with pytest.raises(RecordFormatError, match=r"has no name \(line 2\)"):
        load_records(path)


@pytest.mark.unit
def test_load_non_utf8_file(tmp_path: Path) -> None:
    """Test undecodable bytes raise RecordFormatError."""
    path = tmp_path / "records.jsonl"
    path.write_bytes(b'{"id": 1, "name": "D\xe9velopp\xe9"}\n')

    with pytest.raises(RecordFormatError, match="not valid UTF-8") as exc_info:
        load_records(path)

    assert exc_info.value.file == str(path)


@pytest.mark.unit
def test_load_invalid_json_array(tmp_path: Path) -> None:
    """Test a broken JSON array raises RecordFormatError."""
    path = tmp_path / "records.json"
    path.write_text('[{"id": 1, "name": "Row"},')

    with pytest.raises(RecordFormatError, match="Invalid JSON"):
        load_records(path)


# ---------------------------------------------------------------------------
# write_jsonl
# ---------------------------------------------------------------------------


@pytest.mark.unit
def test_write_jsonl_round_trip(tmp_path: Path) -> None:
    """Test written records load back unchanged."""
    records = [NameRecord("r1", "Développé Couché", {"sets": 3}), NameRecord("r2", "Row")]
    path = tmp_path / "out.jsonl"

    count = write_jsonl(records, path)

    assert count == 2
    assert "Développé" in path.read_text(encoding="utf-8")
    assert load_records(path) == records
    assert load_records(path)[0].payload == {"sets": 3}


@pytest.mark.unit
def test_write_jsonl_sorted_keys(tmp_path: Path) -> None:
    """Test keys are sorted for deterministic output."""
    path = tmp_path / "out.jsonl"

    write_jsonl([NameRecord("r1", "Row")], path)

    line = path.read_text(encoding="utf-8").strip()
    assert list(json.loads(line)) == ["name", "payload", "rid"]


# ---------------------------------------------------------------------------
# check_name
# ---------------------------------------------------------------------------


@pytest.mark.unit
def test_check_name_defaults(make_records: Callable[..., list[NameRecord]]) -> None:
    """Test check_name applies default thresholds."""
    records = make_records("Bench Press")

    assert isinstance(check_name("bench press", records), ExactMatch)
    assert isinstance(check_name("Bench Pres", records), Warned)


@pytest.mark.unit
def test_check_name_uses_config(make_records: Callable[..., list[NameRecord]]) -> None:
    """Test check_name honours the configured limits."""
    records = make_records("Squats", "Squatz", "Squat!s")
    config = EngineConfig(max_suggestions=2, min_name_length=3)

    result = check_name("Squat", records, config=config)

    assert isinstance(result, Warned)
    assert len(result.suggestions) == 2
    assert check_name("Sq", records, config=config).status == "rejected"


@pytest.mark.unit
def test_check_name_external_is_keyword(make_record: Callable[..., NameRecord]) -> None:
    """Test catalogue candidates are passed by keyword and searched after records."""
    records = [make_record("Squat", rid="mine")]
    catalogue = [make_record("squat", rid="catalogue"), make_record("Deadlift", rid="c2")]

    exact = check_name("SQUAT", records, external=catalogue)
    warned = check_name("Deadlif", records, external=catalogue)

    assert isinstance(exact, ExactMatch)
    assert exact.record.rid == "mine"
    assert isinstance(warned, Warned)
    assert warned.suggestions[0].record.rid == "c2"
    with pytest.raises(TypeError):
        check_name("Squat", records, catalogue)  # type: ignore[misc]
