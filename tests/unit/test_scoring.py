"""Tests for edit distance and similarity."""

import pytest

from exdedupe.scoring import edit_distance, name_similarity, similarity


@pytest.mark.unit
@pytest.mark.parametrize(
    ("a", "b", "expected"),
    [
        ("kitten", "sitting", 3),
        ("flaw", "lawn", 2),
        ("", "abc", 3),
        ("abc", "", 3),
        ("", "", 0),
        ("squat", "squat", 0),
        ("squat", "squats", 1),
        ("bench pres", "bench press", 1),
    ],
)
def test_edit_distance(a: str, b: str, expected: int) -> None:
    """Test Levenshtein distance on known pairs."""
    assert edit_distance(a, b) == expected


@pytest.mark.unit
def test_similarity_of_empty_keys_is_one() -> None:
    """Test the degenerate empty/empty case."""
    assert similarity("", "") == 1.0


@pytest.mark.unit
@pytest.mark.parametrize("key", ["", "a", "bench press", "développé couché"])
def test_similarity_identity(key: str) -> None:
    """Test a key is fully similar to itself."""
    assert similarity(key, key) == 1.0


@pytest.mark.unit
@pytest.mark.parametrize(
    ("a", "b"),
    [
        ("bench press", "bench pres"),
        ("squat", "front squat"),
        ("", "deadlift"),
        ("lat pulldown", "lateral raise"),
    ],
)
def test_similarity_is_symmetric(a: str, b: str) -> None:
    """Test score(a, b) == score(b, a)."""
    assert similarity(a, b) == similarity(b, a)


@pytest.mark.unit
def test_similarity_values() -> None:
    """Test the (L - distance) / L formula."""
    assert similarity("bench pres", "bench press") == pytest.approx(10 / 11)
    assert similarity("squat", "squats") == pytest.approx(5 / 6)
    assert similarity("abc", "xyz") == 0.0
    assert similarity("", "row") == 0.0


@pytest.mark.unit
def test_similarity_stays_in_unit_interval() -> None:
    """Test scores never leave [0, 1]."""
    pairs = [("a", "bbbbbbbb"), ("row", "rowing machine"), ("x", "")]
    for a, b in pairs:
        assert 0.0 <= similarity(a, b) <= 1.0


@pytest.mark.unit
def test_name_similarity_normalizes_first() -> None:
    """Test raw names are normalized before scoring."""
    assert name_similarity("Bench Press", "bench press!") == 1.0
    assert name_similarity("The Squat", "squat") == 1.0
    assert name_similarity("Bench Pres", "Bench Press") == pytest.approx(10 / 11)
