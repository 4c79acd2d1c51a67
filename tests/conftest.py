"""Pytest configuration and fixtures for test suite."""

import json
import sys
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Any

import pytest

# Add src directory to path for imports
SRC_PATH = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(SRC_PATH))

from exdedupe.models import NameRecord  # noqa: E402


@pytest.fixture
def make_record() -> Callable[..., NameRecord]:
    """Factory for test records.

    Ids default to ``r<n>`` in creation order so tests can build
    snapshots from names alone.
    """
    counter = iter(range(1, 10_000))

    def _factory(name: str, rid: str | None = None, **payload: Any) -> NameRecord:
        return NameRecord(rid=rid or f"r{next(counter)}", name=name, payload=payload)

    return _factory


@pytest.fixture
def make_records(make_record: Callable[..., NameRecord]) -> Callable[..., list[NameRecord]]:
    """Build a snapshot from a list of names."""

    def _factory(*names: str) -> list[NameRecord]:
        return [make_record(name) for name in names]

    return _factory


@pytest.fixture
def write_records(tmp_path: Path) -> Callable[..., Path]:
    """Write store-style documents to a JSONL file and return its path."""

    def _write(docs: Sequence[dict[str, Any]], filename: str = "records.jsonl") -> Path:
        path = tmp_path / filename
        with path.open("w", encoding="utf-8") as f:
            for doc in docs:
                f.write(json.dumps(doc) + "\n")
        return path

    return _write
