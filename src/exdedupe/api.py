"""Public API for loading records and running the engine.

This module provides the high-level entry points of exdedupe:
- Loading name records from JSON/JSONL exports of a record store
- Writing results as JSONL
- Checking a proposed name
- Running an audited duplicate review
"""

from __future__ import annotations

import json
from collections.abc import Iterable, Sequence
from pathlib import Path
from typing import TYPE_CHECKING, Any

from exdedupe.errors import RecordFormatError
from exdedupe.models import NameRecord
from exdedupe.validation import ValidationResult, validate

if TYPE_CHECKING:
    from exdedupe.engine.config import EngineConfig, ReviewResult

__all__ = [
    "load_records",
    "write_jsonl",
    "check_name",
    "review",
]


def load_records(path: str | Path) -> list[NameRecord]:
    """Load name records from a JSON array or a JSONL file.

    The format is chosen by content: a file whose first non-blank
    character is ``[`` is read as one JSON array, anything else as one
    object per line. Order is preserved, which matters for clustering.

    Parameters
    ----------
    path : str | Path
        File to read.

    Returns
    -------
    list[NameRecord]
        Records in file order.

    Raises
    ------
    FileNotFoundError
        If the file does not exist.
    RecordFormatError
        If the file is not UTF-8, or the file or one of its records is
        malformed.

    Examples
    --------
        >>> from exdedupe import load_records
        >>> records = load_records("exercises.jsonl")
        >>> records[0].name
        'Bench Press'
    """
    file_path = Path(path)

    if not file_path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    try:
        text = file_path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise RecordFormatError(f"File is not valid UTF-8: {e}", file=str(file_path)) from e

    if text.lstrip().startswith("["):
        try:
            items = json.loads(text)
        except json.JSONDecodeError as e:
            raise RecordFormatError(f"Invalid JSON: {e}", file=str(file_path)) from e
        return [_record_from(item, file_path) for item in items]

    records: list[NameRecord] = []
    for line_no, line in enumerate(text.splitlines(), start=1):
        if not line.strip():
            continue
        try:
            item = json.loads(line)
        except json.JSONDecodeError as e:
            raise RecordFormatError(
                f"Invalid JSON on line {line_no}: {e}", file=str(file_path), line=line_no
            ) from e
        records.append(_record_from(item, file_path, line_no))
    return records


def _record_from(item: Any, file_path: Path, line_no: int | None = None) -> NameRecord:
    try:
        return NameRecord.from_dict(item)
    except RecordFormatError as e:
        location = f" (line {line_no})" if line_no is not None else ""
        raise RecordFormatError(f"{e}{location}", file=str(file_path), line=line_no) from e


def write_jsonl(
    items: Iterable[Any],
    path: str | Path,
    *,
    sort_keys: bool = True,
) -> int:
    """Write objects exposing ``to_dict()`` to a JSONL file.

    Parameters
    ----------
    items : Iterable[Any]
        Records, clusters, renames, ...
    path : str | Path
        Output file path.
    sort_keys : bool, optional
        Sort dictionary keys for deterministic output, by default True.

    Returns
    -------
    int
        Number of lines written.
    """
    file_path = Path(path)
    count = 0
    with file_path.open("w", encoding="utf-8", newline="\n") as f:
        for item in items:
            f.write(json.dumps(item.to_dict(), ensure_ascii=False, sort_keys=sort_keys) + "\n")
            count += 1
    return count


def check_name(
    name: str,
    records: Sequence[NameRecord],
    *,
    external: Sequence[NameRecord] = (),
    config: EngineConfig | None = None,
) -> ValidationResult:
    """Validate a proposed name using the engine configuration.

    Parameters
    ----------
    name : str
        Proposed name.
    records : Sequence[NameRecord]
        Existing records.
    external : Sequence[NameRecord], optional
        Extra candidate names (e.g. a catalogue).
    config : EngineConfig | None, optional
        Thresholds and limits. If None, uses defaults.

    Returns
    -------
    ValidationResult
        Rejected, ExactMatch, Warned or NewName.
    """
    from exdedupe.engine import EngineConfig

    if config is None:
        config = EngineConfig()

    return validate(
        name,
        records,
        config.warn_threshold,
        external=external,
        max_suggestions=config.max_suggestions,
        min_length=config.min_name_length,
    )


def review(
    source: str | Path | Sequence[NameRecord],
    *,
    output_dir: str | Path = "out",
    cluster_threshold: float = 0.85,
    auto_merge_threshold: float = 0.9,
) -> ReviewResult:
    """Run an audited duplicate review.

    Parameters
    ----------
    source : str | Path | Sequence[NameRecord]
        Records, or a JSON/JSONL file to load them from.
    output_dir : str | Path, optional
        Directory for output files, by default "out".
    cluster_threshold : float, optional
        Similarity for grouping, by default 0.85.
    auto_merge_threshold : float, optional
        Similarity strictly above which members are auto-renamed,
        by default 0.9.

    Returns
    -------
    ReviewResult
        Counts and output paths.

    Raises
    ------
    FileNotFoundError
        If ``source`` is a path that does not exist.
    ValueError
        If the thresholds are invalid.
    """
    from exdedupe.engine import EngineConfig, run_review

    records = load_records(source) if isinstance(source, str | Path) else list(source)

    config = EngineConfig(
        cluster_threshold=cluster_threshold,
        auto_merge_threshold=auto_merge_threshold,
        output_dir=Path(output_dir),
    )
    return run_review(records, config)
