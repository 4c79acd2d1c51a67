"""Validate a proposed name against the names already in use.

Decision tiers, first hit wins:

1. Rejected   — trimmed input shorter than ``min_length``.
2. ExactMatch — an existing record has the same canonical key.
3. Warned     — existing records score at least ``threshold_warn``.
4. NewName    — nothing close exists.
"""

from collections.abc import Iterable, Sequence

from exdedupe.errors import InvalidInputError
from exdedupe.models import NameRecord
from exdedupe.normalize import normalize
from exdedupe.scoring import similarity
from exdedupe.validation.models import (
    DEFAULT_MAX_SUGGESTIONS,
    DEFAULT_MIN_LENGTH,
    DEFAULT_WARN_THRESHOLD,
    ExactMatch,
    NewName,
    Rejected,
    Suggestion,
    ValidationResult,
    Warned,
)

__all__ = ["validate", "find_exact_match", "find_similar"]


def find_exact_match(name: str, candidates: Iterable[NameRecord]) -> NameRecord | None:
    """Return the first candidate whose canonical key equals the name's.

    Parameters
    ----------
    name : str
        Proposed name.
    candidates : Iterable[NameRecord]
        Records to search, in priority order.

    Returns
    -------
    NameRecord | None
        First exact match, or None.
    """
    key = normalize(name)
    return next((record for record in candidates if normalize(record.name) == key), None)


def find_similar(
    name: str,
    candidates: Iterable[NameRecord],
    threshold: float = 0.8,
) -> list[Suggestion]:
    """Find candidates close to, but not identical with, the name.

    Parameters
    ----------
    name : str
        Proposed name.
    candidates : Iterable[NameRecord]
        Records to score.
    threshold : float, optional
        Minimum similarity, by default 0.8.

    Returns
    -------
    list[Suggestion]
        All qualifying candidates, highest similarity first. Exact matches
        (similarity 1.0) are never suggested.
    """
    key = normalize(name)
    suggestions: list[Suggestion] = []

    for record in candidates:
        score = similarity(key, normalize(record.name))
        if threshold <= score < 1.0:
            suggestions.append(Suggestion(original=record.name, similarity=score, record=record))

    suggestions.sort(key=lambda s: s.similarity, reverse=True)
    return suggestions


def validate(
    name: str,
    existing: Sequence[NameRecord],
    threshold_warn: float = DEFAULT_WARN_THRESHOLD,
    *,
    external: Sequence[NameRecord] = (),
    max_suggestions: int = DEFAULT_MAX_SUGGESTIONS,
    min_length: int = DEFAULT_MIN_LENGTH,
    strict: bool = False,
) -> ValidationResult:
    """Decide whether a proposed name is new, known, or suspiciously close.

    Parameters
    ----------
    name : str
        Proposed name as typed by the user.
    existing : Sequence[NameRecord]
        Records already in the user's store.
    threshold_warn : float, optional
        Minimum similarity for a suggestion, by default 0.7.
    external : Sequence[NameRecord], optional
        Extra candidates (e.g. a bundled catalogue). Searched after
        ``existing``; on a tie the ``existing`` record wins.
    max_suggestions : int, optional
        Number of suggestions kept, by default 5.
    min_length : int, optional
        Minimum trimmed length, by default 2.
    strict : bool, optional
        If True, raise instead of returning ``Rejected``, by default False.

    Returns
    -------
    ValidationResult
        One of Rejected, ExactMatch, Warned, NewName.

    Raises
    ------
    InvalidInputError
        If the name is too short and strict=True.

    Examples
    --------
        >>> result = validate("Bench Pres", [NameRecord("r1", "Bench Press")], 0.7)
        >>> result.status
        <ValidationStatus.WARNED: 'warned'>
        >>> round(result.suggestions[0].similarity, 3)
        0.909
    """
    trimmed = name.strip()
    if len(trimmed) < min_length:
        reason = f"Exercise name must be at least {min_length} characters long"
        if strict:
            raise InvalidInputError(reason, name=name)
        return Rejected(reason=reason)

    candidates = [*existing, *external]

    exact = find_exact_match(trimmed, candidates)
    if exact is not None:
        return ExactMatch(record=exact)

    similar = find_similar(trimmed, candidates, threshold=threshold_warn)
    if similar:
        return Warned(suggestions=tuple(similar[:max_suggestions]))

    return NewName()
