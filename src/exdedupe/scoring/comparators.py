"""String comparators for name matching.

This module provides pure, deterministic functions that score two
canonical keys. Callers normalize first; :func:`name_similarity` is the
one convenience that does it for them.
"""

from exdedupe.normalize.keys import normalize

__all__ = ["edit_distance", "similarity", "name_similarity"]


def edit_distance(a: str, b: str) -> int:
    """Compute the Levenshtein distance between two strings.

    Insertions, deletions and substitutions each cost 1. Uses the full
    dynamic-programming table, keeping only the previous row.

    Parameters
    ----------
    a : str
        First string.
    b : str
        Second string.

    Returns
    -------
    int
        Minimum number of single-character edits turning ``a`` into ``b``.
    """
    if not a:
        return len(b)
    if not b:
        return len(a)

    previous = list(range(len(b) + 1))
    for i, char_a in enumerate(a, start=1):
        current = [i]
        for j, char_b in enumerate(b, start=1):
            if char_a == char_b:
                current.append(previous[j - 1])
            else:
                current.append(
                    1
                    + min(
                        previous[j - 1],  # substitution
                        current[j - 1],  # insertion
                        previous[j],  # deletion
                    )
                )
        previous = current

    return previous[-1]


def similarity(a: str, b: str) -> float:
    """Score two canonical keys in [0.0, 1.0].

    Parameters
    ----------
    a : str
        First canonical key.
    b : str
        Second canonical key.

    Returns
    -------
    float
        ``(L - distance) / L`` with ``L`` the longer length; 1.0 when both
        keys are empty.

    Notes
    -----
    The score is symmetric and reaches 1.0 only for identical keys.
    """
    longest = max(len(a), len(b))
    if longest == 0:
        return 1.0

    score = (longest - edit_distance(a, b)) / longest
    return min(1.0, max(0.0, score))


def name_similarity(a: str, b: str) -> float:
    """Normalize two raw names and score them."""
    return similarity(normalize(a), normalize(b))
