"""Comparison keys for exercise names.

All functions are pure and locale-independent: case mapping uses
``str.lower`` (codepoint mapping), never the process locale.
"""

import re

# Anything that is not a letter, digit or whitespace. ``\w`` also matches
# the underscore, which is punctuation for our purposes.
NON_WORD_RE = re.compile(r"[^\w\s]|_")
WHITESPACE_RE = re.compile(r"\s+")
ARTICLE_RE = re.compile(r"\b(?:the|a|an)\b")

__all__ = ["normalize", "lookup_key"]


def normalize(name: str) -> str:
    """Canonicalize a raw name into its comparison key.

    Steps, in order: lower-case, strip punctuation, collapse whitespace,
    drop the standalone articles "the", "a" and "an", trim.

    Parameters
    ----------
    name : str
        Raw name as entered by a user.

    Returns
    -------
    str
        CanonicalKey, possibly empty.

    Examples
    --------
        >>> normalize("  The Bench-Press! ")
        'benchpress'
        >>> normalize("Curl a Barbell")
        'curl barbell'
    """
    key = name.lower()
    key = NON_WORD_RE.sub("", key)
    key = WHITESPACE_RE.sub(" ", key)
    key = ARTICLE_RE.sub("", key)
    # Removing an interior article leaves a double space behind
    key = WHITESPACE_RE.sub(" ", key)
    return key.strip()


def lookup_key(name: str) -> str:
    """Return the key used to look a name up in the correction table.

    Unlike :func:`normalize` this keeps punctuation, so "push-up" and
    "push up" are different keys.

    Parameters
    ----------
    name : str
        Raw name.

    Returns
    -------
    str
        Trimmed, lower-cased name.
    """
    return name.strip().lower()
