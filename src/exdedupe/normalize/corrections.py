"""Correction table for common exercise name variants.

Auto-correction normalizes the *format* of a name (capitalization,
hyphenation, singular form) by literal lookup. It never scores and never
suggests. Adding a variant is a data change: extend DEFAULT_CORRECTIONS
or pass an extra table to :func:`build_corrections`.
"""

import json
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType

from exdedupe.normalize.keys import lookup_key

__all__ = [
    "DEFAULT_CORRECTIONS",
    "autocorrect",
    "build_corrections",
    "load_corrections",
]

# Display form -> informal variants (lookup keys, i.e. trimmed and lower-cased)
_VARIANTS: dict[str, list[str]] = {
    "Bench Press": ["benchpress", "bench press"],
    "Deadlift": ["deadlift", "dead lift"],
    "Squat": ["squat", "squats"],
    "Pull-up": ["pullup", "pull up"],
    "Push-up": ["pushup", "push up"],
    "Chin-up": ["chinup", "chin up"],
    "Bicep Curl": ["bicep curl", "biceps curl"],
    "Tricep Extension": ["tricep extension", "triceps extension"],
    "Lat Pulldown": ["lat pulldown"],
    "Lateral Raise": ["lateral raise"],
    "Shoulder Press": ["shoulder press"],
    "Leg Press": ["leg press"],
    "Calf Raise": ["calf raise", "calf raises"],
}


def _flatten(variants: Mapping[str, list[str]]) -> dict[str, str]:
    table: dict[str, str] = {}
    for display, keys in variants.items():
        # The display form itself is a valid key ("Push-Up" -> "Push-up")
        table[lookup_key(display)] = display
        for key in keys:
            table[lookup_key(key)] = display
    return table


DEFAULT_CORRECTIONS: Mapping[str, str] = MappingProxyType(_flatten(_VARIANTS))


def build_corrections(extra: Mapping[str, str] | None = None) -> Mapping[str, str]:
    """Merge extra corrections over the default table.

    Parameters
    ----------
    extra : Mapping[str, str] | None, optional
        Variant -> display name. Variants are reduced to lookup keys.

    Returns
    -------
    Mapping[str, str]
        Read-only merged table.
    """
    if not extra:
        return DEFAULT_CORRECTIONS
    table = dict(DEFAULT_CORRECTIONS)
    for variant, display in extra.items():
        table[lookup_key(variant)] = display
    return MappingProxyType(table)


def load_corrections(path: str | Path) -> Mapping[str, str]:
    """Load extra corrections from a JSON object file and merge them.

    Parameters
    ----------
    path : str | Path
        JSON file of the form ``{"variant": "Display Name", ...}``.

    Returns
    -------
    Mapping[str, str]
        Defaults with the file's entries applied on top.

    Raises
    ------
    FileNotFoundError
        If the file does not exist.
    ValueError
        If the file is not a JSON object of strings.
    """
    file_path = Path(path)
    if not file_path.exists():
        raise FileNotFoundError(f"Corrections file not found: {path}")

    with file_path.open("r", encoding="utf-8") as f:
        data = json.load(f)

    if not isinstance(data, dict) or not all(
        isinstance(k, str) and isinstance(v, str) for k, v in data.items()
    ):
        raise ValueError(f"Corrections file must map strings to strings: {path}")

    return build_corrections(data)


def autocorrect(name: str, corrections: Mapping[str, str] | None = None) -> str:
    """Replace a known informal spelling with its canonical display form.

    Parameters
    ----------
    name : str
        Raw name.
    corrections : Mapping[str, str] | None, optional
        Lookup key -> display table, by default DEFAULT_CORRECTIONS.

    Returns
    -------
    str
        Display form if the trimmed, lower-cased name is a known variant,
        otherwise ``name`` unchanged.

    Examples
    --------
        >>> autocorrect("push up")
        'Push-up'
        >>> autocorrect("Zercher Squat")
        'Zercher Squat'
    """
    table = DEFAULT_CORRECTIONS if corrections is None else corrections
    return table.get(lookup_key(name), name)
