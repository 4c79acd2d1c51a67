"""Edit-distance similarity between canonical name keys."""

from exdedupe.scoring.comparators import edit_distance, name_similarity, similarity

__all__ = [
    "edit_distance",
    "similarity",
    "name_similarity",
]
