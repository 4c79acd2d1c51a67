"""Live validation of proposed names against existing records."""

from exdedupe.validation.models import (
    DEFAULT_MAX_SUGGESTIONS,
    DEFAULT_MIN_LENGTH,
    DEFAULT_WARN_THRESHOLD,
    ErrorKind,
    ExactMatch,
    NewName,
    Rejected,
    Suggestion,
    ValidationResult,
    ValidationStatus,
    Warned,
)
from exdedupe.validation.validator import find_exact_match, find_similar, validate

__all__ = [
    "DEFAULT_MAX_SUGGESTIONS",
    "DEFAULT_MIN_LENGTH",
    "DEFAULT_WARN_THRESHOLD",
    "ErrorKind",
    "ExactMatch",
    "NewName",
    "Rejected",
    "Suggestion",
    "ValidationResult",
    "ValidationStatus",
    "Warned",
    "find_exact_match",
    "find_similar",
    "validate",
]
