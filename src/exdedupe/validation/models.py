"""Data models for name validation results.

A validation result is one of four tagged variants. Each carries a
``status`` so callers can dispatch with ``match`` or by comparing the tag.
"""

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any, ClassVar

from exdedupe.errors import ErrorKind
from exdedupe.models import NameRecord

DEFAULT_WARN_THRESHOLD = 0.7
DEFAULT_MAX_SUGGESTIONS = 5
DEFAULT_MIN_LENGTH = 2


class ValidationStatus(StrEnum):
    """Outcome of validating a proposed name.

    Attributes
    ----------
    REJECTED : str
        Input is blank or too short.
    EXACT_MATCH : str
        An existing record has the same canonical key.
    WARNED : str
        Existing records are close; the caller may still proceed.
    NEW : str
        Nothing close exists.
    """

    REJECTED = "rejected"
    EXACT_MATCH = "exact_match"
    WARNED = "warned"
    NEW = "new"


@dataclass(frozen=True)
class Suggestion:
    """An existing name offered in place of the proposed one.

    Attributes
    ----------
    original : str
        Existing display name.
    similarity : float
        Score against the proposed name.
    record : NameRecord
        Record carrying the existing name.
    """

    original: str
    similarity: float
    record: NameRecord

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "original": self.original,
            "similarity": self.similarity,
            "record": self.record.to_dict(),
        }


@dataclass(frozen=True)
class Rejected:
    """The proposed name was refused before any matching."""

    reason: str
    error: ErrorKind = ErrorKind.INVALID_INPUT

    status: ClassVar[ValidationStatus] = ValidationStatus.REJECTED
    is_valid: ClassVar[bool] = False
    suggestions: ClassVar[tuple[Suggestion, ...]] = ()

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "status": self.status.value,
            "is_valid": self.is_valid,
            "reason": self.reason,
            "error": self.error.value,
            "suggestions": [],
        }


@dataclass(frozen=True)
class ExactMatch:
    """A record with the same canonical key already exists."""

    record: NameRecord

    status: ClassVar[ValidationStatus] = ValidationStatus.EXACT_MATCH
    is_valid: ClassVar[bool] = True
    suggestions: ClassVar[tuple[Suggestion, ...]] = ()

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "status": self.status.value,
            "is_valid": self.is_valid,
            "exact_match": self.record.to_dict(),
            "suggestions": [],
        }


@dataclass(frozen=True)
class Warned:
    """Close existing names were found; proceeding is still allowed."""

    suggestions: tuple[Suggestion, ...] = field(default_factory=tuple)
    can_proceed: bool = True

    status: ClassVar[ValidationStatus] = ValidationStatus.WARNED
    is_valid: ClassVar[bool] = False
    message: ClassVar[str] = "Similar exercises found. Did you mean one of these?"

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "status": self.status.value,
            "is_valid": self.is_valid,
            "warning": self.message,
            "can_proceed": self.can_proceed,
            "suggestions": [s.to_dict() for s in self.suggestions],
        }


@dataclass(frozen=True)
class NewName:
    """The proposed name is new."""

    status: ClassVar[ValidationStatus] = ValidationStatus.NEW
    is_valid: ClassVar[bool] = True
    is_new: ClassVar[bool] = True
    suggestions: ClassVar[tuple[Suggestion, ...]] = ()

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "status": self.status.value,
            "is_valid": self.is_valid,
            "is_new": self.is_new,
            "suggestions": [],
        }


ValidationResult = Rejected | ExactMatch | Warned | NewName
