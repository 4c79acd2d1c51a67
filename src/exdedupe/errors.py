"""Exception hierarchy for exdedupe.

Only two error kinds are raised by the matching core itself
(``InvalidInputError`` and ``EmptySelectionError``). The others come from
the planning helpers and from record file loading.
"""

from __future__ import annotations

from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from exdedupe.validation.models import Suggestion

__all__ = [
    "ErrorKind",
    "DedupeError",
    "InvalidInputError",
    "EmptySelectionError",
    "SimilarNameError",
    "RecordFormatError",
]


class ErrorKind(StrEnum):
    """Error kinds reported to callers.

    Attributes
    ----------
    INVALID_INPUT : str
        A proposed name is blank or too short.
    EMPTY_SELECTION : str
        A merge was requested with no records or a blank target.
    """

    INVALID_INPUT = "invalid_input"
    EMPTY_SELECTION = "empty_selection"


class DedupeError(Exception):
    """Base class for all exdedupe errors."""


class InvalidInputError(DedupeError):
    """Raised when a proposed name is blank or too short."""

    kind = ErrorKind.INVALID_INPUT

    def __init__(self, message: str, name: str | None = None) -> None:
        """Initialize invalid input error.

        Parameters
        ----------
        message : str
            Error message.
        name : str | None, optional
            The rejected name as supplied by the caller.
        """
        super().__init__(message)
        self.name = name


class EmptySelectionError(DedupeError):
    """Raised when a merge is requested without records or without a target."""

    kind = ErrorKind.EMPTY_SELECTION


class SimilarNameError(DedupeError):
    """Raised when a rename would create a near-duplicate of an existing name."""

    def __init__(self, message: str, suggestions: tuple[Suggestion, ...] = ()) -> None:
        """Initialize similar name error.

        Parameters
        ----------
        message : str
            Error message.
        suggestions : tuple[Suggestion, ...], optional
            Existing names the new name was found to be close to.
        """
        super().__init__(message)
        self.suggestions = suggestions


class RecordFormatError(DedupeError, ValueError):
    """Raised when a record cannot be read from its serialized form."""

    def __init__(
        self,
        message: str,
        file: str | None = None,
        line: int | None = None,
    ) -> None:
        """Initialize record format error.

        Parameters
        ----------
        message : str
            Error message.
        file : str | None, optional
            File the record was read from.
        line : int | None, optional
            1-based line number for JSONL input.
        """
        super().__init__(message)
        self.file = file
        self.line = line
