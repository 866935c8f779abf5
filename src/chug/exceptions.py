"""Custom exception hierarchy for the Chug mapping scheme."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ErrorKind(str, Enum):
    """Reason codes attached to every argument error."""

    NULL_INPUT = "NullInput"
    CIPHERTEXT_TOO_SMALL = "CiphertextTooSmall"
    START_INDEX_INVALID = "StartIndexInvalid"
    INVALID_KEY = "InvalidKey"
    INVALID_HEX = "InvalidHex"


class ChugError(Exception):
    """Base class for all Chug errors."""


class ConfigurationError(ChugError, ValueError):
    """Raised when user-supplied configuration is invalid."""


@dataclass(eq=False)
class InvalidArgumentError(ChugError, ValueError):
    """Raised when an argument fails validation before any output is produced."""

    kind: ErrorKind
    argument: str
    message: str

    def __str__(self) -> str:
        return f"{self.message} (argument: {self.argument}, kind: {self.kind.value})"


@dataclass(eq=False)
class OutOfRangeError(InvalidArgumentError):
    """Raised when the start index places the mapped window outside the ciphertext."""


__all__ = [
    "ChugError",
    "ConfigurationError",
    "ErrorKind",
    "InvalidArgumentError",
    "OutOfRangeError",
]
