"""Chug: derive a key that reads a secret out of cover data."""

from .cipher import map, morph
from .exceptions import (
    ChugError,
    ConfigurationError,
    ErrorKind,
    InvalidArgumentError,
    OutOfRangeError,
)
from .key import KEY_HEADER_SIZE, ParsedKey, parse_key

__version__ = "0.1.0"

__all__ = [
    "KEY_HEADER_SIZE",
    "ChugError",
    "ConfigurationError",
    "ErrorKind",
    "InvalidArgumentError",
    "OutOfRangeError",
    "ParsedKey",
    "map",
    "morph",
    "parse_key",
]
