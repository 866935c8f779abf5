"""Runtime settings sourced from the environment."""

from __future__ import annotations

import codecs
import os
from dataclasses import dataclass, replace
from typing import Mapping, Optional

from .exceptions import ConfigurationError
from .textio import DEFAULT_ENCODING

DEFAULT_LOG_LEVEL = "WARNING"
LOG_LEVEL_ENV = "CHUG_LOG_LEVEL"
TEXT_ENCODING_ENV = "CHUG_TEXT_ENCODING"


@dataclass(frozen=True)
class Settings:
    """Settings shared by the command line tools."""

    log_level: str = DEFAULT_LOG_LEVEL
    text_encoding: str = DEFAULT_ENCODING

    def __post_init__(self) -> None:
        object.__setattr__(self, "log_level", self.log_level.upper())
        try:
            codecs.lookup(self.text_encoding)
        except LookupError as exc:
            raise ConfigurationError(f"Unknown text encoding: {self.text_encoding!r}") from exc

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if environ is None else environ
        return cls(
            log_level=env.get(LOG_LEVEL_ENV) or DEFAULT_LOG_LEVEL,
            text_encoding=env.get(TEXT_ENCODING_ENV) or DEFAULT_ENCODING,
        )

    def with_overrides(self, *, log_level: Optional[str] = None) -> "Settings":
        if log_level is None:
            return self
        return replace(self, log_level=log_level)


__all__ = ["DEFAULT_LOG_LEVEL", "LOG_LEVEL_ENV", "Settings", "TEXT_ENCODING_ENV"]
