"""
Engine configuration and numeric limits.

The glyphs the parser and renderer treat as locale-dependent live in a
single frozen dataclass so that callers can swap them without touching
global state.
"""

__all__ = [
    "FormatConfig",
    "DEFAULT_CONFIG",
    "MAX_COUNT",
    "MIN_CHARGE",
    "MAX_CHARGE",
    "EMPTY_TOKEN",
]

import os
from dataclasses import dataclass
from typing import Mapping, Optional

# Nuclide counts are unsigned 16-bit, charge is signed 16-bit
MAX_COUNT: int = 65535
MIN_CHARGE: int = -32768
MAX_CHARGE: int = 32767

EMPTY_TOKEN: str = "<empty>"

_ENV_PREFIX = "HILLFORM_"


@dataclass(frozen=True)
class FormatConfig:
    """Locale glyphs recognized when scanning and rendering numbers."""

    positive_sign: str = "+"
    negative_sign: str = "-"
    decimal_separator: str = "."

    def __post_init__(self) -> None:
        for name in ("positive_sign", "negative_sign", "decimal_separator"):
            if not getattr(self, name):
                raise ValueError(f"{name} must not be empty")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "FormatConfig":
        """
        Build a configuration from ``HILLFORM_*`` environment variables.

        Args:
            environ: Mapping to read from (defaults to ``os.environ``)

        Returns:
            FormatConfig with unset variables left at their defaults

        Example:
            >>> FormatConfig.from_env({"HILLFORM_DECIMAL_SEPARATOR": ","})
            FormatConfig(positive_sign='+', negative_sign='-', decimal_separator=',')
        """
        if environ is None:
            environ = os.environ
        values = {}
        for name in ("positive_sign", "negative_sign", "decimal_separator"):
            key = _ENV_PREFIX + name.upper()
            if key in environ:
                values[name] = environ[key]
        return cls(**values)


DEFAULT_CONFIG = FormatConfig()
