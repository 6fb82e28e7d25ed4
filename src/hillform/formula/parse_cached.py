"""Cached formula parsing."""

__all__ = ["parse_cached"]

from functools import lru_cache
from typing import Optional

from hillform.formula.model import Formula
from hillform.formula.parse import try_parse


@lru_cache(maxsize=256)
def parse_cached(formula: str) -> Optional[Formula]:
    """Parse with the default table and config, caching results. None if the text does not parse."""
    if not formula:
        return None
    return try_parse(formula)
