"""
Key resolution for record indexing.

Records accept two key shapes: an integer position or a field name. Both are
resolved into one of the tagged variants below before any lookup happens.
"""

from __future__ import annotations

import numbers
from dataclasses import dataclass
from typing import Any, Union


@dataclass(frozen=True)
class Position:
    """Zero-based field position; negative values count from the end."""

    index: int


@dataclass(frozen=True)
class Name:
    """Field name as declared on the record type."""

    value: str


Key = Union[Position, Name]


def to_key(raw: Any) -> Key:
    """
    Classify a raw indexing key.

    Raises
    ------
    TypeError
        If `raw` is neither an integer nor a string.
    """
    if isinstance(raw, (Position, Name)):
        return raw
    if isinstance(raw, str):
        return Name(raw)
    if isinstance(raw, numbers.Integral):
        return Position(int(raw))
    raise TypeError(f"no implicit conversion of {type(raw).__name__} into a record key")


__all__ = ["Key", "Name", "Position", "to_key"]
