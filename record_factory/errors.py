"""
Exception hierarchy for record-factory.

Every error derives from RecordError and from the builtin exception a Python
caller would naturally expect (TypeError for arity problems, IndexError for
positions, KeyError for names), so either can be caught.
"""

from __future__ import annotations


class RecordError(Exception):
    """Base exception for all record-factory errors."""

    def __init__(self, message: str = "") -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        # KeyError subclasses would otherwise render the repr of the message.
        return self.message


class ArgumentError(RecordError, TypeError):
    """Wrong number or shape of arguments at definition or construction."""


class InvalidIdentifier(RecordError, NameError):
    """A registry binding name is not a capitalized identifier."""


class UnknownMember(RecordError, KeyError):
    """A field name that the record type does not declare."""

    def __init__(self, member: object) -> None:
        super().__init__(f"no member '{member}' in record")
        self.member = member


class IndexOutOfRange(RecordError, IndexError):
    """A field position outside the declared field count."""

    def __init__(self, offset: int, size: int) -> None:
        qualifier = "small" if offset < 0 else "large"
        super().__init__(f"offset {offset} too {qualifier} for record(size:{size})")
        self.offset = offset
        self.size = size


class DuplicateRecordName(RecordError, ValueError):
    """The registry already holds a record type under this name."""


class UnknownRecordType(RecordError, KeyError):
    """No record type is registered under this name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"uninitialized record type {name}")
        self.name = name


__all__ = [
    "RecordError",
    "ArgumentError",
    "InvalidIdentifier",
    "UnknownMember",
    "IndexOutOfRange",
    "DuplicateRecordName",
    "UnknownRecordType",
]
