"""
record-factory - runtime record types with tuple-style and name-style access.

This package builds lightweight value types from a list of field names:

- positional or keyword construction
- indexing by position or field name, plus generated attribute accessors
- Struct-style enumeration helpers (each, each_pair, select, values_at, dig)
- value equality and hashing scoped to the generated type
- an optional registry binding each named type for later lookup
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from record_factory.config import Settings, get_settings
from record_factory.domain.models import RecordSpec
from record_factory.domain.record import Record
from record_factory.errors import (
    ArgumentError,
    DuplicateRecordName,
    IndexOutOfRange,
    InvalidIdentifier,
    RecordError,
    UnknownMember,
    UnknownRecordType,
)
from record_factory.factory import RecordFactory, define_record_type, get_factory
from record_factory.registry import RecordRegistry, get_registry
from record_factory.utils.logging import configure_logging, get_logger

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "Settings",
    "get_settings",
    # Factory
    "RecordFactory",
    "define_record_type",
    "get_factory",
    # Records
    "Record",
    "RecordSpec",
    # Registry
    "RecordRegistry",
    "get_registry",
    # Errors
    "RecordError",
    "ArgumentError",
    "InvalidIdentifier",
    "UnknownMember",
    "IndexOutOfRange",
    "DuplicateRecordName",
    "UnknownRecordType",
    # Logging
    "configure_logging",
    "get_logger",
]
