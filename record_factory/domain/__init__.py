"""
Domain package for record-factory.

Exports the record base class, the definition model, and key resolution.
Keep this package free of registry and configuration concerns.
"""

from record_factory.domain.keys import Key, Name, Position, to_key
from record_factory.domain.models import RecordSpec, check_field_names
from record_factory.domain.record import Record, install_accessors

__all__ = [
    "Key",
    "Name",
    "Position",
    "Record",
    "RecordSpec",
    "check_field_names",
    "install_accessors",
    "to_key",
]
