"""
Base class and instance protocol shared by every generated record type.

A record instance stores its values in one ordered dict keyed by field name.
Positional access, name access, the generated attribute accessors, iteration,
equality and hashing all read from (and write through) that dict.

Usage:
    from record_factory import define_record_type

    Point = define_record_type(["x", "y"])
    p = Point(1, 2)
    p[0], p["y"], p.x          # 1, 2, 1
    p.values_at(1, 0)          # [2, 1]
"""

from __future__ import annotations

import operator
import threading
from collections.abc import Mapping, Sequence
from typing import Any, Callable, ClassVar, Dict, List, Optional, Tuple

from record_factory.domain.keys import Position, to_key
from record_factory.domain.models import check_field_names
from record_factory.errors import ArgumentError, IndexOutOfRange, UnknownMember
from record_factory.utils.logging import get_logger

log = get_logger(__name__)


def _field_property(field: str) -> property:
    def getter(self: "Record") -> Any:
        return self[field]

    def setter(self: "Record", value: Any) -> None:
        self[field] = value

    return property(getter, setter, doc=f"Alias for field '{field}'.")


def install_accessors(record_type: type, fields: Tuple[str, ...]) -> None:
    """
    Attach one get/set property per field to `record_type`.

    Names the type already has, whether record methods (e.g. `size`,
    `values`) or extension members, keep that member; such fields stay
    reachable through indexing.
    """
    for field in fields:
        if hasattr(record_type, field):
            log.warning(
                f"[ACCESSOR] Field '{field}' shadows an existing member; use indexing",
                extra={"record_type": record_type.__name__, "field": field},
            )
            continue
        setattr(record_type, field, _field_property(field))


def _dig_further(value: Any, keys: Tuple[Any, ...]) -> Any:
    if not keys or value is None:
        return value
    head, rest = keys[0], keys[1:]
    dig = getattr(value, "dig", None)
    if callable(dig):
        return dig(head, *rest)
    if isinstance(value, Mapping):
        return _dig_further(value.get(head), rest)
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes)):
        try:
            nested = value[head]
        except IndexError:
            nested = None
        return _dig_further(nested, rest)
    raise TypeError(f"{type(value).__name__} does not support digging")


def _frozen(value: Any) -> Any:
    """Hashable stand-in for `value`; lists, sets and mappings hash by content."""
    if isinstance(value, Mapping):
        return frozenset((key, _frozen(item)) for key, item in value.items())
    if isinstance(value, (list, tuple)):
        return tuple(_frozen(item) for item in value)
    if isinstance(value, (set, frozenset)):
        return frozenset(_frozen(item) for item in value)
    return value


class Record:
    """
    Common behavior of generated record types.

    Subclasses are created by `RecordFactory.define`; they set the class-level
    field tuple and construction mode. Do not instantiate `Record` directly.
    """

    _fields: ClassVar[Tuple[str, ...]] = ()
    _keyword_init: ClassVar[bool] = False
    _infer_fields: ClassVar[bool] = False
    _fields_lock: ClassVar[threading.Lock]
    _record_name: ClassVar[Optional[str]] = None

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        cls = type(self)
        if cls is Record:
            raise TypeError("Record cannot be instantiated directly; define a record type first")
        if cls._keyword_init:
            self._table = cls._keyword_table(args, kwargs)
        else:
            self._table = cls._positional_table(args, kwargs)

    # -- construction -----------------------------------------------------

    @classmethod
    def _positional_table(cls, args: Tuple[Any, ...], kwargs: Dict[str, Any]) -> Dict[str, Any]:
        if kwargs:
            raise ArgumentError(
                f"{cls.__name__} takes positional values; "
                f"got keywords: {', '.join(kwargs)} (define it with keyword_init=True)"
            )
        if len(args) > len(cls._fields):
            raise ArgumentError(
                f"record size differs (given {len(args)}, expected at most {len(cls._fields)})"
            )
        padded = args + (None,) * (len(cls._fields) - len(args))
        return dict(zip(cls._fields, padded))

    @classmethod
    def _keyword_table(cls, args: Tuple[Any, ...], kwargs: Dict[str, Any]) -> Dict[str, Any]:
        if len(args) > 1 or not (args or kwargs):
            raise ArgumentError(f"wrong number of arguments (given {len(args)}, expected 1)")
        if args:
            if not isinstance(args[0], Mapping):
                raise ArgumentError(
                    f"{cls.__name__} takes a mapping of field values, not {type(args[0]).__name__}"
                )
            supplied = dict(args[0])
            supplied.update(kwargs)
        else:
            supplied = dict(kwargs)

        fields = cls._keyword_fields(supplied)
        missing = [field for field in fields if field not in supplied]
        if missing:
            raise ArgumentError(f"missing keywords: {', '.join(missing)}")
        extra = [key for key in supplied if key not in fields]
        if extra:
            log.debug(
                f"[CONSTRUCT] {cls.__name__} ignored unknown keywords",
                extra={"record_type": cls.__name__, "ignored": [str(key) for key in extra]},
            )
        return {field: supplied[field] for field in fields}

    @classmethod
    def _keyword_fields(cls, supplied: Dict[Any, Any]) -> Tuple[str, ...]:
        if not cls._infer_fields:
            return cls._fields
        with cls._fields_lock:
            # Another thread may have fixed the fields while we waited.
            if cls._infer_fields:
                try:
                    fields = check_field_names(supplied)
                except ValueError as exc:
                    raise ArgumentError(str(exc)) from exc
                if not fields:
                    raise ArgumentError("cannot infer record fields from an empty mapping")
                cls._fields = fields
                install_accessors(cls, fields)
                cls._infer_fields = False
                log.debug(
                    f"[INFER] {cls.__name__} fields fixed from first construction",
                    extra={"record_type": cls.__name__, "fields": list(fields)},
                )
        return cls._fields

    # -- keyed access -----------------------------------------------------

    def _field_for(self, key: Any) -> str:
        resolved = to_key(key)
        fields = type(self)._fields
        if isinstance(resolved, Position):
            if not -len(fields) <= resolved.index < len(fields):
                raise IndexOutOfRange(resolved.index, len(fields))
            return fields[resolved.index]
        if resolved.value not in self._table:
            raise UnknownMember(resolved.value)
        return resolved.value

    def __getitem__(self, key: Any) -> Any:
        return self._table[self._field_for(key)]

    def __setitem__(self, key: Any, value: Any) -> None:
        self._table[self._field_for(key)] = value

    def get(self, key: Any) -> Any:
        """Value at a position or field name; same as `record[key]`."""
        return self[key]

    def set(self, key: Any, value: Any) -> Any:
        """Replace the value at a position or field name and return `value`."""
        self[key] = value
        return value

    def dig(self, key: Any, *rest: Any) -> Any:
        """
        Follow `key` and then each of `rest` through nested values.

        Returns None as soon as a step finds nothing. Nested records and other
        objects with a `dig` method are delegated to; mappings and sequences
        are indexed directly.
        """
        try:
            value = self[key]
        except (UnknownMember, IndexOutOfRange):
            return None
        return _dig_further(value, rest)

    # -- enumeration ------------------------------------------------------

    def each(self, fn: Optional[Callable[[Any], Any]] = None) -> Any:
        """
        Call `fn` with each value in field order and return the record.

        Without `fn`, return a live view over the values that can be iterated
        any number of times.
        """
        if fn is None:
            return self._table.values()
        for value in self._table.values():
            fn(value)
        return self

    def each_pair(self, fn: Optional[Callable[[str, Any], Any]] = None) -> Any:
        """Like `each`, but with `(field, value)` pairs."""
        if fn is None:
            return self._table.items()
        for field, value in self._table.items():
            fn(field, value)
        return self

    def __iter__(self):
        return iter(self._table.values())

    def to_dict(self) -> Dict[str, Any]:
        return dict(self._table)

    def values(self) -> List[Any]:
        return list(self._table.values())

    to_list = values

    def size(self) -> int:
        return len(self._table)

    length = size

    def __len__(self) -> int:
        return len(self._table)

    def members(self) -> List[str]:
        return list(self._table)

    def select(self, predicate: Callable[[Any], Any]) -> List[Any]:
        return [value for value in self._table.values() if predicate(value)]

    filter = select

    def values_at(self, *indices: Any) -> List[Any]:
        """
        Values at the given positions, in the order asked for.

        Positions outside the record give None; slices expand in place.
        """
        values = self.values()
        selected: List[Any] = []
        for index in indices:
            if isinstance(index, slice):
                selected.extend(values[index])
            else:
                position = operator.index(index)
                in_range = -len(values) <= position < len(values)
                selected.append(values[position] if in_range else None)
        return selected

    # -- equality ---------------------------------------------------------

    def __hash__(self) -> int:
        return hash((type(self), _frozen(tuple(self._table.values()))))

    def eql(self, other: Any) -> bool:
        """
        True when `other` hashes like this record.

        Values that still cannot be hashed fall back to `==`.
        """
        try:
            return hash(self) == hash(other)
        except TypeError:
            return self == other

    def __eq__(self, other: Any) -> bool:
        return type(other) is type(self) and self.values() == other.values()

    def __repr__(self) -> str:
        pairs = ", ".join(f"{field}={value!r}" for field, value in self._table.items())
        return f"{type(self).__name__}({pairs})"


__all__ = ["Record", "install_accessors"]
