"""
Record type factory.

Builds a new `Record` subclass from a list of field names, optionally binds it
under a capitalized name in a registry, and attaches caller-supplied extension
members.

Usage:
    from record_factory import define_record_type

    Point = define_record_type("Point", ["x", "y"])
    Options = define_record_type(["verbose", "depth"], keyword_init=True)

    class PointMethods:
        def norm(self):
            return (self.x ** 2 + self.y ** 2) ** 0.5

    Vector = define_record_type(["x", "y"], extensions=PointMethods)
    Vector(3, 4).norm()   # 5.0
"""

from __future__ import annotations

import threading
from collections.abc import Mapping
from functools import lru_cache
from typing import Any, Callable, Iterable, Optional, Type, Union

from pydantic import ValidationError

from record_factory.domain.models import RecordSpec
from record_factory.domain.record import Record, install_accessors
from record_factory.errors import ArgumentError, InvalidIdentifier
from record_factory.registry import RecordRegistry, get_registry
from record_factory.utils.logging import get_logger

log = get_logger(__name__)

Extensions = Union[type, Mapping, Callable[[Type[Record]], Any]]


def _spec_from(
    name: Optional[str], field_names: Iterable[Any], keyword_init: bool
) -> RecordSpec:
    try:
        return RecordSpec(name=name, field_names=field_names, keyword_init=keyword_init)
    except ValidationError as exc:
        error = exc.errors()[0]
        cause = error.get("ctx", {}).get("error")
        message = str(cause) if cause is not None else error["msg"]
        if error["loc"][:1] == ("name",):
            raise InvalidIdentifier(message) from exc
        raise ArgumentError(message) from exc


def _split_arguments(name_or_fields: Any, fields: Optional[Iterable[Any]]):
    if name_or_fields is None or isinstance(name_or_fields, str):
        return name_or_fields, () if fields is None else fields
    if fields is not None:
        raise ArgumentError("field names given twice; pass a name string before the field list")
    return None, name_or_fields


class RecordFactory:
    """
    Produces record types and registers the named ones.

    Parameters
    ----------
    registry : RecordRegistry, optional
        Where named types are bound. Defaults to the process-wide registry.
    """

    def __init__(self, registry: Optional[RecordRegistry] = None) -> None:
        self.registry = registry if registry is not None else get_registry()

    def define(
        self,
        name_or_fields: Union[str, Iterable[str], None] = None,
        fields: Optional[Iterable[str]] = None,
        *,
        keyword_init: bool = False,
        extensions: Optional[Extensions] = None,
    ) -> Type[Record]:
        """
        Create a record type.

        Parameters
        ----------
        name_or_fields : str | iterable[str] | None
            Either the registry name (a capitalized identifier) followed by
            `fields`, or the field names themselves for an anonymous type.
        fields : iterable[str], optional
            Field names when a registry name is given first.
        keyword_init : bool
            Construct from one mapping covering every field instead of
            positional values. Without fields, the first mapping fixes them.
        extensions : class | mapping | callable, optional
            Extra members: a mixin class whose attributes are copied, a mapping
            of name to member, or a function called with the new type.

        Returns
        -------
        type[Record]
            The generated class.

        Raises
        ------
        ArgumentError
            No fields in positional mode, or malformed field names.
        InvalidIdentifier
            The registry name does not start with an uppercase letter.
        """
        name, field_names = _split_arguments(name_or_fields, fields)
        spec = _spec_from(name, field_names, keyword_init)

        record_type = self._build(spec)
        _extend(record_type, extensions)

        if spec.name:
            self.registry.register(spec.name, record_type)
        log.debug(
            f"[DEFINE] {record_type.__name__}",
            extra={
                "record_type": record_type.__name__,
                "fields": list(spec.field_names),
                "keyword_init": spec.keyword_init,
                "registered": spec.name is not None,
            },
        )
        return record_type

    __call__ = define

    @staticmethod
    def _build(spec: RecordSpec) -> Type[Record]:
        type_name = spec.name or "AnonymousRecord"
        signature = ", ".join(spec.field_names) if spec.field_names else "**fields"
        namespace = {
            "__doc__": f"{type_name}({signature})",
            "__qualname__": type_name,
            "__module__": __name__,
            "_fields": spec.field_names,
            "_keyword_init": spec.keyword_init,
            "_infer_fields": spec.infers_fields,
            "_fields_lock": threading.Lock(),
            "_record_name": spec.name,
        }
        record_type = type(type_name, (Record,), namespace)
        install_accessors(record_type, spec.field_names)
        return record_type


def _extend(record_type: Type[Record], extensions: Optional[Extensions]) -> None:
    if extensions is None:
        return
    if isinstance(extensions, type):
        for member_name, member in vars(extensions).items():
            # Dunder data (__module__, __dict__, __doc__, ...) describes the mixin itself.
            if member_name.startswith("__") and not callable(member):
                continue
            setattr(record_type, member_name, member)
    elif isinstance(extensions, Mapping):
        for member_name, member in extensions.items():
            setattr(record_type, member_name, member)
    elif callable(extensions):
        extensions(record_type)
    else:
        raise ArgumentError(
            f"extensions must be a class, a mapping or a callable, not {type(extensions).__name__}"
        )


@lru_cache(maxsize=1)
def get_factory() -> RecordFactory:
    """
    Default factory bound to the process-wide registry.
    """
    return RecordFactory()


def define_record_type(
    name_or_fields: Union[str, Iterable[str], None] = None,
    fields: Optional[Iterable[str]] = None,
    *,
    keyword_init: bool = False,
    extensions: Optional[Extensions] = None,
) -> Type[Record]:
    """
    Create a record type with the default factory. See `RecordFactory.define`.
    """
    return get_factory().define(
        name_or_fields, fields, keyword_init=keyword_init, extensions=extensions
    )


__all__ = ["Extensions", "RecordFactory", "define_record_type", "get_factory"]
