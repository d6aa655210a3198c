"""
Registry of named record types.

`define_record_type("Point", ["x", "y"])` stores the generated class here, and
later code looks it up by name the way it would reach a module constant:

    from record_factory import get_registry

    Point = get_registry().Point
    Point = get_registry()["Point"]

Registration is serialized with a lock. When a name is taken, the registry
either replaces the old type (`overwrite`, the default) or raises
`DuplicateRecordName` (`reject`), per the `RECORD_FACTORY_DUPLICATE_NAMES`
setting. Entries are never removed.
"""

from __future__ import annotations

import threading
from functools import lru_cache
from typing import TYPE_CHECKING, Dict, Iterator, List, Optional, Type

from record_factory.config import DuplicateNamePolicy, get_settings
from record_factory.errors import DuplicateRecordName, UnknownRecordType
from record_factory.utils.logging import get_logger

if TYPE_CHECKING:
    from record_factory.domain.record import Record

log = get_logger(__name__)


class RecordRegistry:
    def __init__(self, duplicate_names: DuplicateNamePolicy = "overwrite") -> None:
        if duplicate_names not in ("overwrite", "reject"):
            raise ValueError(
                f"Unknown duplicate name policy '{duplicate_names}'. Available: overwrite, reject"
            )
        self._types: Dict[str, Type["Record"]] = {}
        self._lock = threading.Lock()
        self.duplicate_names = duplicate_names

    def register(self, name: str, record_type: Type["Record"]) -> Type["Record"]:
        """
        Bind `record_type` under `name` and return it.

        Raises
        ------
        DuplicateRecordName
            If the name is taken and the policy is `reject`.
        """
        with self._lock:
            previous = self._types.get(name)
            if previous is not None and previous is not record_type:
                if self.duplicate_names == "reject":
                    raise DuplicateRecordName(f"record type {name} is already defined")
                log.warning(
                    f"[REGISTER] Replacing record type {name}",
                    extra={"record_type": name},
                )
            self._types[name] = record_type
        log.info(f"[REGISTER] {name}", extra={"record_type": name})
        return record_type

    def get(self, name: str) -> Optional[Type["Record"]]:
        return self._types.get(name)

    def __getitem__(self, name: str) -> Type["Record"]:
        try:
            return self._types[name]
        except KeyError:
            raise UnknownRecordType(name) from None

    def __getattr__(self, name: str) -> Type["Record"]:
        # Only reached for names not found on the instance or class.
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return self[name]
        except UnknownRecordType as exc:
            raise AttributeError(str(exc)) from exc

    def __contains__(self, name: object) -> bool:
        return name in self._types

    def __len__(self) -> int:
        return len(self._types)

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())

    def names(self) -> List[str]:
        """Registered names, sorted."""
        return sorted(self._types)

    def items(self) -> Dict[str, Type["Record"]]:
        return dict(self._types)


@lru_cache(maxsize=1)
def get_registry() -> RecordRegistry:
    """
    Process-wide registry used by the default factory.
    """
    return RecordRegistry(duplicate_names=get_settings().duplicate_names)


__all__ = ["RecordRegistry", "get_registry"]
