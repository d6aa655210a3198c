"""
Domain models for record-factory.

`RecordSpec` is the validated form of a definition request: the optional
registry name, the ordered field names, and the construction mode. The factory
builds one per `define` call and derives the generated class from it.
"""
from __future__ import annotations

import keyword
from typing import Any, Iterable, Optional, Tuple

from pydantic import BaseModel, Field, field_validator, model_validator


def check_field_names(names: Iterable[Any]) -> Tuple[str, ...]:
    """
    Validate an ordered collection of field names and return it as a tuple.

    Raises
    ------
    ValueError
        If `names` is not iterable, or a name is not a string, is not a usable
        identifier, starts with an underscore, or appears twice.
    """
    try:
        fields = tuple(names)
    except TypeError as exc:
        raise ValueError(f"field names must be iterable, not {type(names).__name__}") from exc
    seen = set()
    for field in fields:
        if not isinstance(field, str):
            raise ValueError(f"field name {field!r} is not a string")
        if not field.isidentifier() or keyword.iskeyword(field):
            raise ValueError(f"invalid field name '{field}'")
        if field.startswith("_"):
            raise ValueError(f"field name '{field}' must not start with an underscore")
        if field in seen:
            raise ValueError(f"duplicate field name '{field}'")
        seen.add(field)
    return fields


class RecordSpec(BaseModel):
    """
    Definition request for a single record type.
    """

    name: Optional[str] = Field(None, description="Registry binding name; None for anonymous types.")
    field_names: Tuple[str, ...] = Field((), description="Declared field names, in order.")
    keyword_init: bool = Field(False, description="Whether construction takes one mapping.")

    model_config = {
        "frozen": True,
        "arbitrary_types_allowed": False,
    }

    @field_validator("name")
    @classmethod
    def _name_is_constant(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value
        if not value[:1].isupper() or not value.isidentifier():
            raise ValueError(f"identifier {value} needs to be constant")
        return value

    @field_validator("field_names", mode="before")
    @classmethod
    def _field_names_are_valid(cls, value: Any) -> Tuple[str, ...]:
        if isinstance(value, (str, bytes)):
            raise ValueError("field names must be a sequence of strings, not a single string")
        return check_field_names(value)

    @model_validator(mode="after")
    def _has_fields_or_keywords(self) -> "RecordSpec":
        if not self.field_names and not self.keyword_init:
            raise ValueError("wrong number of arguments (given 0, expected 1+)")
        return self

    @property
    def infers_fields(self) -> bool:
        """Keyword-mode types without declared fields take them from the first mapping."""
        return self.keyword_init and not self.field_names


__all__ = ["RecordSpec", "check_field_names"]
