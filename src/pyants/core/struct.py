# Copyright 2026 pyants Contributors
# SPDX-License-Identifier: Apache-2.0

"""Struct types: records with an exact, declared set of typed fields.

A struct checks that every declared field holds a value of its declared
type, that no required field is missing, and that no undeclared field is
present. A missing field is looked up as ``None``, so fields typed with
:func:`~pyants.core.combinators.optional` may simply be omitted.

Anonymous structs (for nesting) are supported by omitting the name.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import Field as _Field

from pyants.core.errors import FieldMismatch, MissingRequiredField, NotStructLike, UnexpectedField
from pyants.core.type import Type
from pyants.render.pretty import Renderer, to_pretty

ANONYMOUS = "anonymous"

# ###############
# Public Interface
# ###############


class StructType(Type):
    """A Type for mapping values with exactly the fields in ``definition``.

    Attributes:
        definition: Field name to field Type, in declaration order.
    """

    definition: dict[str, Type] = _Field(repr=False)

    def __call__(self, value: Any) -> Any:
        if self.check(value):
            return value
        raise NotStructLike(self.name, value, self.render(value))

    def __hash__(self) -> int:
        return hash((self.name, self.check, tuple(self.definition.items())))


def struct(
    name_or_definition: str | Mapping[str, Type],
    definition: Mapping[str, Type] | None = None,
    *,
    render: Renderer = to_pretty,
) -> StructType:
    """Define a struct type.

    Call either as ``struct("Name", {...})`` or, for an anonymous struct,
    as ``struct({...})``.

    Raises:
        TypeError: If the arguments match neither calling form.
    """
    if isinstance(name_or_definition, str):
        if definition is None:
            raise TypeError(f"struct '{name_or_definition}' needs a field definition")
        name = name_or_definition
    else:
        if definition is not None:
            raise TypeError("struct name must be a string")
        name, definition = ANONYMOUS, name_or_definition

    fields = dict(definition)

    def check(value: Any) -> bool:
        if not isinstance(value, Mapping):
            return False
        for field, field_type in fields.items():
            _check_field(field, field_type, value, render)
        _check_extraneous(name, fields, value)
        return True

    return StructType(name=name, check=check, render=render, definition=fields)


# ################
# Implementation
# ################


def _check_field(field: str, field_type: Type, value: Mapping[str, Any], render: Renderer) -> None:
    """Check one declared field, treating an absent field as ``None``."""
    field_value = value.get(field)
    if field_type.check(field_value):
        return
    if field_value is None:
        raise MissingRequiredField(field, field_type.name)
    raise FieldMismatch(field, field_type.name, field_value, render(field_value))


def _check_extraneous(name: str, fields: Mapping[str, Type], value: Mapping[str, Any]) -> None:
    """Reject the first key of *value* that is not a declared field."""
    for key in value:
        if key not in fields:
            raise UnexpectedField(key, name)
