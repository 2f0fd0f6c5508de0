# Copyright 2026 pyants Contributors
# SPDX-License-Identifier: Apache-2.0

"""Exceptions raised when a value fails a type check.

Every exception keeps the pieces of its message as attributes so that
callers can branch on the failure without parsing message strings.
"""

from __future__ import annotations

from collections.abc import Sequence

from pyants.core.kinds import type_of

# ###############
# Public Interface
# ###############


class TypeCheckError(Exception):
    """Base class for all type-check failures."""


class TypeMismatch(TypeCheckError):
    """Raised when a value does not satisfy a type's predicate.

    Attributes:
        type_name: Name of the type the value was checked against.
        value: The offending value.
        rendered: The offending value as formatted by the type's renderer.
        kind: Runtime kind of the value (see :func:`~pyants.core.kinds.type_of`).
        context: What was being checked, e.g. ``"value"`` or ``"list element"``.
    """

    def __init__(self, type_name: str, value: object, rendered: str, *, context: str = "value") -> None:
        self.type_name = type_name
        self.value = value
        self.rendered = rendered
        self.kind = type_of(value)
        self.context = context
        super().__init__(self._format())

    def _format(self) -> str:
        return f"Expected {self.context} of type '{self.type_name}', but {self.rendered} is of type '{self.kind}'"


class FieldMismatch(TypeMismatch):
    """Raised when a struct field is present but holds a value of the wrong type."""

    def __init__(self, field: str, type_name: str, value: object, rendered: str) -> None:
        self.field = field
        super().__init__(type_name, value, rendered, context=f"field '{field}'")

    def _format(self) -> str:
        return f"Field {self.field} is of type {self.kind}, but expected {self.type_name}"


class NotStructLike(TypeMismatch):
    """Raised when a value checked against a struct is not a mapping at all."""

    def _format(self) -> str:
        return f"Expected '{self.type_name}'-struct, but {self.rendered} is of type {self.kind}"


class NotEnumMember(TypeMismatch):
    """Raised when a value is not one of an enum's declared members."""

    def _format(self) -> str:
        return f"{self.rendered} is not a member of enum '{self.type_name}'"


class MissingRequiredField(TypeCheckError):
    """Raised when a struct field is absent and its type does not accept absence."""

    def __init__(self, field: str, type_name: str) -> None:
        self.field = field
        self.type_name = type_name
        super().__init__(f"Missing required {type_name} field '{field}'")


class UnexpectedField(TypeCheckError):
    """Raised when a struct value carries a key its definition does not declare."""

    def __init__(self, field: str, struct_name: str) -> None:
        self.field = field
        self.struct_name = struct_name
        super().__init__(f"Found unexpected field '{field}' in struct '{struct_name}'")


class IncompleteMatch(TypeCheckError):
    """Raised when an enum match is missing actions for one or more members.

    Attributes:
        enum_name: Name of the enum being matched.
        missing: Every member without an action, in declaration order.
    """

    def __init__(self, enum_name: str, missing: Sequence[object], rendered: str) -> None:
        self.enum_name = enum_name
        self.missing = list(missing)
        super().__init__(f"Missing match action for members of enum '{enum_name}': {rendered}")


class InvalidSignature(TypeCheckError):
    """Raised when a function signature has fewer than two types."""

    def __init__(self, length: int) -> None:
        self.length = length
        super().__init__(f"Signature must at least have two types (a -> b), got {length}")
