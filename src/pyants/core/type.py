# Copyright 2026 pyants Contributors
# SPDX-License-Identifier: Apache-2.0

"""The Type value: a named predicate that validates values when called."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic import Field as _Field

from pyants.core.errors import TypeCheckError, TypeMismatch
from pyants.render.pretty import Renderer, to_pretty

Predicate = Callable[[Any], bool]

# ###############
# Public Interface
# ###############


class Type(BaseModel):
    """An immutable, named predicate over values.

    Calling a Type with a value returns the value unchanged when ``check``
    accepts it and raises :class:`TypeMismatch` otherwise. ``check`` may
    itself raise a :class:`TypeCheckError` for a nested failure (for example
    the first bad element of a list); that error propagates as-is.

    Attributes:
        name: Human-readable identifier, also used to derive composite names.
        check: The predicate.
        render: Formats offending values inside failure messages.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    check: Predicate = _Field(repr=False)
    render: Renderer = _Field(default=to_pretty, repr=False)

    def __call__(self, value: Any) -> Any:
        if self.check(value):
            return value
        raise TypeMismatch(self.name, value, self.render(value))

    def __str__(self) -> str:
        return self.name

    def is_valid(self, value: Any) -> bool:
        """Return True if *value* passes this type, without raising."""
        try:
            self(value)
        except TypeCheckError:
            return False
        return True


def typedef(name: str, check: Predicate, *, render: Renderer = to_pretty) -> Type:
    """Define a new Type from a name and a predicate."""
    return Type(name=name, check=check, render=render)
