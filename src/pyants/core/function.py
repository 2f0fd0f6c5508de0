# Copyright 2026 pyants Contributors
# SPDX-License-Identifier: Apache-2.0

"""Typed function signatures.

:func:`defun` wraps a function so that each argument is checked against its
declared type as it is applied, and the result against the final type once
all arguments are in. Application is curried: ``f(1)(2)`` and ``f(1, 2)``
are equivalent. The wrapped function only runs after every argument passed.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic import Field as _Field

from pyants.core.errors import InvalidSignature
from pyants.core.type import Type

_LOGGER = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


class TypedFunction(BaseModel):
    """A function with a checked signature, possibly partially applied.

    Attributes:
        signature: Remaining argument types followed by the result type.
        implementation: The wrapped function, called with all arguments at once.
        bound: Arguments already applied and checked.
    """

    model_config = ConfigDict(frozen=True)

    signature: tuple[Type, ...]
    implementation: Callable[..., Any] = _Field(repr=False)
    bound: tuple[Any, ...] = ()

    @property
    def arity(self) -> int:
        """Number of arguments still to be applied."""
        return len(self.signature) - 1

    def __call__(self, *args: Any) -> Any:
        if not args:
            raise TypeError(f"{self} expects at least one argument")
        if len(args) > self.arity:
            raise TypeError(f"{self} takes {self.arity} more argument(s), got {len(args)}")

        bound = self.bound + tuple(t(arg) for t, arg in zip(self.signature, args))
        remaining = self.signature[len(args) :]
        if len(remaining) > 1:
            return TypedFunction(signature=remaining, implementation=self.implementation, bound=bound)

        _LOGGER.debug("Applying %s to %d argument(s)", self, len(bound))
        return remaining[0](self.implementation(*bound))

    def apply(self, args: Sequence[Any]) -> Any:
        """Apply all remaining arguments in one call and return the checked result."""
        if len(args) != self.arity:
            raise TypeError(f"{self} takes {self.arity} argument(s), got {len(args)}")
        return self(*args)

    def __str__(self) -> str:
        head, *tail = self.signature
        rendered = f"λ :: {head.name}"
        for t in tail:
            rendered = f"{rendered} -> {t.name}"
        return rendered


def defun(signature: Sequence[Type], implementation: Callable[..., Any]) -> TypedFunction:
    """Wrap *implementation* with a checked signature ``[T1, ..., Tn, R]``.

    Raises:
        InvalidSignature: If *signature* has fewer than two types.
    """
    if len(signature) < 2:
        raise InvalidSignature(len(signature))
    return TypedFunction(signature=tuple(signature), implementation=implementation)
