# Copyright 2026 pyants Contributors
# SPDX-License-Identifier: Apache-2.0

"""A type system: the primitive types plus constructors sharing one renderer.

The renderer used to format offending values in failure messages is a
pluggable dependency. A :class:`TypeSystem` binds one renderer into every
primitive and into every type its constructors build.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping, Sequence
from pathlib import Path
from typing import Any

from pyants.core import combinators
from pyants.core.enum_type import EnumType, enum
from pyants.core.function import TypedFunction, defun
from pyants.core.struct import StructType, struct
from pyants.core.type import Predicate, Type, typedef
from pyants.render.config import RenderConfig, load_render_config
from pyants.render.pretty import Renderer, make_renderer, to_pretty

_LOGGER = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


def type_set(*entries: Type | Mapping[str, Type]) -> dict[str, Type]:
    """Collect types into a mapping keyed by type name.

    Each entry is either a Type, registered under its own name, or a mapping
    whose items are merged in as-is. Later entries win on name clashes.
    """
    registry: dict[str, Type] = {}
    for entry in entries:
        if isinstance(entry, Type):
            registry[entry.name] = entry
        else:
            registry.update(entry)
    return registry


class TypeSystem:
    """Primitive types and type constructors bound to one renderer.

    Primitives are reachable by name, either as attributes (``system.int``)
    or by subscription (``system["int"]``).
    """

    def __init__(self, render: Renderer = to_pretty) -> None:
        self.render = render
        self.types = type_set(*(typedef(name, check, render=render) for name, check in _PRIMITIVES.items()))
        _LOGGER.debug("Created type system with primitives: %s", ", ".join(self.types))

    @classmethod
    def from_config(cls, path: Path) -> TypeSystem:
        """Create a type system whose renderer follows the config file at *path*."""
        return cls(render=make_renderer(load_render_config(path)))

    @classmethod
    def from_render_config(cls, config: RenderConfig) -> TypeSystem:
        """Create a type system whose renderer follows *config*."""
        return cls(render=make_renderer(config))

    def __getitem__(self, name: str) -> Type:
        return self.types[name]

    def __getattr__(self, name: str) -> Type:
        # Only called for names not found normally, i.e. the primitives.
        try:
            return self.__dict__["types"][name]
        except KeyError:
            raise AttributeError(f"{type(self).__name__!r} has no type {name!r}") from None

    def typedef(self, name: str, check: Predicate) -> Type:
        """Define a new Type from a name and a predicate."""
        return typedef(name, check, render=self.render)

    def optional(self, t: Type) -> Type:
        """Return ``option<T>``."""
        return combinators.optional(t, render=self.render)

    def list_of(self, t: Type) -> Type:
        """Return ``list<T>``."""
        return combinators.list_of(t, render=self.render)

    def map_of(self, t: Type) -> Type:
        """Return ``attrs<T>``."""
        return combinators.map_of(t, render=self.render)

    def either(self, t1: Type, t2: Type) -> Type:
        """Return ``either<T1,T2>``."""
        return combinators.either(t1, t2, render=self.render)

    def struct(
        self,
        name_or_definition: str | Mapping[str, Type],
        definition: Mapping[str, Type] | None = None,
    ) -> StructType:
        """Define a named or anonymous struct type."""
        return struct(name_or_definition, definition, render=self.render)

    def enum(self, name: str, members: Iterable[Any]) -> EnumType:
        """Define an enum type."""
        return enum(name, members, render=self.render)

    def defun(self, signature: Sequence[Type], implementation: Callable[..., Any]) -> TypedFunction:
        """Wrap a function with a checked signature."""
        return defun(signature, implementation)


# ################
# Implementation
# ################


def _is_int(x: Any) -> bool:
    return isinstance(x, int) and not isinstance(x, bool)


def _is_derivation(x: Any) -> bool:
    return isinstance(x, Mapping) and x.get("type") == "derivation"


_PRIMITIVES: dict[str, Predicate] = {
    "any": lambda _: True,
    "int": _is_int,
    "bool": lambda x: isinstance(x, bool),
    "float": lambda x: isinstance(x, float),
    "string": lambda x: isinstance(x, str),
    "derivation": _is_derivation,
    "function": callable,
}
