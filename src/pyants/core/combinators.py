# Copyright 2026 pyants Contributors
# SPDX-License-Identifier: Apache-2.0

"""Polymorphic type constructors: optional, list, mapping, and either types."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from pyants.core.errors import TypeCheckError, TypeMismatch
from pyants.core.type import Type, typedef
from pyants.render.pretty import Renderer, to_pretty

# ###############
# Public Interface
# ###############


def optional(t: Type, *, render: Renderer = to_pretty) -> Type:
    """Return ``option<T>``: accepts ``None`` or any value accepted by *t*."""
    return typedef(f"option<{t.name}>", lambda v: v is None or t.check(v), render=render)


def list_of(t: Type, *, render: Renderer = to_pretty) -> Type:
    """Return ``list<T>``: a list or tuple whose every element is accepted by *t*.

    Elements are checked in order and the first failing element raises
    :class:`TypeMismatch` immediately.
    """

    def check(v: Any) -> bool:
        return isinstance(v, (list, tuple)) and _check_elements(t, v, "list element", render)

    return typedef(f"list<{t.name}>", check, render=render)


def map_of(t: Type, *, render: Renderer = to_pretty) -> Type:
    """Return ``attrs<T>``: a mapping whose every value is accepted by *t*.

    Keys are not checked. Values are checked in the mapping's iteration order
    and the first failing value raises :class:`TypeMismatch` immediately.
    """

    def check(v: Any) -> bool:
        return isinstance(v, Mapping) and _check_elements(t, v.values(), "attribute set element", render)

    return typedef(f"attrs<{t.name}>", check, render=render)


def either(t1: Type, t2: Type, *, render: Renderer = to_pretty) -> Type:
    """Return ``either<T1,T2>``: accepts values accepted by *t1* or by *t2*.

    A branch that raises counts as rejecting the value, so when both branches
    reject, only the mismatch for the either-type itself is reported.
    """
    return typedef(f"either<{t1.name},{t2.name}>", lambda v: _accepts(t1, v) or _accepts(t2, v), render=render)


# ################
# Implementation
# ################


def _check_elements(t: Type, elements: Iterable[Any], context: str, render: Renderer) -> bool:
    for element in elements:
        if not t.check(element):
            raise TypeMismatch(t.name, element, render(element), context=context)
    return True


def _accepts(t: Type, value: Any) -> bool:
    try:
        return bool(t.check(value))
    except TypeCheckError:
        return False
