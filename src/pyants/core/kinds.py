# Copyright 2026 pyants Contributors
# SPDX-License-Identifier: Apache-2.0

"""Runtime kind names for values, as reported in type-check failures."""

from __future__ import annotations

from collections.abc import Mapping

# ###############
# Public Interface
# ###############


def type_of(value: object) -> str:
    """Return the runtime kind of *value* using the type system's vocabulary.

    The names line up with the primitive type names (``int``, ``string``,
    ``list``, ...) so that messages read naturally next to declared types.
    Values outside that vocabulary report their Python class name.
    """
    if value is None:
        return "null"
    # bool first: it is a subclass of int.
    if isinstance(value, bool):
        return "bool"
    if isinstance(value, int):
        return "int"
    if isinstance(value, float):
        return "float"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (list, tuple)):
        return "list"
    if isinstance(value, Mapping):
        return "attrs"
    if callable(value):
        return "lambda"
    return type(value).__name__
