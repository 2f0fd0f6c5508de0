# Copyright 2026 pyants Contributors
# SPDX-License-Identifier: Apache-2.0

"""Runtime type checking for plain Python data.

The module-level constructors and primitives belong to ``DEFAULT_SYSTEM``,
which renders offending values with :func:`pyants.render.to_pretty`. Build a
:class:`TypeSystem` with another renderer to change how values appear in
failure messages.
"""

from pyants.core import (
    ANONYMOUS,
    EnumType,
    FieldMismatch,
    IncompleteMatch,
    InvalidSignature,
    MissingRequiredField,
    NotEnumMember,
    NotStructLike,
    StructType,
    Type,
    TypeCheckError,
    TypedFunction,
    TypeMismatch,
    TypeSystem,
    UnexpectedField,
    type_set,
)

DEFAULT_SYSTEM = TypeSystem()

# Primitive types
Any = DEFAULT_SYSTEM.any
Int = DEFAULT_SYSTEM.int
Bool = DEFAULT_SYSTEM.bool
Float = DEFAULT_SYSTEM.float
String = DEFAULT_SYSTEM.string
Derivation = DEFAULT_SYSTEM.derivation
Function = DEFAULT_SYSTEM.function

# Constructors
typedef = DEFAULT_SYSTEM.typedef
optional = DEFAULT_SYSTEM.optional
list_of = DEFAULT_SYSTEM.list_of
map_of = DEFAULT_SYSTEM.map_of
either = DEFAULT_SYSTEM.either
struct = DEFAULT_SYSTEM.struct
enum = DEFAULT_SYSTEM.enum
defun = DEFAULT_SYSTEM.defun

__all__ = [
    "DEFAULT_SYSTEM",
    # Primitive types
    "Any",
    "Int",
    "Bool",
    "Float",
    "String",
    "Derivation",
    "Function",
    # Constructors
    "typedef",
    "optional",
    "list_of",
    "map_of",
    "either",
    "struct",
    "enum",
    "defun",
    "type_set",
    # Classes
    "ANONYMOUS",
    "Type",
    "StructType",
    "EnumType",
    "TypedFunction",
    "TypeSystem",
    # Errors
    "TypeCheckError",
    "TypeMismatch",
    "FieldMismatch",
    "NotStructLike",
    "NotEnumMember",
    "MissingRequiredField",
    "UnexpectedField",
    "IncompleteMatch",
    "InvalidSignature",
]
