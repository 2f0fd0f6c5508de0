# Copyright 2026 pyants Contributors
# SPDX-License-Identifier: Apache-2.0

"""Type values, combinators, structs, enums, and typed function signatures."""

from pyants.core.combinators import either, list_of, map_of, optional
from pyants.core.enum_type import EnumType, enum
from pyants.core.errors import (
    FieldMismatch,
    IncompleteMatch,
    InvalidSignature,
    MissingRequiredField,
    NotEnumMember,
    NotStructLike,
    TypeCheckError,
    TypeMismatch,
    UnexpectedField,
)
from pyants.core.function import TypedFunction, defun
from pyants.core.kinds import type_of
from pyants.core.struct import ANONYMOUS, StructType, struct
from pyants.core.system import TypeSystem, type_set
from pyants.core.type import Predicate, Type, typedef

__all__ = [
    # Types
    "Type",
    "Predicate",
    "typedef",
    "type_of",
    # Combinators
    "optional",
    "list_of",
    "map_of",
    "either",
    # Structs and enums
    "ANONYMOUS",
    "StructType",
    "struct",
    "EnumType",
    "enum",
    # Functions
    "TypedFunction",
    "defun",
    # Type systems
    "TypeSystem",
    "type_set",
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
