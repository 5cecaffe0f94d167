# Copyright 2026 Shank IDL Contributors
# SPDX-License-Identifier: Apache-2.0

"""Input descriptors and output IDL model for the type translator."""

from shank_idl.model.idl import (
    BOOL,
    BYTES,
    I8,
    I16,
    I32,
    I64,
    I128,
    PUBLIC_KEY,
    STRING,
    U8,
    U16,
    U32,
    U64,
    U128,
    IdlArray,
    IdlBTreeMap,
    IdlBTreeSet,
    IdlDefined,
    IdlField,
    IdlHashMap,
    IdlHashSet,
    IdlOption,
    IdlScalar,
    IdlScalarType,
    IdlTuple,
    IdlType,
    IdlVec,
)
from shank_idl.model.rust_types import (
    Composite,
    CompositeKind,
    FieldAttr,
    Primitive,
    PrimitiveKind,
    RustType,
    StructField,
    TypeKind,
    UnitKind,
    UnknownKind,
    Value,
    ValueKind,
)

__all__ = [
    # Host descriptors
    "Primitive",
    "Value",
    "Composite",
    "FieldAttr",
    "PrimitiveKind",
    "ValueKind",
    "CompositeKind",
    "UnitKind",
    "UnknownKind",
    "TypeKind",
    "RustType",
    "StructField",
    # IDL types
    "IdlScalarType",
    "IdlScalar",
    "IdlArray",
    "IdlOption",
    "IdlVec",
    "IdlTuple",
    "IdlHashMap",
    "IdlBTreeMap",
    "IdlHashSet",
    "IdlBTreeSet",
    "IdlDefined",
    "IdlType",
    "IdlField",
    # Scalar constants
    "BOOL",
    "I8",
    "I16",
    "I32",
    "I64",
    "I128",
    "U8",
    "U16",
    "U32",
    "U64",
    "U128",
    "STRING",
    "BYTES",
    "PUBLIC_KEY",
]
