# Copyright 2026 Shank IDL Contributors
# SPDX-License-Identifier: Apache-2.0

"""Translation of parsed Rust types into IDL type nodes.

The translation is a pure function of its input. Every composite kind has an
explicit policy: it is either translated to a matching IDL node, unwrapped
transparently (``Decimal``), or rejected with :class:`TranslationError`.
"""

from __future__ import annotations

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
    IdlHashMap,
    IdlHashSet,
    IdlOption,
    IdlScalar,
    IdlTuple,
    IdlType,
    IdlVec,
)
from shank_idl.model.rust_types import (
    Composite,
    CompositeKind,
    Primitive,
    PrimitiveKind,
    RustType,
    UnitKind,
    UnknownKind,
    Value,
    ValueKind,
)

# ###############
# Public Interface
# ###############

# Custom value type that maps to the dedicated public key scalar.
PUBLIC_KEY_TYPE_NAME = "Pubkey"


class TranslationError(ValueError):
    """Raised when a Rust type has no IDL representation."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


def translate(rust_type: RustType) -> IdlType:
    """Translate a parsed Rust type into its IDL type node.

    Args:
        rust_type: The type descriptor emitted by the struct parser.

    Returns:
        The IDL type node. Nested types are translated recursively.

    Raises:
        TranslationError: If the type, or any type nested inside it, cannot
            be represented in the IDL.
    """
    rust_type = unwrap_transparent(rust_type)
    kind = rust_type.kind

    if isinstance(kind, PrimitiveKind):
        return _PRIMITIVES[kind.primitive]
    if isinstance(kind, ValueKind):
        return _translate_value(kind)
    if isinstance(kind, CompositeKind):
        return _translate_composite(kind)
    if isinstance(kind, UnitKind):
        raise TranslationError("IDL types cannot be Unit ()")
    if isinstance(kind, UnknownKind):
        raise TranslationError(f"Can only convert known types to IDL type. Type: {rust_type!r}")
    raise TranslationError(f"Unhandled type kind {kind!r}")


def unwrap_transparent(rust_type: RustType) -> RustType:
    """Strip wrapper composites that have no IDL type of their own.

    ``Decimal<P, T>`` only adds a precision to its representation type ``T``,
    so it is replaced by ``T``. Nested wrappers are unwrapped repeatedly.

    Raises:
        TranslationError: If a ``Decimal`` does not carry exactly one type
            parameter or has no precision.
    """
    kind = rust_type.kind
    while isinstance(kind, CompositeKind) and kind.composite is Composite.DECIMAL:
        if len(kind.inners) != 1:
            raise TranslationError(f"Decimal composite needs one type parameter, got {len(kind.inners)}")
        if kind.precision is None:
            raise TranslationError("Decimal composite needs a precision")
        rust_type = kind.inners[0]
        kind = rust_type.kind
    return rust_type


# ################
# Implementation
# ################

_PRIMITIVES: dict[Primitive, IdlScalar] = {
    Primitive.U8: U8,
    Primitive.U16: U16,
    Primitive.U32: U32,
    Primitive.U64: U64,
    Primitive.U128: U128,
    Primitive.I8: I8,
    Primitive.I16: I16,
    Primitive.I32: I32,
    Primitive.I64: I64,
    Primitive.I128: I128,
    # Programs run on a 64-bit target.
    Primitive.USIZE: U64,
    Primitive.BOOL: BOOL,
}


def _translate_value(kind: ValueKind) -> IdlType:
    if kind.value in (Value.CSTRING, Value.STRING, Value.STR):
        return STRING
    if kind.value is Value.CUSTOM:
        if kind.name is None:
            raise TranslationError("Rust Custom Value needs a type name")
        if kind.name == PUBLIC_KEY_TYPE_NAME:
            return PUBLIC_KEY
        return IdlDefined(name=kind.name)
    raise TranslationError(f"Unhandled Rust value type {kind.value.value}")


def _translate_composite(kind: CompositeKind) -> IdlType:
    composite = kind.composite
    inners = kind.inners

    if composite is Composite.VEC:
        inner = translate(_first_inner(kind, "Rust Vec Composite needs inner type"))
        # Vec<u8>
        if inner == U8:
            return BYTES
        return IdlVec(inner=inner)

    if composite is Composite.ARRAY:
        inner = translate(_first_inner(kind, "Rust Array Composite needs inner type"))
        if kind.size is None:
            raise TranslationError("Rust Array Composite needs a size")
        return IdlArray(inner=inner, length=kind.size)

    if composite is Composite.OPTION:
        inner = translate(_first_inner(kind, "Rust Option Composite needs inner type"))
        return IdlOption(inner=inner)

    if composite is Composite.TUPLE:
        if len(inners) < 2:
            raise TranslationError("Rust Tuple Composite needs at least two inner types")
        return IdlTuple(items=[translate(inner) for inner in inners])

    if composite is Composite.HASH_MAP:
        key, value = _key_value(kind, "Rust HashMap Composite needs two inner types")
        return IdlHashMap(key=key, value=value)

    if composite is Composite.BTREE_MAP:
        key, value = _key_value(kind, "Rust BTreeMap Composite needs two inner types")
        return IdlBTreeMap(key=key, value=value)

    if composite is Composite.HASH_SET:
        inner = translate(_first_inner(kind, "Rust HashSet Composite needs one inner type"))
        return IdlHashSet(inner=inner)

    if composite is Composite.BTREE_SET:
        inner = translate(_first_inner(kind, "Rust BTreeSet Composite needs one inner type"))
        return IdlBTreeSet(inner=inner)

    if composite is Composite.DECIMAL:
        # unwrap_transparent() replaces decimals before this point.
        raise TranslationError("Decimal composite must be unwrapped before translation")

    if composite is Composite.CUSTOM:
        raise TranslationError("Rust Custom Composite IDL type not yet supported")

    raise TranslationError(f"Unhandled Rust composite {composite.value}")


def _first_inner(kind: CompositeKind, message: str) -> RustType:
    if not kind.inners:
        raise TranslationError(message)
    return kind.inners[0]


def _key_value(kind: CompositeKind, message: str) -> tuple[IdlType, IdlType]:
    if len(kind.inners) < 2:
        raise TranslationError(message)
    return translate(kind.inners[0]), translate(kind.inners[1])
