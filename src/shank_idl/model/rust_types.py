# Copyright 2026 Shank IDL Contributors
# SPDX-License-Identifier: Apache-2.0

"""Host (Rust) type descriptors consumed by the IDL translator.

These models mirror what the struct parser emits for a single type or field.
They are produced elsewhere; the translator only reads them.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict
from pydantic import Field as _Field

# ###############
# Public Interface
# ###############


class Primitive(Enum):
    """Rust primitive scalar types."""

    U8 = "u8"
    U16 = "u16"
    U32 = "u32"
    U64 = "u64"
    U128 = "u128"
    I8 = "i8"
    I16 = "i16"
    I32 = "i32"
    I64 = "i64"
    I128 = "i128"
    USIZE = "usize"
    BOOL = "bool"


class Value(Enum):
    """Owned value types: the string family or a user-defined type."""

    CSTRING = "CString"
    STRING = "String"
    STR = "str"
    CUSTOM = "Custom"


class Composite(Enum):
    """Generic container kinds that wrap one or more inner types."""

    VEC = "Vec"
    ARRAY = "Array"
    OPTION = "Option"
    TUPLE = "Tuple"
    HASH_MAP = "HashMap"
    BTREE_MAP = "BTreeMap"
    HASH_SET = "HashSet"
    BTREE_SET = "BTreeSet"
    DECIMAL = "Decimal"
    CUSTOM = "Custom"


class FieldAttr(Enum):
    """Known attribute markers a struct field may carry."""

    PADDING = "padding"


class PrimitiveKind(BaseModel):
    """A primitive scalar such as ``u64`` or ``bool``."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["primitive"] = "primitive"
    primitive: Primitive


class ValueKind(BaseModel):
    """A value type; ``name`` carries the identifier of a ``Custom`` value."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["value"] = "value"
    value: Value
    name: str | None = None


class CompositeKind(BaseModel):
    """A composite type with ordered inner type descriptors.

    ``size`` is the length of an ``Array``, ``precision`` the decimals of a
    ``Decimal`` and ``name`` the identifier of a ``Custom`` composite.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["composite"] = "composite"
    composite: Composite
    inners: list[RustType] = _Field(default_factory=list)
    size: int | None = _Field(default=None, ge=0)
    precision: int | None = _Field(default=None, ge=0)
    name: str | None = None


class UnitKind(BaseModel):
    """The unit type ``()``."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["unit"] = "unit"


class UnknownKind(BaseModel):
    """A type shape the parser could not classify."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["unknown"] = "unknown"


# The `kind` discriminator mirrors the parser's type classification.
TypeKind = Annotated[
    PrimitiveKind | ValueKind | CompositeKind | UnitKind | UnknownKind,
    _Field(discriminator="kind"),
]


class RustType(BaseModel):
    """A parsed Rust type: the identifier it was declared under and its kind."""

    model_config = ConfigDict(frozen=True)

    ident: str
    kind: TypeKind

    @classmethod
    def owned_primitive(cls, ident: str, primitive: Primitive) -> RustType:
        return cls(ident=ident, kind=PrimitiveKind(primitive=primitive))

    @classmethod
    def owned_string(cls, ident: str) -> RustType:
        return cls(ident=ident, kind=ValueKind(value=Value.STRING))

    @classmethod
    def owned_custom_value(cls, ident: str, name: str) -> RustType:
        return cls(ident=ident, kind=ValueKind(value=Value.CUSTOM, name=name))

    @classmethod
    def owned_composite(
        cls,
        ident: str,
        composite: Composite,
        inners: list[RustType],
        *,
        size: int | None = None,
        precision: int | None = None,
        name: str | None = None,
    ) -> RustType:
        """Build a composite type around already constructed inner types."""
        return cls(
            ident=ident,
            kind=CompositeKind(
                composite=composite,
                inners=inners,
                size=size,
                precision=precision,
                name=name,
            ),
        )

    @classmethod
    def owned_vec_primitive(cls, ident: str, primitive: Primitive) -> RustType:
        inner = cls.owned_primitive("inner", primitive)
        return cls.owned_composite(ident, Composite.VEC, [inner])

    @classmethod
    def owned_array_primitive(cls, ident: str, primitive: Primitive, size: int) -> RustType:
        inner = cls.owned_primitive("inner", primitive)
        return cls.owned_composite(ident, Composite.ARRAY, [inner], size=size)

    @classmethod
    def owned_option_primitive(cls, ident: str, primitive: Primitive) -> RustType:
        inner = cls.owned_primitive("inner", primitive)
        return cls.owned_composite(ident, Composite.OPTION, [inner])


class StructField(BaseModel):
    """A single named field of a parsed struct.

    Attributes:
        ident: The field identifier as written in the source.
        rust_type: The declared type of the field.
        override: Replacement type used for the IDL instead of ``rust_type``.
        attrs: Raw attribute markers in declaration order.
    """

    model_config = ConfigDict(frozen=True)

    ident: str
    rust_type: RustType
    override: RustType | None = None
    attrs: list[FieldAttr | str] = _Field(default_factory=list)

    def type_override(self) -> RustType | None:
        """Return the explicit IDL type override, if the field declares one."""
        return self.override


# Resolve forward references for self-referential models.
CompositeKind.model_rebuild()
RustType.model_rebuild()
StructField.model_rebuild()
