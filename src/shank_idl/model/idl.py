# Copyright 2026 Shank IDL Contributors
# SPDX-License-Identifier: Apache-2.0

"""IDL type nodes and field records produced by the translator."""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic import Field as _Field

# ###############
# Public Interface
# ###############


class IdlScalarType(Enum):
    """Leaf IDL types. Values are the camelCase tags used when serialized."""

    BOOL = "bool"
    I8 = "i8"
    I16 = "i16"
    I32 = "i32"
    I64 = "i64"
    I128 = "i128"
    U8 = "u8"
    U16 = "u16"
    U32 = "u32"
    U64 = "u64"
    U128 = "u128"
    STRING = "string"
    BYTES = "bytes"
    PUBLIC_KEY = "publicKey"


class IdlScalar(BaseModel):
    """A scalar IDL type."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["scalar"] = "scalar"
    scalar: IdlScalarType


class IdlArray(BaseModel):
    """A fixed-length array ``[inner; length]``."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["array"] = "array"
    inner: IdlType
    length: int = _Field(ge=0)


class IdlOption(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["option"] = "option"
    inner: IdlType


class IdlVec(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["vec"] = "vec"
    inner: IdlType


class IdlTuple(BaseModel):
    """An ordered tuple of at least two items."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["tuple"] = "tuple"
    items: list[IdlType] = _Field(min_length=2)


class IdlHashMap(BaseModel):
    """A map without key ordering guarantees."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["hashMap"] = "hashMap"
    key: IdlType
    value: IdlType


class IdlBTreeMap(BaseModel):
    """A map ordered by key."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["bTreeMap"] = "bTreeMap"
    key: IdlType
    value: IdlType


class IdlHashSet(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["hashSet"] = "hashSet"
    inner: IdlType


class IdlBTreeSet(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["bTreeSet"] = "bTreeSet"
    inner: IdlType


class IdlDefined(BaseModel):
    """A reference to a type declared elsewhere in the IDL, by name."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["defined"] = "defined"
    name: str


# Any IDL type node. The `kind` values double as the serialized variant tags.
IdlType = Annotated[
    IdlScalar
    | IdlArray
    | IdlOption
    | IdlVec
    | IdlTuple
    | IdlHashMap
    | IdlBTreeMap
    | IdlHashSet
    | IdlBTreeSet
    | IdlDefined,
    _Field(discriminator="kind"),
]


class IdlField(BaseModel):
    """A struct field as described in the IDL.

    ``attrs`` and ``docs`` are ``None`` when there is nothing to report; they
    are never empty lists.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    type: IdlType
    attrs: list[str] | None = None
    docs: list[str] | None = None

    @field_validator("attrs", "docs")
    @classmethod
    def empty_as_absent(cls, value: list[str] | None) -> list[str] | None:
        return value or None


BOOL = IdlScalar(scalar=IdlScalarType.BOOL)
I8 = IdlScalar(scalar=IdlScalarType.I8)
I16 = IdlScalar(scalar=IdlScalarType.I16)
I32 = IdlScalar(scalar=IdlScalarType.I32)
I64 = IdlScalar(scalar=IdlScalarType.I64)
I128 = IdlScalar(scalar=IdlScalarType.I128)
U8 = IdlScalar(scalar=IdlScalarType.U8)
U16 = IdlScalar(scalar=IdlScalarType.U16)
U32 = IdlScalar(scalar=IdlScalarType.U32)
U64 = IdlScalar(scalar=IdlScalarType.U64)
U128 = IdlScalar(scalar=IdlScalarType.U128)
STRING = IdlScalar(scalar=IdlScalarType.STRING)
BYTES = IdlScalar(scalar=IdlScalarType.BYTES)
PUBLIC_KEY = IdlScalar(scalar=IdlScalarType.PUBLIC_KEY)


# Resolve forward references for recursive type nodes.
IdlArray.model_rebuild()
IdlOption.model_rebuild()
IdlVec.model_rebuild()
IdlTuple.model_rebuild()
IdlHashMap.model_rebuild()
IdlBTreeMap.model_rebuild()
IdlHashSet.model_rebuild()
IdlBTreeSet.model_rebuild()
IdlField.model_rebuild()
