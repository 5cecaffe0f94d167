# Copyright 2026 Shank IDL Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the JSON representation of IDL types and fields."""

import json

import pytest

from shank_idl.config import IdlConfig
from shank_idl.model import (
    BOOL,
    BYTES,
    PUBLIC_KEY,
    STRING,
    U8,
    U64,
    Composite,
    IdlArray,
    IdlBTreeMap,
    IdlBTreeSet,
    IdlDefined,
    IdlField,
    IdlHashMap,
    IdlHashSet,
    IdlOption,
    IdlTuple,
    IdlVec,
    Primitive,
    RustType,
    StructField,
)
from shank_idl.serialization import (
    deserialize_fields,
    idl_field_from_obj,
    idl_field_to_obj,
    idl_type_from_obj,
    idl_type_to_obj,
    serialize_fields,
)
from shank_idl.translator import derive

# ###############
# Type Nodes
# ###############


class TestTypeToObj:
    def test_scalars_are_camel_case_strings(self) -> None:
        assert idl_type_to_obj(U64) == "u64"
        assert idl_type_to_obj(BYTES) == "bytes"
        assert idl_type_to_obj(PUBLIC_KEY) == "publicKey"

    def test_defined(self) -> None:
        assert idl_type_to_obj(IdlDefined(name="Vault")) == {"defined": "Vault"}

    def test_array(self) -> None:
        assert idl_type_to_obj(IdlArray(inner=U8, length=32)) == {"array": ["u8", 32]}

    def test_option_of_vec(self) -> None:
        assert idl_type_to_obj(IdlOption(inner=IdlVec(inner=STRING))) == {"option": {"vec": "string"}}

    def test_tuple(self) -> None:
        assert idl_type_to_obj(IdlTuple(items=[BOOL, STRING])) == {"tuple": ["bool", "string"]}

    def test_maps(self) -> None:
        assert idl_type_to_obj(IdlHashMap(key=STRING, value=U64)) == {"hashMap": ["string", "u64"]}
        assert idl_type_to_obj(IdlBTreeMap(key=STRING, value=U64)) == {"bTreeMap": ["string", "u64"]}

    def test_sets(self) -> None:
        assert idl_type_to_obj(IdlHashSet(inner=U8)) == {"hashSet": "u8"}
        assert idl_type_to_obj(IdlBTreeSet(inner=U8)) == {"bTreeSet": "u8"}


class TestTypeFromObj:
    def test_nested_type(self) -> None:
        obj = {"bTreeMap": [{"defined": "Key"}, {"option": {"array": ["u8", 4]}}]}
        expected = IdlBTreeMap(key=IdlDefined(name="Key"), value=IdlOption(inner=IdlArray(inner=U8, length=4)))
        assert idl_type_from_obj(obj) == expected

    def test_unknown_scalar(self) -> None:
        with pytest.raises(ValueError, match="Unknown scalar"):
            idl_type_from_obj("f32")

    def test_unknown_tag(self) -> None:
        with pytest.raises(ValueError, match="Unknown IDL type tag"):
            idl_type_from_obj({"list": "u8"})

    def test_multi_key_object_rejected(self) -> None:
        with pytest.raises(ValueError, match="single-key object"):
            idl_type_from_obj({"vec": "u8", "option": "u8"})

    def test_array_requires_pair(self) -> None:
        with pytest.raises(ValueError, match="two-element list"):
            idl_type_from_obj({"array": ["u8"]})

    def test_single_item_tuple_rejected(self) -> None:
        with pytest.raises(ValueError):
            idl_type_from_obj({"tuple": ["u8"]})


# ###############
# Field Records
# ###############


class TestFields:
    def test_absent_attrs_and_docs_are_omitted(self) -> None:
        obj = idl_field_to_obj(IdlField(name="owner", type=PUBLIC_KEY))
        assert obj == {"name": "owner", "type": "publicKey"}

    def test_present_attrs_and_docs_are_emitted(self) -> None:
        f = IdlField(name="amount", type=U64, attrs=["padding"], docs=["@amount decimals=6"])
        assert idl_field_to_obj(f) == {
            "name": "amount",
            "type": "u64",
            "attrs": ["padding"],
            "docs": ["@amount decimals=6"],
        }

    def test_field_from_obj(self) -> None:
        f = idl_field_from_obj({"name": "data", "type": "bytes"})
        assert f == IdlField(name="data", type=BYTES)

    def test_field_from_obj_missing_type(self) -> None:
        with pytest.raises(ValueError, match="missing key 'type'"):
            idl_field_from_obj({"name": "data"})

    def test_derived_decimal_field(self) -> None:
        decimal = RustType.owned_composite(
            "token_amount",
            Composite.DECIMAL,
            [RustType.owned_primitive("inner", Primitive.U64)],
            precision=6,
        )
        obj = idl_field_to_obj(derive(StructField(ident="token_amount", rust_type=decimal)))
        assert obj == {"name": "tokenAmount", "type": "u64", "docs": ["@amount decimals=6"]}


class TestSerializeFields:
    def _fields(self) -> list[IdlField]:
        return [
            IdlField(name="owner", type=PUBLIC_KEY),
            IdlField(name="balances", type=IdlHashMap(key=PUBLIC_KEY, value=U64), docs=["@amount decimals=9"]),
        ]

    def test_compact_by_default(self) -> None:
        data = serialize_fields(self._fields())
        assert "\n" not in data
        assert data.startswith('[{"name":"owner","type":"publicKey"}')

    def test_indent_from_config(self) -> None:
        data = serialize_fields(self._fields(), config=IdlConfig(indent=2))
        assert '\n  {\n    "name": "owner"' in data

    def test_serialized_fields_read_back(self) -> None:
        fields = self._fields()
        assert deserialize_fields(serialize_fields(fields)) == fields

    def test_deserialize_requires_array(self) -> None:
        with pytest.raises(ValueError, match="JSON array"):
            deserialize_fields(json.dumps({"name": "owner"}))


class TestEmptyLists:
    def test_empty_attrs_and_docs_are_omitted(self) -> None:
        obj = idl_field_to_obj(IdlField(name="a", type=U64, attrs=[], docs=[]))
        assert obj == {"name": "a", "type": "u64"}

    def test_empty_attrs_read_back_are_absent(self) -> None:
        fields = deserialize_fields('[{"name":"a","type":"u64","attrs":[],"docs":[]}]')
        assert fields == [IdlField(name="a", type=U64)]
        assert serialize_fields(fields) == '[{"name":"a","type":"u64"}]'
