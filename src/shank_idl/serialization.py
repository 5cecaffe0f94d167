# Copyright 2026 Shank IDL Contributors
# SPDX-License-Identifier: Apache-2.0

"""Serialization of IDL types and fields to their JSON schema representation.

Type nodes are externally tagged with camelCase variant names: scalars are
bare strings (``"u64"``, ``"publicKey"``) and compound types are single-key
objects (``{"vec": "u16"}``, ``{"array": ["u8", 32]}``). Field records omit
``attrs`` and ``docs`` entirely when absent.
"""

from __future__ import annotations

import json
from typing import Any

from shank_idl.config import IdlConfig
from shank_idl.model.idl import (
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

# ###############
# Public Interface
# ###############


def serialize_fields(fields: list[IdlField], *, config: IdlConfig | None = None) -> str:
    """Serialize IDL fields to a JSON array string.

    Output is compact unless ``config.indent`` is set.
    """
    objs = [idl_field_to_obj(f) for f in fields]
    if config is not None and config.indent is not None:
        return json.dumps(objs, indent=config.indent)
    return json.dumps(objs, separators=(",", ":"))


def deserialize_fields(data: str) -> list[IdlField]:
    """Deserialize IDL fields from a JSON array string.

    Raises:
        ValueError: If the data is not valid JSON or not a list of field objects.
    """
    obj = json.loads(data)
    if not isinstance(obj, list):
        raise ValueError(f"Expected a JSON array of fields, got {type(obj).__name__}")
    return [idl_field_from_obj(f) for f in obj]


def idl_field_to_obj(idl_field: IdlField) -> dict[str, Any]:
    d: dict[str, Any] = {"name": idl_field.name, "type": idl_type_to_obj(idl_field.type)}
    if idl_field.attrs:
        d["attrs"] = list(idl_field.attrs)
    if idl_field.docs:
        d["docs"] = list(idl_field.docs)
    return d


def idl_field_from_obj(obj: Any) -> IdlField:
    """Rebuild an :class:`IdlField` from its serialized object.

    Raises:
        ValueError: If required keys are missing or the type is malformed.
    """
    if not isinstance(obj, dict):
        raise ValueError(f"Expected a field object, got {obj!r}")
    try:
        name = obj["name"]
        ty = obj["type"]
    except KeyError as exc:
        raise ValueError(f"Field object is missing key {exc.args[0]!r}") from exc
    return IdlField(
        name=name,
        type=idl_type_from_obj(ty),
        attrs=obj.get("attrs"),
        docs=obj.get("docs"),
    )


def idl_type_to_obj(idl_type: IdlType) -> Any:
    """Convert an IDL type node to its externally tagged JSON value."""
    if isinstance(idl_type, IdlScalar):
        return idl_type.scalar.value
    if isinstance(idl_type, IdlArray):
        return {"array": [idl_type_to_obj(idl_type.inner), idl_type.length]}
    if isinstance(idl_type, IdlTuple):
        return {"tuple": [idl_type_to_obj(t) for t in idl_type.items]}
    if isinstance(idl_type, (IdlHashMap, IdlBTreeMap)):
        return {idl_type.kind: [idl_type_to_obj(idl_type.key), idl_type_to_obj(idl_type.value)]}
    if isinstance(idl_type, (IdlOption, IdlVec, IdlHashSet, IdlBTreeSet)):
        return {idl_type.kind: idl_type_to_obj(idl_type.inner)}
    if isinstance(idl_type, IdlDefined):
        return {"defined": idl_type.name}
    raise ValueError(f"Unknown IDL type node: {idl_type!r}")


def idl_type_from_obj(obj: Any) -> IdlType:
    """Rebuild an IDL type node from its externally tagged JSON value.

    Raises:
        ValueError: If the value is not a recognised type representation.
    """
    if isinstance(obj, str):
        try:
            return IdlScalar(scalar=IdlScalarType(obj))
        except ValueError:
            raise ValueError(f"Unknown scalar IDL type: {obj!r}") from None

    if not isinstance(obj, dict) or len(obj) != 1:
        raise ValueError(f"Expected a scalar name or single-key object, got {obj!r}")

    ((tag, payload),) = obj.items()
    if tag == "defined":
        return IdlDefined(name=payload)
    if tag == "array":
        inner, length = _pair(tag, payload)
        return IdlArray(inner=idl_type_from_obj(inner), length=length)
    if tag == "tuple":
        if not isinstance(payload, list):
            raise ValueError(f"'tuple' expects a list, got {payload!r}")
        return IdlTuple(items=[idl_type_from_obj(t) for t in payload])
    if tag in _MAP_TYPES:
        key, value = _pair(tag, payload)
        return _MAP_TYPES[tag](key=idl_type_from_obj(key), value=idl_type_from_obj(value))
    if tag in _WRAPPER_TYPES:
        return _WRAPPER_TYPES[tag](inner=idl_type_from_obj(payload))
    raise ValueError(f"Unknown IDL type tag: {tag!r}")


# ################
# Implementation
# ################

_MAP_TYPES: dict[str, type[IdlHashMap] | type[IdlBTreeMap]] = {
    "hashMap": IdlHashMap,
    "bTreeMap": IdlBTreeMap,
}

_WRAPPER_TYPES: dict[str, type[IdlOption] | type[IdlVec] | type[IdlHashSet] | type[IdlBTreeSet]] = {
    "option": IdlOption,
    "vec": IdlVec,
    "hashSet": IdlHashSet,
    "bTreeSet": IdlBTreeSet,
}


def _pair(tag: str, payload: Any) -> tuple[Any, Any]:
    if not isinstance(payload, list) or len(payload) != 2:
        raise ValueError(f"{tag!r} expects a two-element list, got {payload!r}")
    return payload[0], payload[1]
