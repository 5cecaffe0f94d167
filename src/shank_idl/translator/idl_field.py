# Copyright 2026 Shank IDL Contributors
# SPDX-License-Identifier: Apache-2.0

"""Derivation of IDL field records from parsed struct fields."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from shank_idl.config import IdlConfig
from shank_idl.model.idl import IdlField
from shank_idl.model.rust_types import Composite, CompositeKind, RustType, StructField
from shank_idl.translator.idl_type import TranslationError, translate
from shank_idl.translator.naming import attr_to_string, to_mixed_case

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


class FieldTranslationError(TranslationError):
    """A translation failure attributed to a single struct field."""

    def __init__(self, field_name: str, message: str) -> None:
        super().__init__(f"Field '{field_name}': {message}")
        self.field_name = field_name


@dataclass(frozen=True)
class FieldError:
    """A field that could not be translated.

    Attributes:
        field_name: Identifier of the field as declared in the struct.
        message: Human-readable description of the failure.
    """

    field_name: str
    message: str


@dataclass
class FieldDerivationResult:
    """Outcome of deriving a collection of fields.

    Attributes:
        fields: Successfully derived fields, in input order.
        errors: One entry per field that failed to translate.
    """

    fields: list[IdlField] = field(default_factory=list)
    errors: list[FieldError] = field(default_factory=list)

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)


def derive(struct_field: StructField) -> IdlField:
    """Derive the IDL record of a single struct field.

    The IDL type is taken from the field's type override when present,
    otherwise from its declared type. Documentation is always derived from
    the declared type.

    Raises:
        TranslationError: If the field's type cannot be translated.
    """
    docs = auto_docs(struct_field.rust_type)

    override = struct_field.type_override()
    ty = translate(override if override is not None else struct_field.rust_type)

    attrs = [attr_to_string(attr) for attr in struct_field.attrs]

    return IdlField(
        name=to_mixed_case(struct_field.ident),
        type=ty,
        attrs=attrs or None,
        docs=docs,
    )


def auto_docs(rust_type: RustType) -> list[str] | None:
    """Return generated documentation for a declared type, if any.

    Only ``Decimal<P, T>`` produces docs: its precision is lost once the type
    is reduced to ``T``, so it is recorded as ``@amount decimals=P``.

    Raises:
        TranslationError: If the ``Decimal`` has no precision.
    """
    kind = rust_type.kind
    if isinstance(kind, CompositeKind) and kind.composite is Composite.DECIMAL:
        if kind.precision is None:
            raise TranslationError("Decimal composite needs a precision")
        return [f"@amount decimals={kind.precision}"]
    return None


def derive_fields(
    struct_fields: Iterable[StructField],
    *,
    config: IdlConfig | None = None,
) -> FieldDerivationResult:
    """Derive IDL records for a collection of struct fields.

    Fields are independent: a failing field is reported in
    :attr:`FieldDerivationResult.errors` and the remaining fields are still
    derived.

    Args:
        struct_fields: Parsed fields, typically all fields of one struct.
        config: Controls error handling. With ``fail_fast`` set, the first
            failure is raised instead of collected.

    Raises:
        FieldTranslationError: On the first failure when ``config.fail_fast``
            is set.
    """
    fail_fast = config.fail_fast if config is not None else False
    result = FieldDerivationResult()

    for struct_field in struct_fields:
        try:
            result.fields.append(derive(struct_field))
        except TranslationError as exc:
            logger.debug("Cannot translate field %r: %s", struct_field.ident, exc.message)
            if fail_fast:
                raise FieldTranslationError(struct_field.ident, exc.message) from exc
            result.errors.append(FieldError(field_name=struct_field.ident, message=exc.message))

    return result
