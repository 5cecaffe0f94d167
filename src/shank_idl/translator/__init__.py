# Copyright 2026 Shank IDL Contributors
# SPDX-License-Identifier: Apache-2.0

"""Translation of parsed Rust types and struct fields into the IDL model."""

from shank_idl.translator.idl_field import (
    FieldDerivationResult,
    FieldError,
    FieldTranslationError,
    auto_docs,
    derive,
    derive_fields,
)
from shank_idl.translator.idl_type import PUBLIC_KEY_TYPE_NAME, TranslationError, translate, unwrap_transparent
from shank_idl.translator.naming import attr_to_string, to_mixed_case

__all__ = [
    "translate",
    "unwrap_transparent",
    "TranslationError",
    "PUBLIC_KEY_TYPE_NAME",
    "derive",
    "derive_fields",
    "auto_docs",
    "FieldDerivationResult",
    "FieldError",
    "FieldTranslationError",
    "to_mixed_case",
    "attr_to_string",
]
