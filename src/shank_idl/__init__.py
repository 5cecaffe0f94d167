# Copyright 2026 Shank IDL Contributors
# SPDX-License-Identifier: Apache-2.0

"""Shank IDL: translate parsed Rust types and struct fields into IDL schema types."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("shank-idl")
except PackageNotFoundError:
    __version__ = "(local)"
