# Copyright 2026 Shank IDL Contributors
# SPDX-License-Identifier: Apache-2.0

"""Name casing and attribute stringification for IDL fields.

The IDL uses lower camel case ("mixed case") for field names:
``token_amount`` becomes ``tokenAmount`` and ``HTTPServer`` becomes
``httpServer``.
"""

from __future__ import annotations

import re

from shank_idl.model.rust_types import FieldAttr

# ###############
# Public Interface
# ###############


def to_mixed_case(identifier: str) -> str:
    """Convert an identifier to lower camel case.

    Words are separated by any non-alphanumeric character (underscores,
    hyphens, whitespace) and by case boundaries. Letters outside ASCII are
    word characters; ``café_count`` becomes ``caféCount``.

    Case boundaries:

    - a lower-case letter followed by a capital starts a new word
      (``fooBar`` -> ``foo`` + ``Bar``);
    - a run of capitals followed by a capitalized word is an acronym
      (``HTTPServer`` -> ``HTTP`` + ``Server``);
    - digits and uncased letters take the case of the letter before them, so
      ``value2X`` splits as ``value2`` + ``X`` (giving ``value2X``) while
      ``U8Value`` splits as ``U8`` + ``Value``.
    """
    words = _split_words(identifier)
    if not words:
        return ""
    head, *tail = words
    return head.lower() + "".join(w[0].upper() + w[1:].lower() for w in tail)


def attr_to_string(attr: FieldAttr | str) -> str:
    """Return the textual form of a raw field attribute marker."""
    if isinstance(attr, FieldAttr):
        return attr.value
    return attr


# ################
# Implementation
# ################

_SEPARATOR_RE = re.compile(r"[\W_]+")

# Case of the character scanned last; digits and uncased letters inherit it.
_BOUNDARY = 0
_LOWER = 1
_UPPER = 2


def _split_words(identifier: str) -> list[str]:
    words: list[str] = []
    for chunk in _SEPARATOR_RE.split(identifier):
        words.extend(_split_chunk(chunk))
    return words


def _split_chunk(chunk: str) -> list[str]:
    words: list[str] = []
    start = 0
    mode = _BOUNDARY
    for i in range(len(chunk) - 1):
        char, nxt = chunk[i], chunk[i + 1]
        if char.islower():
            next_mode = _LOWER
        elif char.isupper():
            next_mode = _UPPER
        else:
            next_mode = mode

        if next_mode == _LOWER and nxt.isupper():
            # fooBar: split after the lower-case run.
            words.append(chunk[start : i + 1])
            start = i + 1
            mode = _BOUNDARY
        elif mode == _UPPER and char.isupper() and nxt.islower():
            # HTTPServer: the last capital starts the next word.
            words.append(chunk[start:i])
            start = i
            mode = _BOUNDARY
        else:
            mode = next_mode

    if chunk[start:]:
        words.append(chunk[start:])
    return words
