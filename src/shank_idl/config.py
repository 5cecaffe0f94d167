# Copyright 2026 Shank IDL Contributors
# SPDX-License-Identifier: Apache-2.0

"""Data model and YAML parser for the IDL generation configuration file."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import yaml

# ###############
# Public Interface
# ###############

CONFIG_FILE_NAME = ".shank-idl.yaml"


class IdlConfigError(Exception):
    """Raised when a configuration file is invalid or cannot be loaded."""


@dataclass(frozen=True)
class IdlConfig:
    """Settings for deriving and serializing IDL fields.

    Attributes:
        fail_fast: Raise on the first field that cannot be translated instead
            of collecting the error and continuing.
        indent: JSON indentation for serialized output; ``None`` is compact.
    """

    fail_fast: bool = False
    indent: int | None = None


def load_idl_config(path: Path) -> IdlConfig:
    """Load and parse an IDL configuration file.

    Args:
        path: Path to the ``.shank-idl.yaml`` file.

    Returns:
        An IdlConfig instance populated from the file.

    Raises:
        IdlConfigError: If the file cannot be read or the configuration is invalid.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise IdlConfigError(f"IDL config file not found: {path}") from None
    except OSError as exc:
        raise IdlConfigError(f"Cannot read IDL config file: {exc}") from exc

    return parse_idl_config(text, source_label=str(path))


def parse_idl_config(text: str, source_label: str = "<string>") -> IdlConfig:
    """Parse configuration YAML text into an IdlConfig.

    An empty document yields the default configuration.

    Raises:
        IdlConfigError: If the YAML is invalid or a setting has a bad value.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise IdlConfigError(f"Invalid YAML in {source_label}: {exc}") from exc

    if data is None:
        return IdlConfig()
    if not isinstance(data, dict):
        raise IdlConfigError(f"{source_label}: IDL config must be a YAML mapping")

    unknown = sorted(set(data) - _KNOWN_KEYS)
    if unknown:
        raise IdlConfigError(f"{source_label}: unknown setting(s): {', '.join(map(str, unknown))}")

    return IdlConfig(
        fail_fast=_parse_on_error(data, source_label),
        indent=_parse_indent(data, source_label),
    )


# ################
# Implementation
# ################

_KNOWN_KEYS = {"on-error", "indent"}
_ON_ERROR_MODES = {"collect": False, "fail": True}


def _parse_on_error(data: dict[str, object], source_label: str) -> bool:
    if "on-error" not in data:
        return False
    mode = data["on-error"]
    if not isinstance(mode, str) or mode not in _ON_ERROR_MODES:
        raise IdlConfigError(f"{source_label}: 'on-error' must be one of 'collect', 'fail', got {mode!r}")
    return _ON_ERROR_MODES[mode]


def _parse_indent(data: dict[str, object], source_label: str) -> int | None:
    indent = data.get("indent")
    if indent is None:
        return None
    # bool is an int subclass; reject `indent: true`.
    if isinstance(indent, bool) or not isinstance(indent, int) or indent < 0:
        raise IdlConfigError(f"{source_label}: 'indent' must be a non-negative integer")
    return indent
