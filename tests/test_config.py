# Copyright 2026 Shank IDL Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the IDL configuration module."""

from pathlib import Path

import pytest

from shank_idl.config import CONFIG_FILE_NAME, IdlConfig, IdlConfigError, load_idl_config, parse_idl_config

# ###############
# Helpers
# ###############


def _write_config(tmp_path: Path, content: str) -> Path:
    """Write a config file and return its path."""
    config_file = tmp_path / CONFIG_FILE_NAME
    config_file.write_text(content, encoding="utf-8")
    return config_file


# ###############
# Normal Cases
# ###############


def test_empty_config_uses_defaults(tmp_path: Path) -> None:
    """An empty file yields the default configuration."""
    config = load_idl_config(_write_config(tmp_path, ""))
    assert config == IdlConfig()
    assert not config.fail_fast
    assert config.indent is None


def test_full_config(tmp_path: Path) -> None:
    """Both settings are read from the file."""
    config = load_idl_config(_write_config(tmp_path, "on-error: fail\nindent: 2\n"))
    assert config == IdlConfig(fail_fast=True, indent=2)


def test_collect_mode() -> None:
    assert parse_idl_config("on-error: collect\n") == IdlConfig(fail_fast=False)


# ###############
# Error Cases
# ###############


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(IdlConfigError, match="not found"):
        load_idl_config(tmp_path / CONFIG_FILE_NAME)


def test_invalid_yaml(tmp_path: Path) -> None:
    config_file = _write_config(tmp_path, "on-error: [unclosed\n")
    with pytest.raises(IdlConfigError, match="Invalid YAML"):
        load_idl_config(config_file)


def test_non_mapping() -> None:
    with pytest.raises(IdlConfigError, match="must be a YAML mapping"):
        parse_idl_config("- fail\n")


def test_unknown_on_error_mode() -> None:
    with pytest.raises(IdlConfigError, match="'on-error' must be one of"):
        parse_idl_config("on-error: ignore\n")


@pytest.mark.parametrize("value", ["-1", "two", "true"])
def test_invalid_indent(value: str) -> None:
    with pytest.raises(IdlConfigError, match="'indent' must be a non-negative integer"):
        parse_idl_config(f"indent: {value}\n")


def test_unknown_setting_is_reported_with_label() -> None:
    with pytest.raises(IdlConfigError, match=r"my\.yaml: unknown setting\(s\): colour"):
        parse_idl_config("colour: blue\n", source_label="my.yaml")
