# Copyright 2026 pyants Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the render configuration module."""

from pathlib import Path

import pytest

from pyants.render import RenderConfig, RenderConfigError, load_render_config, parse_render_config

# ###############
# Helpers
# ###############


def _write_config(tmp_path: Path, content: str) -> Path:
    """Write a render config file and return its path."""
    config_file = tmp_path / "render.yaml"
    config_file.write_text(content, encoding="utf-8")
    return config_file


# ###############
# Normal Cases
# ###############


def test_full_config(tmp_path: Path) -> None:
    """All keys are read into the matching attributes."""
    content = """\
max-depth: 2
max-items: 3
max-string: 20
"""
    config = load_render_config(_write_config(tmp_path, content))

    assert config == RenderConfig(max_depth=2, max_items=3, max_string=20)


def test_partial_config_keeps_defaults(tmp_path: Path) -> None:
    """Absent keys keep their default values."""
    config = load_render_config(_write_config(tmp_path, "max-items: 1\n"))

    assert config.max_items == 1
    assert config.max_depth == RenderConfig().max_depth
    assert config.max_string == RenderConfig().max_string


def test_empty_file_is_default(tmp_path: Path) -> None:
    """An empty document yields the default configuration."""
    assert load_render_config(_write_config(tmp_path, "")) == RenderConfig()


def test_zero_is_allowed() -> None:
    """Zero is a valid limit."""
    assert parse_render_config("max-items: 0").max_items == 0


# ###############
# Error Cases
# ###############


def test_missing_file(tmp_path: Path) -> None:
    """A missing file raises RenderConfigError naming the path."""
    with pytest.raises(RenderConfigError, match="not found"):
        load_render_config(tmp_path / "absent.yaml")


def test_invalid_yaml() -> None:
    """Malformed YAML is reported with the source label."""
    with pytest.raises(RenderConfigError, match="Invalid YAML in cfg"):
        parse_render_config("max-items: [1,\n", source_label="cfg")


def test_not_a_mapping() -> None:
    """The document must be a mapping."""
    with pytest.raises(RenderConfigError, match="must be a YAML mapping"):
        parse_render_config("- 1\n- 2\n")


def test_unknown_key() -> None:
    """Unknown keys are rejected by name."""
    with pytest.raises(RenderConfigError, match="unknown key 'max-width'"):
        parse_render_config("max-width: 3\n")


@pytest.mark.parametrize("value", ["three", "1.5", "true", "[1]"])
def test_non_integer_value(value: str) -> None:
    """Values must be integers; booleans do not count."""
    with pytest.raises(RenderConfigError, match="'max-depth' must be an integer"):
        parse_render_config(f"max-depth: {value}\n")


def test_negative_value() -> None:
    """Negative limits are rejected."""
    with pytest.raises(RenderConfigError, match="must not be negative"):
        parse_render_config("max-string: -1\n")
