# Copyright 2026 pyants Contributors
# SPDX-License-Identifier: Apache-2.0

"""Data model and YAML parser for value-rendering configuration."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import yaml

# ###############
# Public Interface
# ###############


class RenderConfigError(Exception):
    """Raised when a render configuration file is invalid or cannot be loaded."""


@dataclass(frozen=True)
class RenderConfig:
    """Limits applied when rendering offending values in failure messages.

    Attributes:
        max_depth: Nesting depth rendered before inner containers are elided.
        max_items: Items of a list or mapping rendered before ``...``.
        max_string: Characters of a string rendered before it is elided.
    """

    max_depth: int = 4
    max_items: int = 8
    max_string: int = 60


def load_render_config(path: Path) -> RenderConfig:
    """Load and parse a render configuration file.

    Args:
        path: Path to the YAML configuration file.

    Returns:
        A RenderConfig populated from the file; absent keys keep their defaults.

    Raises:
        RenderConfigError: If the file cannot be read or the configuration is invalid.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise RenderConfigError(f"Render config file not found: {path}") from None
    except OSError as exc:
        raise RenderConfigError(f"Cannot read render config file: {exc}") from exc

    return parse_render_config(text, source_label=str(path))


def parse_render_config(text: str, source_label: str = "<string>") -> RenderConfig:
    """Parse render config YAML text into a RenderConfig.

    An empty document yields the default configuration.

    Raises:
        RenderConfigError: If the YAML is invalid, a key is unknown, or a value
            is not a non-negative integer.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise RenderConfigError(f"Invalid YAML in {source_label}: {exc}") from exc

    if data is None:
        return RenderConfig()
    if not isinstance(data, dict):
        raise RenderConfigError(f"{source_label}: render config must be a YAML mapping")

    unknown = [key for key in data if key not in _KEYS]
    if unknown:
        raise RenderConfigError(f"{source_label}: unknown key '{unknown[0]}'")

    values = {attr: _require_count(data, key, source_label) for key, attr in _KEYS.items() if key in data}
    return RenderConfig(**values)


# ################
# Implementation
# ################

_KEYS = {
    "max-depth": "max_depth",
    "max-items": "max_items",
    "max-string": "max_string",
}


def _require_count(mapping: dict[str, object], key: str, source_label: str) -> int:
    """Extract a non-negative integer field, raising RenderConfigError otherwise."""
    value = mapping[key]
    # YAML booleans load as bool, which is an int subclass.
    if isinstance(value, bool) or not isinstance(value, int):
        raise RenderConfigError(f"{source_label}: '{key}' must be an integer")
    if value < 0:
        raise RenderConfigError(f"{source_label}: '{key}' must not be negative")
    return value
