# Copyright 2026 pyants Contributors
# SPDX-License-Identifier: Apache-2.0

"""Rendering of values inside failure messages, and its configuration."""

from pyants.render.config import RenderConfig, RenderConfigError, load_render_config, parse_render_config
from pyants.render.pretty import Renderer, make_renderer, to_pretty

__all__ = [
    "RenderConfig",
    "RenderConfigError",
    "Renderer",
    "load_render_config",
    "make_renderer",
    "parse_render_config",
    "to_pretty",
]
