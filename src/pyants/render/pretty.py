# Copyright 2026 pyants Contributors
# SPDX-License-Identifier: Apache-2.0

"""Default renderer for offending values in type-check failure messages.

A renderer is any ``Callable[[Any], str]``. Type systems accept one as a
pluggable dependency; this module supplies the default, built on
:class:`reprlib.Repr` so that large or deeply nested values stay readable.
"""

from __future__ import annotations

import reprlib
from collections.abc import Callable
from typing import Any

from pyants.render.config import RenderConfig

Renderer = Callable[[Any], str]

# ###############
# Public Interface
# ###############


def make_renderer(config: RenderConfig) -> Renderer:
    """Return a renderer that truncates values according to *config*."""
    printer = reprlib.Repr()
    printer.maxlevel = config.max_depth
    printer.maxlist = config.max_items
    printer.maxtuple = config.max_items
    printer.maxdict = config.max_items
    printer.maxset = config.max_items
    printer.maxfrozenset = config.max_items
    printer.maxstring = config.max_string
    printer.maxother = config.max_string

    def render(value: Any) -> str:
        return printer.repr(value)

    return render


to_pretty: Renderer = make_renderer(RenderConfig())
