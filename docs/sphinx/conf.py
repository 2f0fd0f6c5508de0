# Copyright 2026 pyants Contributors
# SPDX-License-Identifier: Apache-2.0

"""Sphinx configuration for pyants documentation."""

project = "pyants"
author = "pyants Contributors"
release = "0.1.0"

extensions: list[str] = ["sphinx.ext.autodoc"]

html_theme = "alabaster"
