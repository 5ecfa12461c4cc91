# Copyright 2026 Protomodel Contributors
# SPDX-License-Identifier: Apache-2.0

"""Sphinx configuration for protomodel documentation."""

project = "protomodel"
author = "Protomodel Contributors"
release = "0.1.0"

extensions: list[str] = ["sphinx.ext.autodoc", "sphinx.ext.napoleon"]

html_theme = "alabaster"
