#!/usr/bin/env python3

# Copyright (C) 2024 The ecsig developers
#
# This file is part of ecsig. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecsig including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Configuration file for the Sphinx documentation builder.

Build the html documentation from the repository root with:

    sphinx-build -b html docs/source docs/build
"""

import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join("..", "..")))

import ecsig  # noqa: E402 # pylint: disable=wrong-import-position

# -- Project information -----------------------------------------------------

project = ecsig.name
project_copyright = f"2024 {ecsig.__author__}"
author = ecsig.__author__
release = ecsig.__version__

# -- General configuration ---------------------------------------------------

extensions = [
    "myst_parser",
    "sphinx.ext.autodoc",
    "sphinx.ext.doctest",
    "sphinx.ext.napoleon",
    "sphinx.ext.viewcode",
]

source_suffix = [".rst", ".md"]

exclude_patterns = ["_build", "Thumbs.db", ".DS_Store"]

# show default curves by name, not by their long repr
autodoc_preserve_defaults = True

# -- Options for HTML output -------------------------------------------------

html_theme = "sphinx_rtd_theme"
