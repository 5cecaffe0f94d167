# Copyright 2026 Shank IDL Contributors
# SPDX-License-Identifier: Apache-2.0

"""Sphinx configuration for the Shank IDL API reference.

Build with ``sphinx-build -b html docs/sphinx build/docs`` (``tools/ci.py docs``).
"""

import sys
from pathlib import Path

# Import the package from the source tree when it is not installed.
sys.path.insert(0, str(Path(__file__).resolve().parents[2] / "src"))

from shank_idl import __version__  # noqa: E402

project = "Shank IDL"
author = "Shank IDL Contributors"
release = __version__

extensions: list[str] = ["sphinx.ext.autodoc", "sphinx.ext.napoleon"]

autodoc_member_order = "bysource"
autodoc_typehints = "description"
autodoc_default_options = {"members": True, "show-inheritance": True}
napoleon_google_docstring = True
napoleon_numpy_docstring = False

exclude_patterns = ["_build"]
html_theme = "alabaster"
