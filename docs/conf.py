# Configuration file for the Sphinx documentation builder.
#
# tmdsim documentation

import os
import sys

# Allow Sphinx to import the tmdsim package
sys.path.insert(0, os.path.abspath(".."))

# -- Project information -----------------------------------------------------
project = "tmdsim"
copyright = "2025, tmdsim"
author = "tmdsim"
release = "0.1.0"
version = "0.1.0"

# -- General configuration ---------------------------------------------------
extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.napoleon",
]

exclude_patterns = ["_build"]

# -- Options for HTML output -------------------------------------------------
try:
    import sphinx_rtd_theme  # noqa: F401
    html_theme = "sphinx_rtd_theme"
except ImportError:
    html_theme = "alabaster"
html_title = "tmdsim"

# -- Extension configuration -------------------------------------------------
autodoc_default_options = {
    "members": True,
    "member-order": "bysource",
    "show-inheritance": True,
}

napoleon_google_docstring = True
