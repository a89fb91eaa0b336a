"""Sphinx configuration for the ovbias API reference (``docs/index.rst``)."""
import os
import sys

# Make the ovbias package importable without installing
sys.path.insert(0, os.path.abspath(".."))

project   = "ovbias"
copyright = "2026, ovbias developers"
author    = "ovbias developers"
release   = "0.1.0"

root_doc = "index"

extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.napoleon",       # NumPy-style Parameters / Raises sections
    "sphinx_autodoc_typehints",  # render type hints from annotations
    "sphinx_copybutton",         # copy button on code blocks
]

html_theme = "sphinx_rtd_theme"
html_title = "ovbias: omitted-variable bias experiments"

autodoc_member_order    = "bysource"
autodoc_typehints       = "description"
autodoc_default_options = {"undoc-members": False, "show-inheritance": True}
always_document_param_types = True

napoleon_numpy_docstring = True
napoleon_use_param  = True
napoleon_use_rtype  = False
