# Configuration file for the Sphinx documentation builder.
# Full config reference:
# https://www.sphinx-doc.org/en/master/usage/configuration.html

# -- Path setup --------------------------------------------------------------
# Make the project root importable so autodoc can import `tapaudit`.
import os
import sys

# If this conf.py sits in the project root (alongside tapaudit/, index.rst),
# keep ".". If docs move into a "docs/" folder, change this to "..".
sys.path.insert(0, os.path.abspath("."))

# -- Project information -----------------------------------------------------
project = "tapaudit"
author = "Ty Baker"
copyright = "2025, Ty Baker"
release = "2025.9.0"

# -- General configuration ---------------------------------------------------
extensions = [
    "sphinx.ext.autodoc",   # pull in docstrings
    "sphinx.ext.napoleon",  # allow Google/NumPy-style docstrings
    "sphinx.ext.viewcode",  # add [source] links
    "sphinx.ext.autosummary",
]
autosummary_generate = True
# The Streamlit viewer runs UI code at import time; keep it out of autodoc.
autodoc_mock_imports = ["streamlit"]

# Sensible autodoc defaults
autodoc_default_options = {
    "members": True,
    "undoc-members": False,
    "show-inheritance": False,
}
autodoc_typehints = "description"
autodoc_class_signature = "separated"

# Napoleon (Google/NumPy docstring) tweaks
napoleon_google_docstring = True
napoleon_numpy_docstring = False
napoleon_include_init_with_doc = False
napoleon_use_param = True
napoleon_use_rtype = True

templates_path = ["_templates"]
exclude_patterns = ["_build", "Thumbs.db", ".DS_Store", "data"]

# -- Options for HTML output -------------------------------------------------
html_theme = "alabaster"           # keep default; no extra install required
html_static_path = ["_static"]
html_title = f"{project} {release}"

# Optional: nicer syntax highlighting
pygments_style = "sphinx"
