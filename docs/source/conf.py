# Configuration file for the Sphinx documentation builder.
#
# -- Path setup --------------------------------------------------------------

import os
import sys

sys.path.insert(0, os.path.abspath("../.."))


# -- Project information -----------------------------------------------------

project = "sous"

# The full version, including alpha/beta/rc tags
from sous import __version__

release = __version__


# -- General configuration ---------------------------------------------------

extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.intersphinx",
    "numpydoc",
]

templates_path = []

exclude_patterns = []

numpydoc_show_class_members = False

# Order members in source order, not alphabetically
autodoc_member_order = "bysource"

intersphinx_mapping = {
    "python": ("https://docs.python.org/3", None),
    "jinja2": ("https://jinja.palletsprojects.com/en/latest/", None),
}

# -- Options for HTML output -------------------------------------------------

html_theme = "nature"
