# Configuration file for the Sphinx documentation builder.
#
# For the full list of built-in configuration values, see the documentation:
# https://www.sphinx-doc.org/en/master/usage/configuration.html

import os
import sys

sys.path.insert(0, os.path.abspath("../src"))

# -- Project information -----------------------------------------------------

project = 'dimvalue'
copyright = '2026, dimvalue contributors'
author = 'dimvalue contributors'
html_title = 'dimvalue Docs'

# -- General configuration ---------------------------------------------------

extensions = [
    'sphinx.ext.autodoc',
    'sphinx.ext.napoleon',
    'sphinx.ext.viewcode',
    'sphinx_copybutton',
    "myst_parser"
]

autodoc_member_order = "bysource"
napoleon_numpy_docstring = True

templates_path = ['_templates']
exclude_patterns = ['_build', 'Thumbs.db', '.DS_Store']


# -- Options for HTML output -------------------------------------------------

html_theme = "furo"

html_theme_options = {
    "sidebar_hide_name": False,
    "navigation_with_keys": True,
    "top_of_page_buttons": ["view"],
    "light_css_variables": {
        "color-brand-primary": "#2f7d6d",
        "color-brand-content": "#1d4f45",
    },
    "dark_css_variables": {
        "color-brand-primary": "#6fc9b5",
        "color-brand-content": "#a8e3d6",
    },
}

source_suffix = {
    ".rst": "restructuredtext",
    ".md": "markdown",
}
