"""
Sphinx configuration for the Math it API documentation.
"""

import os
import sys

# Package lives under src/
sys.path.insert(0, os.path.abspath('../../src'))

from mathit import __version__  # noqa: E402

# Project information
project = 'Math it'
copyright = '2026, Math it Contributors'
author = 'Math it Contributors'
release = __version__

extensions = [
    'sphinx.ext.autodoc',
    'sphinx.ext.autosummary',
    'sphinx.ext.napoleon',
    'sphinx.ext.viewcode',
    'sphinx.ext.intersphinx',
    'sphinx_autodoc_typehints',
]

templates_path = ['_templates']
source_suffix = '.rst'
master_doc = 'index'
exclude_patterns = ['_build', 'Thumbs.db', '.DS_Store']

html_theme = 'sphinx_rtd_theme'

# Autodoc settings
autodoc_default_options = {
    'members': True,
    'member-order': 'bysource',
    'undoc-members': True,
    'show-inheritance': True,
}
# Enum members and dataclass fields read better in source order
autodoc_member_order = 'bysource'

# Napoleon settings (Google-style docstrings only)
napoleon_google_docstring = True
napoleon_numpy_docstring = False
napoleon_include_init_with_doc = True
napoleon_use_ivar = True
napoleon_attr_annotations = True

intersphinx_mapping = {
    'python': ('https://docs.python.org/3', None),
}

# Type hints settings
typehints_fully_qualified = False
typehints_document_rtype = True

autosummary_generate = True
