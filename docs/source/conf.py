# Configuration file for the Sphinx documentation builder.
#
# For the full list of built-in configuration values, see the documentation:
# https://www.sphinx-doc.org/en/master/usage/configuration.html

from importlib.metadata import version as package_version

# -- Project information -----------------------------------------------------

project = 'labelframe'
author = 'labelframe contributors'
copyright = f'2026, {author}'
release = package_version('labelframe')
version = '.'.join(release.split('.')[:2])

# -- General configuration ---------------------------------------------------

extensions = [
    'sphinx.ext.autodoc',
    'sphinx.ext.autosummary',
    'sphinx.ext.doctest',
    'sphinx.ext.intersphinx',
]

autosummary_generate = True
autodoc_member_order = 'bysource'
autodoc_default_options = {
    'members': True,
    'show-inheritance': True,
}
exclude_patterns = ['_build']

intersphinx_mapping = {
    'python': ('https://docs.python.org/3', None),
    'pyarrow': ('https://arrow.apache.org/docs', None),
    'dateutil': ('https://dateutil.readthedocs.io/en/stable', None),
}

# -- Options for HTML output -------------------------------------------------

html_theme = 'nature'
