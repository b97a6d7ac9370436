"""
Convert YAML recipes into Markdown documents.

.. automodule:: sous.recipe

.. automodule:: sous.renderer

.. automodule:: sous.cookbook

.. automodule:: sous.number_formatting

.. automodule:: sous.exceptions
"""

__version__ = "0.3.0"
