"""
Recipes (:py:mod:`sous.recipe`) are turned into text by a renderer. Every
renderer implements :py:class:`~sous.renderer.base.Renderer` and so callers
can pick one at run time:

* :py:class:`~sous.renderer.markdown.MarkdownRenderer` produces a fixed
  Markdown layout and supports serving rescaling and section selection.
* :py:class:`~sous.renderer.template.TemplateRenderer` expands a user's
  Jinja2 template against the recipe.

:py:mod:`sous.renderer.base`: Renderer interface
================================================

.. automodule:: sous.renderer.base

:py:mod:`sous.renderer.markdown`: Markdown renderer
===================================================

.. automodule:: sous.renderer.markdown

:py:mod:`sous.renderer.template`: Template renderer
===================================================

.. automodule:: sous.renderer.template

:py:mod:`sous.renderer.context`: Template variables
===================================================

.. automodule:: sous.renderer.context
"""

from sous.renderer.base import RenderOptions, Renderer
from sous.renderer.markdown import MarkdownRenderer
from sous.renderer.template import TemplateRenderer

__all__ = ["RenderOptions", "Renderer", "MarkdownRenderer", "TemplateRenderer"]
