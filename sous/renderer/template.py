"""
Rendering recipes with user supplied `Jinja2 <https://jinja.palletsprojects.com/>`_
templates.

Templates are expanded against the variables described in
:py:mod:`sous.renderer.context`. For example, the following template lists a
recipe's ingredients:

.. code:: jinja

    # {{ name }}
    {% for ingredient in ingredients %}
    - {{ ingredient.name }}
    {% endfor %}

Unlike the :py:class:`~sous.renderer.markdown.MarkdownRenderer`, no serving
rescaling or section selection is performed: the
:py:class:`~sous.renderer.base.RenderOptions` are ignored and templates
receive the recipe exactly as written.

Referencing an undefined variable is an error. Amounts can be formatted the
way the Markdown renderer formats them using the ``format_number`` filter
(e.g. ``{{ ingredient.amount | format_number }}``).

.. autoclass:: TemplateRenderer
    :members:
"""

from typing import Union

import logging

from pathlib import Path

import jinja2

from sous.exceptions import RecipeFileError, TemplateError

from sous.number_formatting import format_number

from sous.recipe import Recipe

from sous.renderer.base import RenderOptions, Renderer

from sous.renderer.context import recipe_to_context


__all__ = ["TemplateRenderer"]


logger = logging.getLogger(__name__)


env = jinja2.Environment(
    autoescape=False,
    undefined=jinja2.StrictUndefined,
    trim_blocks=True,
    keep_trailing_newline=True,
)
env.filters["format_number"] = format_number


class TemplateRenderer(Renderer):
    """
    Renders recipes using a compiled Jinja2 template. Use
    :py:meth:`from_source` or :py:meth:`from_file` to construct one.
    """

    name: str
    """A name identifying the template in error messages."""

    def __init__(self, template: jinja2.Template, name: str) -> None:
        self._template = template
        self.name = name

    @classmethod
    def from_source(cls, source: str, name: str = "<template>") -> "TemplateRenderer":
        """
        Compile a template from its source text. Raises
        :py:exc:`~sous.exceptions.TemplateError` if the template is malformed.
        """
        try:
            template = env.from_string(source)
        except jinja2.TemplateSyntaxError as e:
            raise TemplateError(name, e.message or str(e), e.lineno) from e
        return cls(template, name)

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "TemplateRenderer":
        """
        Load and compile a template file. Raises
        :py:exc:`~sous.exceptions.RecipeFileError` if it cannot be read.
        """
        path = Path(path)
        logger.debug("Loading template from %s", path)
        try:
            source = path.read_text(encoding="utf-8")
        except OSError as e:
            raise RecipeFileError(str(path), e.strerror or str(e)) from e
        return cls.from_source(source, name=str(path))

    def render(self, recipe: Recipe, options: RenderOptions = RenderOptions()) -> str:
        try:
            return self._template.render(recipe_to_context(recipe))
        except jinja2.TemplateError as e:
            raise TemplateError(self.name, e.message or str(e)) from e
        except Exception as e:
            # Errors raised by Python code the template calls into, e.g.
            # dividing by zero or None * 2
            raise TemplateError(self.name, f"{type(e).__name__}: {e}") from e
