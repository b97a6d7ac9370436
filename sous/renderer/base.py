"""
The interface shared by all renderers, and the options they accept.

.. autoclass:: RenderOptions
    :members:

.. autoclass:: Renderer
    :members:
"""

from typing import Optional

from dataclasses import dataclass

from sous.recipe import Recipe


__all__ = ["RenderOptions", "Renderer"]


@dataclass(frozen=True)
class RenderOptions:
    """
    Options controlling what a renderer produces. Only the
    :py:class:`~sous.renderer.markdown.MarkdownRenderer` honours these:
    templates have full control over their own output.
    """

    emit_metadata: bool = True
    """Include the title, author and timing summary."""

    emit_ingredients: bool = True
    """Include the ingredients list."""

    emit_steps: bool = True
    """Include the numbered method."""

    use_front_matter: bool = False
    """
    Give the title and author in a YAML front matter block (as used by
    static site generators) rather than as a Markdown heading.
    """

    servings_override: Optional[int] = None
    """
    If given, rescale ingredient amounts to make this many servings rather
    than the number the recipe is written for.
    """

    def __post_init__(self) -> None:
        if self.servings_override is not None and self.servings_override <= 0:
            raise ValueError(
                f"servings_override must be positive (got {self.servings_override})"
            )


class Renderer:
    """Base class for recipe renderers."""

    def render(self, recipe: Recipe, options: RenderOptions = RenderOptions()) -> str:
        """
        Render the recipe. May raise :py:exc:`~sous.exceptions.TemplateError`
        for template based renderers.
        """
        raise NotImplementedError()
