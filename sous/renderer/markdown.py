"""
The built-in Markdown renderer.

A recipe rendered with the default :py:class:`~sous.renderer.base.RenderOptions`
looks like this:

.. code:: markdown

    # Pancakes

    **Cook Cookerson | https://example.com/pancakes**

    **4 servings | 5 minutes prep | 15 minutes cook time**

    ## Ingredients
    * 100 g plain flour
    * 2 eggs
    * salt

    ## Method
    1. Whisk everything together.
    2. Fry in a hot pan.

With ``use_front_matter`` the heading and author lines are replaced by a YAML
front matter block::

    ---
    title: Pancakes
    author: Cook Cookerson
    ---

When a serving count override is given, every ingredient amount is multiplied
by the ratio of the requested serving count to the recipe's own. Units are
left untouched. See :py:mod:`sous.number_formatting` for how the resulting
amounts are displayed.

.. autoclass:: MarkdownRenderer
    :members:
"""

from typing import List

from fractions import Fraction

import yaml

from sous.recipe import Metadata, Recipe

from sous.renderer.base import RenderOptions, Renderer


__all__ = ["MarkdownRenderer"]


FRONT_MATTER_DELIMITER = "---"


def render_front_matter(metadata: Metadata) -> List[str]:
    front_matter = yaml.safe_dump(
        {"title": metadata.name, "author": metadata.author},
        sort_keys=False,
        allow_unicode=True,
        default_flow_style=False,
        width=2 ** 16,
    )
    return [FRONT_MATTER_DELIMITER, *front_matter.splitlines(), FRONT_MATTER_DELIMITER]


def render_heading(metadata: Metadata) -> List[str]:
    byline = metadata.author
    if metadata.url is not None:
        byline += f" | {metadata.url}"
    return [f"# {metadata.name}", "", f"**{byline}**"]


def render_summary(metadata: Metadata, servings: int) -> str:
    summary = f"{servings} servings"
    if metadata.prep_minutes is not None:
        summary += f" | {metadata.prep_minutes} minutes prep"
    summary += f" | {metadata.cook_minutes} minutes cook time"
    return f"**{summary}**"


class MarkdownRenderer(Renderer):
    """
    Renders recipes into a fixed Markdown layout. Rendering never fails.
    """

    def render(self, recipe: Recipe, options: RenderOptions = RenderOptions()) -> str:
        metadata = recipe.metadata

        servings = options.servings_override
        if servings is None:
            servings = metadata.servings

        lines: List[str] = []

        if options.emit_metadata:
            if options.use_front_matter:
                lines.extend(render_front_matter(metadata))
            else:
                lines.extend(render_heading(metadata))
            lines.append("")
            lines.append(render_summary(metadata, servings))
            lines.append("")

        if options.emit_ingredients:
            # Exact so that integer amounts stay integers (or simple fractions)
            multiplier = Fraction(servings, metadata.servings)
            lines.append("## Ingredients")
            lines.extend(
                f"* {ingredient.scale(multiplier)}"
                for ingredient in recipe.ingredients
            )
            lines.append("")

        if options.emit_steps:
            lines.append("## Method")
            lines.extend(
                f"{number}. {step}" for number, step in enumerate(recipe.steps, 1)
            )

        # Trailing blank line
        lines.append("")

        return "\n".join(lines) + "\n"
