"""
The values made available to user templates by the
:py:class:`~sous.renderer.template.TemplateRenderer`.

Templates see a flat mapping with the following variables. This is the only
interface between recipes and templates: any change to the names or types
below must bump :py:data:`CONTEXT_VERSION`.

``name``, ``author`` (str)
    Recipe title and author.
``servings``, ``cook_minutes`` (int)
    Servings as written and cooking time.
``url`` (str or None), ``prep_minutes`` (int or None)
    Optional metadata.
``steps`` (list of str)
    The method, in order.
``ingredients`` (list of mappings)
    Each with ``name`` (str), ``amount`` (number or None) and ``unit`` (str
    or None), in order.

``context_version`` (int) is also provided so that templates can check
what they're being given.
"""

from typing import Any, Dict

from sous.recipe import Ingredient, Recipe


__all__ = ["CONTEXT_VERSION", "ingredient_to_context", "recipe_to_context"]


CONTEXT_VERSION = 1


def ingredient_to_context(ingredient: Ingredient) -> Dict[str, Any]:
    return {
        "name": ingredient.name,
        "amount": ingredient.amount,
        "unit": ingredient.unit,
    }


def recipe_to_context(recipe: Recipe) -> Dict[str, Any]:
    """Build the template variables for a recipe (see module docs)."""
    metadata = recipe.metadata
    return {
        "context_version": CONTEXT_VERSION,
        "name": metadata.name,
        "author": metadata.author,
        "servings": metadata.servings,
        "url": metadata.url,
        "prep_minutes": metadata.prep_minutes,
        "cook_minutes": metadata.cook_minutes,
        "steps": list(recipe.steps),
        "ingredients": [ingredient_to_context(i) for i in recipe.ingredients],
    }
