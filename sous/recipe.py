"""
The :py:mod:`sous.recipe` module defines the recipe data model and its
parser.

Data structures
===============

A recipe is a :py:class:`Recipe` made up of a :py:class:`Metadata` block, an
ordered series of steps (plain strings) and an ordered series of
:py:class:`Ingredient` objects. All of these are immutable.

Optional fields are represented by ``None`` rather than a default value so
that, for example, an ingredient with no amount ('salt, to taste') is never
confused with one whose amount is zero.

.. autoclass:: Recipe
    :members:

.. autoclass:: Metadata
    :members:

.. autoclass:: Ingredient
    :members:

.. autoexception:: RecipeInvariantError

Parsing
=======

Recipes are written as YAML documents like so:

.. code:: yaml

    name: Pancakes
    author: Cook Cookerson
    servings: 4
    url: https://example.com/pancakes
    prep_minutes: 5
    cook_minutes: 15
    ingredients:
      - name: plain flour
        amount: 100
        unit: g
      - name: eggs
        amount: 2
      - name: salt
    steps:
      - Whisk everything together.
      - Fry in a hot pan.

.. autofunction:: parse

.. autofunction:: load
"""

from typing import Any, Dict, Optional, Tuple, Type, Union

import logging

import math

from dataclasses import dataclass, replace

from pathlib import Path

import yaml

from sous.exceptions import ParseError, RecipeFileError

from sous.number_formatting import Number, format_number


__all__ = [
    "RecipeInvariantError",
    "Ingredient",
    "Metadata",
    "Recipe",
    "parse",
    "load",
]


logger = logging.getLogger(__name__)


class RecipeInvariantError(ValueError):
    """
    Thrown when a recipe data structure is constructed with values which
    violate its invariants (e.g. a non-positive serving count).
    """


@dataclass(frozen=True)
class Ingredient:
    """An ingredient used in a recipe."""

    name: str
    """The ingredient's display name."""

    amount: Optional[Number] = None
    """
    The (non-negative) quantity to use, in :py:attr:`unit` units if given.
    None if no quantity is specified.
    """

    unit: Optional[str] = None
    """Free-text unit description (e.g. 'cups'). Never converted."""

    def scale(self, multiplier: Number) -> "Ingredient":
        """Return a copy of this ingredient with its amount multiplied."""
        if self.amount is None:
            return self
        return replace(self, amount=self.amount * multiplier)

    def __str__(self) -> str:
        parts = []
        if self.amount is not None:
            parts.append(format_number(self.amount))
        if self.unit is not None:
            parts.append(self.unit)
        parts.append(self.name)
        return " ".join(parts)


@dataclass(frozen=True)
class Metadata:
    """Descriptive information about a recipe."""

    name: str
    author: str

    servings: int
    """
    The number of servings the recipe yields as written. Must be positive
    since ingredient amounts are scaled relative to this value.
    """

    cook_minutes: int

    url: Optional[str] = None
    """Where the recipe came from, if known."""

    prep_minutes: Optional[int] = None

    def __post_init__(self) -> None:
        if self.servings <= 0:
            raise RecipeInvariantError(
                f"servings must be positive (got {self.servings})"
            )

    def __str__(self) -> str:
        return f"{self.name} by {self.author}"


@dataclass(frozen=True)
class Recipe:
    """A recipe describing how to make a dish."""

    metadata: Metadata

    steps: Tuple[str, ...] = ()
    """The method, in order."""

    ingredients: Tuple[Ingredient, ...] = ()
    """The ingredients, in presentation order. Names need not be unique."""


def _get_field(
    mapping: Dict[str, Any],
    key: str,
    expected_type: Union[Type[Any], Tuple[Type[Any], ...]],
    description: str,
    source: Optional[str],
    required: bool = False,
) -> Any:
    """
    Fetch a field from a parsed YAML mapping, checking its type. Absent and
    null values are returned as None unless the field is required.
    """
    value = mapping.get(key)
    if value is None:
        if required:
            raise ParseError(f"missing required field '{key}'", source)
        return None

    # NB: bool is a subclass of int but 'servings: yes' is not a number
    if isinstance(value, bool) or not isinstance(value, expected_type):
        raise ParseError(f"'{key}' must be {description} (got {value!r})", source)

    return value


def _parse_ingredient(
    document: Any, index: int, source: Optional[str]
) -> Ingredient:
    if not isinstance(document, dict):
        raise ParseError(f"ingredient {index + 1} must be a mapping", source)

    name = _get_field(document, "name", str, "a string", source, required=True)
    amount = _get_field(document, "amount", (int, float), "a number", source)
    unit = _get_field(document, "unit", str, "a string", source)

    if amount is not None and not (math.isfinite(amount) and amount >= 0):
        raise ParseError(
            f"amount of ingredient '{name}' must be a non-negative number", source
        )

    return Ingredient(name, amount, unit)


def parse(text: str, source: Optional[str] = None) -> Recipe:
    """
    Parse a YAML recipe document.

    Parameters
    ==========
    text : str
        The YAML source.
    source : str or None
        The filename the source was read from, used in error messages.

    Raises :py:exc:`~sous.exceptions.ParseError` if the document is not well
    formed or any required field (``name``, ``author``, ``servings``,
    ``cook_minutes``) is missing or of the wrong type. Unknown fields are
    ignored.
    """
    try:
        document = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ParseError(f"malformed YAML: {e}", source) from e

    if not isinstance(document, dict):
        raise ParseError("a recipe must be a YAML mapping", source)

    name = _get_field(document, "name", str, "a string", source, required=True)
    author = _get_field(document, "author", str, "a string", source, required=True)
    servings = _get_field(
        document, "servings", int, "an integer", source, required=True
    )
    cook_minutes = _get_field(
        document, "cook_minutes", int, "an integer", source, required=True
    )
    prep_minutes = _get_field(document, "prep_minutes", int, "an integer", source)
    url = _get_field(document, "url", str, "a string", source)

    if servings <= 0:
        raise ParseError(f"'servings' must be positive (got {servings})", source)
    for key, minutes in [
        ("cook_minutes", cook_minutes),
        ("prep_minutes", prep_minutes),
    ]:
        if minutes is not None and minutes < 0:
            raise ParseError(f"'{key}' must not be negative", source)

    steps = _get_field(document, "steps", list, "a list", source) or []
    for number, step in enumerate(steps, 1):
        if not isinstance(step, str):
            raise ParseError(f"step {number} must be a string (got {step!r})", source)

    ingredients = _get_field(document, "ingredients", list, "a list", source) or []

    return Recipe(
        metadata=Metadata(
            name=name,
            author=author,
            servings=servings,
            cook_minutes=cook_minutes,
            url=url,
            prep_minutes=prep_minutes,
        ),
        steps=tuple(steps),
        ingredients=tuple(
            _parse_ingredient(ingredient, i, source)
            for i, ingredient in enumerate(ingredients)
        ),
    )


def load(path: Union[str, Path]) -> Recipe:
    """
    Read and :py:func:`parse` a YAML recipe file.

    Raises :py:exc:`~sous.exceptions.RecipeFileError` if the file cannot be
    read and :py:exc:`~sous.exceptions.ParseError` if its contents are
    invalid.
    """
    path = Path(path)
    logger.debug("Loading recipe from %s", path)

    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise RecipeFileError(str(path), e.strerror or str(e)) from e
    except UnicodeDecodeError as e:
        raise ParseError(f"not a UTF-8 text file ({e.reason})", str(path)) from e

    return parse(text, source=str(path))
