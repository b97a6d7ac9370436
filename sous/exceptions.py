"""
Exceptions thrown while loading and rendering recipes.

.. autoexception:: SousError

.. autoexception:: ParseError

.. autoexception:: RecipeFileError

.. autoexception:: NotACookbookError

.. autoexception:: TemplateError
"""

from typing import Optional

from dataclasses import dataclass


__all__ = [
    "SousError",
    "ParseError",
    "RecipeFileError",
    "NotACookbookError",
    "TemplateError",
]


class SousError(Exception):
    """Base class for exceptions thrown by sous."""


@dataclass
class ParseError(SousError):
    """
    Thrown when a recipe document is not well formed YAML or is missing (or
    has a malformed) required field.
    """

    reason: str

    source: Optional[str] = None
    """The filename the document was read from, if known."""

    def __str__(self) -> str:
        if self.source is None:
            return self.reason
        return f"{self.source}: {self.reason}"


@dataclass
class RecipeFileError(SousError):
    """
    Thrown when a recipe, template or cookbook cannot be read from disk. The
    underlying :py:exc:`OSError` is available as ``__cause__``.
    """

    path: str
    reason: str

    def __str__(self) -> str:
        return f"{self.path}: {self.reason}"


class NotACookbookError(RecipeFileError):
    """Thrown when a cookbook path is not a directory."""


@dataclass
class TemplateError(SousError):
    """
    Thrown when a user supplied template fails to compile or fails during
    expansion.
    """

    name: str
    """The template's filename (or a placeholder for templates given as text)."""

    reason: str

    line: Optional[int] = None

    def __str__(self) -> str:
        if self.line is None:
            return f"{self.name}: {self.reason}"
        return f"{self.name}, line {self.line}: {self.reason}"
