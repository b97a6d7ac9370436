"""
A cookbook is a directory of YAML recipe files.

Only files directly within the directory with a ``.yml`` or ``.yaml``
extension are considered to be recipes. Recipes are identified by their
filename.

.. autoclass:: Cookbook
    :members:
"""

from typing import List, Union

import logging

from pathlib import Path

from sous.exceptions import NotACookbookError, RecipeFileError

from sous.recipe import Recipe, load


__all__ = ["RECIPE_EXTENSIONS", "Cookbook"]


logger = logging.getLogger(__name__)


RECIPE_EXTENSIONS = (".yml", ".yaml")


class Cookbook:
    """A directory of recipes. Use :py:meth:`open` to construct."""

    path: Path

    recipes: List[str]
    """The filenames of the recipes in this cookbook, in sorted order."""

    def __init__(self, path: Path, recipes: List[str]) -> None:
        self.path = path
        self.recipes = recipes

    @classmethod
    def open(cls, path: Union[str, Path]) -> "Cookbook":
        """
        Enumerate the recipes in a directory. Raises
        :py:exc:`~sous.exceptions.NotACookbookError` if the path is not a
        directory.
        """
        path = Path(path)
        if not path.is_dir():
            raise NotACookbookError(str(path), "not a directory")

        try:
            recipes = sorted(
                entry.name
                for entry in path.iterdir()
                if entry.suffix.lower() in RECIPE_EXTENSIONS and entry.is_file()
            )
        except OSError as e:
            raise RecipeFileError(str(path), e.strerror or str(e)) from e

        logger.debug("Found %d recipe(s) in %s", len(recipes), path)

        return cls(path, recipes)

    def load_recipe(self, name: str) -> Recipe:
        """Load the named recipe (see :py:func:`sous.recipe.load`)."""
        return load(self.path / name)
