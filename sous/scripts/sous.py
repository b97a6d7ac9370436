"""
The ``sous`` command converts YAML recipes into Markdown.

.. highlight:: bash

Basic usage
===========

.. code:: text

    $ sous RECIPE [--output OUTPUT_FILENAME]
    $ sous COOKBOOK_DIRECTORY [--output OUTPUT_DIRECTORY]

When given a single recipe file, the rendered recipe is printed to stdout
unless an output filename is given.

When given a directory, every ``.yml``/``.yaml`` recipe within it is rendered
into a ``.md`` file of the same name in the output directory (``render`` by
default, created if necessary).

Scaling recipes
===============

The ``--servings`` or ``-s`` argument rescales all ingredient amounts to make
the requested number of servings.

Front matter
============

The ``--front-matter`` or ``-f`` argument puts the recipe title and author in
a YAML front matter block instead of a Markdown heading. This is useful for
static site generators.

Templates
=========

With ``--mode template`` recipes are rendered using a Jinja2 template given
with ``--template`` (or read from stdin if no template file is given). The
``--servings``, ``--front-matter`` and ``--no-*`` arguments have no effect in
this mode.

Exit status
===========

1 if a recipe, cookbook or template could not be loaded, 2 if an output file
could not be written and 3 if a recipe failed to render.
"""

import sys

from typing import NoReturn, Optional

import logging

from argparse import ArgumentParser, ArgumentTypeError, Namespace

from pathlib import Path

from sous import __version__

from sous.cookbook import Cookbook

from sous.exceptions import SousError

from sous.recipe import load

from sous.renderer import MarkdownRenderer, Renderer, RenderOptions, TemplateRenderer


logger = logging.getLogger(__name__)


EXIT_LOAD_FAILED = 1
EXIT_WRITE_FAILED = 2
EXIT_RENDER_FAILED = 3


def positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise ArgumentTypeError(f"{value!r} is not an integer")
    if number < 1:
        raise ArgumentTypeError(f"{value!r} is not a positive integer")
    return number


def fail(message: str, status: int) -> NoReturn:
    sys.stderr.write(f"{message}\n")
    sys.exit(status)


def create_renderer(args: Namespace) -> Renderer:
    if args.mode == "markdown":
        return MarkdownRenderer()
    elif args.template is not None:
        return TemplateRenderer.from_file(args.template)
    else:
        return TemplateRenderer.from_source(sys.stdin.read(), name="<stdin>")


def render_cookbook(
    renderer: Renderer, options: RenderOptions, path: Path, output: Path
) -> None:
    try:
        cookbook = Cookbook.open(path)
    except SousError as e:
        fail(f"failed to open cookbook: {e}", EXIT_LOAD_FAILED)

    try:
        output.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        fail(f"failed to create output directory: {e}", EXIT_WRITE_FAILED)

    for name in cookbook.recipes:
        try:
            recipe = cookbook.load_recipe(name)
        except SousError as e:
            fail(f"failed to load recipe {name}: {e}", EXIT_LOAD_FAILED)

        logger.debug("Rendering %s", name)
        try:
            rendered = renderer.render(recipe, options)
        except SousError as e:
            fail(f"failed to render recipe {name}: {e}", EXIT_RENDER_FAILED)

        try:
            (output / Path(name).with_suffix(".md")).write_text(
                rendered, encoding="utf-8"
            )
        except OSError as e:
            fail(f"failed to write file for recipe {name}: {e}", EXIT_WRITE_FAILED)


def render_file(
    renderer: Renderer,
    options: RenderOptions,
    path: Path,
    output: Optional[Path] = None,
) -> None:
    try:
        recipe = load(path)
    except SousError as e:
        fail(f"failed to load recipe: {e}", EXIT_LOAD_FAILED)

    try:
        rendered = renderer.render(recipe, options)
    except SousError as e:
        fail(f"failed to render recipe: {e}", EXIT_RENDER_FAILED)

    if output is None:
        sys.stdout.write(rendered)
    else:
        try:
            output.write_text(rendered, encoding="utf-8")
        except OSError as e:
            fail(f"failed to write file: {e}", EXIT_WRITE_FAILED)


def main() -> None:
    parser = ArgumentParser(
        description="""
            Convert YAML recipes to Markdown.
        """,
    )

    parser.add_argument(
        "input",
        type=Path,
        help="""
            A YAML recipe file, or a cookbook directory of YAML recipe files,
            to convert.
        """,
    )
    parser.add_argument(
        "--output",
        "-o",
        type=Path,
        default=None,
        help="""
            For a single recipe, the file to write to instead of stdout. For a
            cookbook, the directory to write into (default: 'render').
        """,
    )
    parser.add_argument(
        "--mode",
        "-m",
        choices=["markdown", "template"],
        default="markdown",
        help="""
            Use the built-in Markdown renderer (the default) or a Jinja2
            template.
        """,
    )
    parser.add_argument(
        "--template",
        "-t",
        type=Path,
        default=None,
        help="""
            The template file to use in template mode. If not given, the
            template is read from stdin.
        """,
    )
    parser.add_argument(
        "--servings",
        "-s",
        type=positive_int,
        metavar="SERVINGS",
        default=None,
        help="""
            Rescale ingredient amounts to make this many servings (Markdown
            mode only).
        """,
    )
    parser.add_argument(
        "--front-matter",
        "-f",
        action="store_true",
        help="""
            Give the title and author as YAML front matter rather than a
            Markdown heading (Markdown mode only).
        """,
    )
    parser.add_argument(
        "--no-metadata",
        action="store_false",
        dest="emit_metadata",
        help="Omit the title, author and timings (Markdown mode only).",
    )
    parser.add_argument(
        "--no-ingredients",
        action="store_false",
        dest="emit_ingredients",
        help="Omit the ingredients list (Markdown mode only).",
    )
    parser.add_argument(
        "--no-steps",
        action="store_false",
        dest="emit_steps",
        help="Omit the method (Markdown mode only).",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log progress to stderr.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )

    try:
        renderer = create_renderer(args)
    except SousError as e:
        fail(f"failed to initialize renderer: {e}", EXIT_LOAD_FAILED)

    options = RenderOptions(
        emit_metadata=args.emit_metadata,
        emit_ingredients=args.emit_ingredients,
        emit_steps=args.emit_steps,
        use_front_matter=args.front_matter,
        servings_override=args.servings,
    )

    if args.input.is_dir():
        output = args.output if args.output is not None else Path("render")
        render_cookbook(renderer, options, args.input, output)
    else:
        render_file(renderer, options, args.input, args.output)


if __name__ == "__main__":
    main()
