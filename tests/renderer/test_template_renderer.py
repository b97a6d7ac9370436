import pytest

from pathlib import Path

from textwrap import dedent

from sous.exceptions import RecipeFileError, TemplateError

from sous.recipe import Ingredient, Metadata, Recipe

from sous.renderer.base import RenderOptions

from sous.renderer.template import TemplateRenderer


@pytest.fixture
def recipe() -> Recipe:
    return Recipe(
        metadata=Metadata(name="Omelette", author="Anon", servings=2, cook_minutes=5),
        steps=("Beat the eggs.", "Cook."),
        ingredients=(
            Ingredient("eggs", 4),
            Ingredient("milk", 1.5, "tbsp"),
            Ingredient("salt"),
        ),
    )


INGREDIENT_LIST = dedent(
    """\
    # {{ name }} ({{ servings }})
    {% for ingredient in ingredients %}
    - {{ ingredient.name }}
    {% endfor %}
    """
)


class TestFromSource:
    def test_iterates_ingredients_in_order(self, recipe: Recipe) -> None:
        renderer = TemplateRenderer.from_source(INGREDIENT_LIST)
        assert renderer.render(recipe) == "# Omelette (2)\n- eggs\n- milk\n- salt\n"

    def test_syntax_error(self) -> None:
        with pytest.raises(TemplateError) as exc_info:
            TemplateRenderer.from_source("{% for x in %}", name="broken.md")
        assert exc_info.value.name == "broken.md"
        assert exc_info.value.line == 1
        assert str(exc_info.value).startswith("broken.md, line 1: ")

    def test_undefined_variable(self, recipe: Recipe) -> None:
        renderer = TemplateRenderer.from_source("{{ title }}", name="bad.md")
        with pytest.raises(TemplateError) as exc_info:
            renderer.render(recipe)
        assert exc_info.value.name == "bad.md"
        assert "title" in str(exc_info.value)

    def test_arithmetic_on_missing_amount(self, recipe: Recipe) -> None:
        renderer = TemplateRenderer.from_source(
            "{% for i in ingredients %}{{ i.amount * 2 }}{% endfor %}"
        )
        with pytest.raises(TemplateError):
            renderer.render(recipe)

    @pytest.mark.parametrize(
        "source",
        [
            "{{ servings / 0 }}",
            "{{ steps.index('missing') }}",
            "{{ steps[10] }}",
            "{{ ingredients[0].amount // 0 }}",
        ],
    )
    def test_python_errors_during_expansion(
        self, recipe: Recipe, source: str
    ) -> None:
        renderer = TemplateRenderer.from_source(source, name="bad.md")
        with pytest.raises(TemplateError) as exc_info:
            renderer.render(recipe)
        assert exc_info.value.name == "bad.md"


class TestRender:
    def test_options_are_ignored(self, recipe: Recipe) -> None:
        renderer = TemplateRenderer.from_source(
            "{{ servings }}{% for i in ingredients %} {{ i.amount }}{% endfor %}"
        )
        options = RenderOptions(
            emit_metadata=False,
            emit_ingredients=False,
            emit_steps=False,
            servings_override=4,
        )
        assert renderer.render(recipe, options) == "2 4 1.5 None"

    def test_optionals_are_none(self, recipe: Recipe) -> None:
        renderer = TemplateRenderer.from_source(
            "{{ url is none }} {{ prep_minutes is none }}"
        )
        assert renderer.render(recipe) == "True True"

    def test_format_number_filter(self, recipe: Recipe) -> None:
        renderer = TemplateRenderer.from_source(
            "{{ (ingredients[1].amount * 2) | format_number }}"
        )
        assert renderer.render(recipe) == "3"

    def test_no_escaping(self) -> None:
        recipe = Recipe(Metadata("Fish & <Chips>", "Anon", 1, 1))
        renderer = TemplateRenderer.from_source("{{ name }}")
        assert renderer.render(recipe) == "Fish & <Chips>"

    def test_steps(self, recipe: Recipe) -> None:
        renderer = TemplateRenderer.from_source(
            "{% for step in steps %}{{ loop.index }}) {{ step }}\n{% endfor %}"
        )
        assert renderer.render(recipe) == "1) Beat the eggs.\n2) Cook.\n"


class TestFromFile:
    def test_from_file(self, tmp_path: Path, recipe: Recipe) -> None:
        path = tmp_path / "template.md"
        path.write_text("{{ name }} by {{ author }}\n")
        renderer = TemplateRenderer.from_file(path)
        assert renderer.name == str(path)
        assert renderer.render(recipe) == "Omelette by Anon\n"

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(RecipeFileError):
            TemplateRenderer.from_file(tmp_path / "nope.md")

    def test_syntax_error_names_file(self, tmp_path: Path) -> None:
        path = tmp_path / "template.md"
        path.write_text("{{ name }\n")
        with pytest.raises(TemplateError) as exc_info:
            TemplateRenderer.from_file(path)
        assert exc_info.value.name == str(path)
