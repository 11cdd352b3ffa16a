import pytest

from recipebox.errors import StepIndexError, ValidationError
from recipebox.models import (
    Recipe,
    add_ingredient,
    add_step,
    create_recipe,
    remove_step,
    validate_recipe,
)


@pytest.mark.parametrize(
    "name,cooking_time,servings",
    [
        ("Tea", 5, 1),
        ("Overnight oats", 0, 2),
        ("Roast", 180, 8),
    ],
)
def test_create_recipe_keeps_fields_and_starts_empty(name, cooking_time, servings):
    recipe = create_recipe(name, cooking_time, servings)

    assert recipe.id is None
    assert recipe.name == name
    assert recipe.cooking_time == cooking_time
    assert recipe.servings == servings
    assert recipe.ingredients == []
    assert recipe.steps == []


@pytest.mark.parametrize(
    "name,cooking_time,servings",
    [
        ("", 5, 1),
        ("   ", 5, 1),
        ("Tea", -1, 1),
        ("Tea", 5, 0),
        ("Tea", 5, -2),
        ("Tea", "soon", 1),
        ("Tea", 5, "many"),
        ("Tea", 2.5, 1),
        ("Tea", "5", 1),
        ("Tea", 5, "2"),
        ("Tea", 5, True),
        ("Tea", False, 1),
    ],
)
def test_create_recipe_rejects_bad_fields(name, cooking_time, servings):
    with pytest.raises(ValidationError):
        create_recipe(name, cooking_time, servings)


def test_validation_error_is_a_value_error():
    with pytest.raises(ValueError):
        create_recipe("", 5, 1)


def test_add_ingredient_appends_in_order_and_allows_duplicates():
    recipe = create_recipe("Tea", 5, 1)
    add_ingredient(recipe, "Water", 1, "cup")
    add_ingredient(recipe, "Sugar", 2, "tsp")
    add_ingredient(recipe, "Water", 0.5, "cup")

    assert [(i.name, i.amount, i.unit) for i in recipe.ingredients] == [
        ("Water", 1, "cup"),
        ("Sugar", 2, "tsp"),
        ("Water", 0.5, "cup"),
    ]


def test_add_ingredient_keeps_int_and_float_amounts_and_unit_as_given():
    recipe = create_recipe("Tea", 5, 1)
    add_ingredient(recipe, "Water", 1, " cup ")
    add_ingredient(recipe, "Honey", 0.5, "tsp")

    water, honey = recipe.ingredients
    assert isinstance(water.amount, int) and water.amount == 1
    assert isinstance(honey.amount, float) and honey.amount == 0.5
    assert water.unit == " cup "


def test_add_ingredient_accepts_empty_unit():
    recipe = create_recipe("Omelette", 10, 1)
    add_ingredient(recipe, "Egg", 2, "")

    assert recipe.ingredients[0].unit == ""


@pytest.mark.parametrize(
    "name,amount",
    [
        ("", 1),
        ("  ", 1),
        ("Water", "a splash"),
        ("Water", None),
        ("Water", float("nan")),
        ("Water", float("inf")),
        ("Water", "1"),
        ("Water", True),
    ],
)
def test_add_ingredient_rejects_bad_input(name, amount):
    recipe = create_recipe("Tea", 5, 1)

    with pytest.raises(ValidationError):
        add_ingredient(recipe, name, amount, "cup")
    assert recipe.ingredients == []


def test_add_step_appends():
    recipe = create_recipe("Tea", 5, 1)
    add_step(recipe, "Boil water")
    add_step(recipe, "Steep")

    assert recipe.steps == ["Boil water", "Steep"]


@pytest.mark.parametrize("instruction", ["", "   ", None])
def test_add_step_rejects_empty_instruction(instruction):
    recipe = create_recipe("Tea", 5, 1)

    with pytest.raises(ValidationError):
        add_step(recipe, instruction)
    assert recipe.steps == []


def test_add_then_remove_step_restores_steps():
    recipe = create_recipe("Tea", 5, 1)
    add_step(recipe, "Boil water")
    add_step(recipe, "Steep")
    before = list(recipe.steps)

    add_step(recipe, "Add milk")
    remove_step(recipe, len(recipe.steps) - 1)

    assert recipe.steps == before


def test_remove_step_shifts_later_steps_down():
    recipe = create_recipe("Tea", 5, 1)
    for step in ["step0", "step1", "step2"]:
        add_step(recipe, step)

    remove_step(recipe, 1)

    assert recipe.steps == ["step0", "step2"]


@pytest.mark.parametrize("index", [-1, 3, 10])
def test_remove_step_out_of_range_raises_and_keeps_steps(index):
    recipe = create_recipe("Tea", 5, 1)
    for step in ["step0", "step1", "step2"]:
        add_step(recipe, step)

    with pytest.raises(IndexError):
        remove_step(recipe, index)
    assert recipe.steps == ["step0", "step1", "step2"]


def test_remove_step_on_empty_recipe_raises():
    recipe = create_recipe("Tea", 5, 1)

    with pytest.raises(StepIndexError):
        remove_step(recipe, 0)


def test_recipe_round_trips_through_dump():
    recipe = create_recipe("Tea", 5, 1)
    add_ingredient(recipe, "Water", 1, "cup")
    add_step(recipe, "Boil water")

    assert Recipe.model_validate(recipe.model_dump()) == recipe


def test_validate_recipe_catches_field_edits():
    recipe = create_recipe("Tea", 5, 1)
    recipe.servings = 0

    with pytest.raises(ValidationError):
        validate_recipe(recipe)
