"""Pydantic models for recipes and the primitives that build and edit them.

Everything here is pure: functions mutate the recipe they are given and
never touch the store. Callers persist through ``RecipeStore.update``.
"""

import math
from typing import List, Optional, Union

from pydantic import BaseModel, Field, StrictFloat, StrictInt, field_validator
from pydantic import ValidationError as PydanticValidationError

from .errors import StepIndexError, ValidationError


class Ingredient(BaseModel):
    """A single ingredient line."""

    name: str = Field(..., description="Ingredient name")
    amount: Union[StrictInt, StrictFloat] = Field(..., description="Quantity in `unit`")
    unit: str = Field("", description="Unit of measure, may be empty")

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("ingredient name must not be empty")
        return value

    @field_validator("amount")
    @classmethod
    def _amount_finite(cls, value: Union[int, float]) -> Union[int, float]:
        if not math.isfinite(value):
            raise ValueError("amount must be a finite number")
        return value


class Recipe(BaseModel):
    """A recipe record. ``id`` stays None until the store creates it."""

    id: Optional[int] = Field(None, description="Store-assigned identifier")
    name: str = Field(..., description="Recipe name")
    cooking_time: int = Field(..., ge=0, strict=True, description="Cooking time in minutes")
    servings: int = Field(..., gt=0, strict=True, description="Number of servings")
    ingredients: List[Ingredient] = Field(default_factory=list)
    steps: List[str] = Field(default_factory=list)

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("recipe name must not be empty")
        return value


def _first_error(exc: PydanticValidationError) -> str:
    error = exc.errors()[0]
    field = ".".join(str(part) for part in error["loc"]) or "value"
    return f"{field}: {error['msg']}"


def create_recipe(name: str, cooking_time: int, servings: int) -> Recipe:
    """Build a new, unsaved recipe with no ingredients or steps.

    Raises:
        ValidationError: if the name is empty, the cooking time is negative
            or the servings are not strictly positive.
    """
    try:
        return Recipe(name=name, cooking_time=cooking_time, servings=servings)
    except PydanticValidationError as e:
        raise ValidationError(f"Invalid recipe: {_first_error(e)}") from e


def validate_recipe(recipe: Recipe) -> Recipe:
    """Re-check a recipe that may have been edited field by field.

    Returns a validated copy; raises ValidationError if any field is invalid.
    """
    try:
        return Recipe.model_validate(recipe.model_dump())
    except PydanticValidationError as e:
        raise ValidationError(f"Invalid recipe: {_first_error(e)}") from e


def add_ingredient(recipe: Recipe, name: str, amount: float, unit: str = "") -> None:
    """Append an ingredient to ``recipe`` in place."""
    try:
        ingredient = Ingredient(name=name, amount=amount, unit=unit)
    except PydanticValidationError as e:
        raise ValidationError(f"Invalid ingredient: {_first_error(e)}") from e
    recipe.ingredients.append(ingredient)


def add_step(recipe: Recipe, instruction: str) -> None:
    """Append a step to ``recipe`` in place."""
    if not isinstance(instruction, str) or not instruction.strip():
        raise ValidationError("Step instruction must not be empty")
    recipe.steps.append(instruction)


def remove_step(recipe: Recipe, index: int) -> None:
    """Remove the step at zero-based ``index``.

    Negative indices are rejected rather than counted from the end.
    """
    if not 0 <= index < len(recipe.steps):
        raise StepIndexError(index, len(recipe.steps))
    del recipe.steps[index]
