"""recipebox - a command-line recipe manager."""

from .errors import (
    NotFoundError,
    RecipeBoxError,
    ResetError,
    StepIndexError,
    StorageError,
    ValidationError,
)
from .models import Ingredient, Recipe, add_ingredient, add_step, create_recipe, remove_step
from .queries import DEFAULT_QUICK_TIME, quick_recipes
from .storage import RecipeStore

__version__ = "0.1.0"

__all__ = [
    # Model
    "Recipe",
    "Ingredient",
    "create_recipe",
    "add_ingredient",
    "add_step",
    "remove_step",

    # Store and queries
    "RecipeStore",
    "quick_recipes",
    "DEFAULT_QUICK_TIME",

    # Errors
    "RecipeBoxError",
    "ValidationError",
    "NotFoundError",
    "StepIndexError",
    "StorageError",
    "ResetError",
]
