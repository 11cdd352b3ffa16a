"""Read-only views derived from the stored collection."""

from typing import List

from .models import Recipe
from .storage.recipes import RecipeStore

DEFAULT_QUICK_TIME = 30


def quick_recipes(store: RecipeStore, max_time: int = DEFAULT_QUICK_TIME) -> List[Recipe]:
    """Recipes whose cooking time is at most ``max_time`` minutes, in store order."""
    return [recipe for recipe in store.list() if recipe.cooking_time <= max_time]
