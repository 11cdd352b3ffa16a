"""Command dispatcher: one method per CLI verb.

The dispatcher is the only layer that turns errors into messages. Each
command returns a process exit code.
"""

from functools import wraps
from typing import Optional

from .display import RecipeDisplay
from .errors import RecipeBoxError, ResetError
from .logger import get_logger
from .models import Recipe, add_ingredient, add_step, create_recipe, remove_step
from .prompts import Prompter
from .queries import DEFAULT_QUICK_TIME, quick_recipes
from .reset import ResetProcedure
from .storage.recipes import RecipeStore

logger = get_logger("commands")


def reports_errors(method):
    """Convert recipebox errors raised by a command into an error message and exit code 1."""

    @wraps(method)
    def wrapper(self, *args, **kwargs):
        try:
            return method(self, *args, **kwargs)
        except RecipeBoxError as e:
            logger.warning(f"{method.__name__} failed: {e}")
            self.display.error(str(e))
            return 1

    return wrapper


class RecipeCommands:
    """Maps each command to model, store and query calls and reports the outcome."""

    def __init__(
        self,
        store: RecipeStore,
        prompter: Prompter,
        display: RecipeDisplay,
        reset: Optional[ResetProcedure] = None,
    ):
        self.store = store
        self.prompter = prompter
        self.display = display
        self.reset = reset or ResetProcedure()

    def _lookup(self, recipe_id: int) -> Optional[Recipe]:
        recipe = self.store.get_by_id(recipe_id)
        if recipe is None:
            self.display.warning(f"Recipe with ID {recipe_id} not found")
        return recipe

    @reports_errors
    def list_recipes(self) -> int:
        self.display.recipe_list(self.store.list())
        return 0

    @reports_errors
    def view(self, recipe_id: int) -> int:
        recipe = self._lookup(recipe_id)
        if recipe:
            self.display.recipe_details(recipe)
        return 0

    @reports_errors
    def format(self, recipe_id: int) -> int:
        recipe = self._lookup(recipe_id)
        if recipe:
            self.display.formatted_recipe(recipe)
        return 0

    @reports_errors
    def create(self) -> int:
        info = self.prompter.recipe_info()
        recipe = self.store.create(create_recipe(info.name, info.cooking_time, info.servings))
        self.display.success(f'Recipe "{recipe.name}" created successfully! (ID {recipe.id})')
        return 0

    @reports_errors
    def add_ingredient(self, recipe_id: int) -> int:
        recipe = self._lookup(recipe_id)
        if not recipe:
            return 0

        info = self.prompter.ingredient()
        add_ingredient(recipe, info.name, info.amount, info.unit)
        self.store.update(recipe)
        self.display.success(f'Added {info.name} to "{recipe.name}"')
        return 0

    @reports_errors
    def add_step(self, recipe_id: int) -> int:
        recipe = self._lookup(recipe_id)
        if not recipe:
            return 0

        add_step(recipe, self.prompter.step())
        self.store.update(recipe)
        self.display.success(f'Added step {len(recipe.steps)} to "{recipe.name}"')
        return 0

    @reports_errors
    def remove_step(self, recipe_id: int, step_number: Optional[int] = None) -> int:
        """Remove a step; ``step_number`` is 1-based and prompted for when omitted."""
        recipe = self._lookup(recipe_id)
        if not recipe:
            return 0

        step_count = len(recipe.steps)
        if step_count == 0:
            self.display.warning("This recipe has no steps to remove")
            return 0

        if step_number is None:
            self.display.info("Current steps:")
            self.display.steps(recipe)
            index = self.prompter.step_index(step_count)
        elif 1 <= step_number <= step_count:
            index = step_number - 1
        else:
            self.display.warning(f"Invalid step index. Please use a number between 1 and {step_count}")
            return 0

        remove_step(recipe, index)
        self.store.update(recipe)
        self.display.success(f'Removed step {index + 1} from "{recipe.name}"')
        return 0

    @reports_errors
    def delete(self, recipe_id: int) -> int:
        recipe = self._lookup(recipe_id)
        if not recipe:
            return 0

        if not self.prompter.confirm(f'Are you sure you want to delete "{recipe.name}"?'):
            self.display.info("Delete cancelled")
            return 0

        if self.store.delete(recipe_id):
            self.display.success(f'Recipe "{recipe.name}" deleted')
        else:
            self.display.warning(f"Recipe with ID {recipe_id} not found")
        return 0

    @reports_errors
    def quick(self, max_time: int = DEFAULT_QUICK_TIME) -> int:
        self.display.quick_recipes(quick_recipes(self.store, max_time), max_time)
        return 0

    def reset_data(self) -> int:
        if not self.prompter.confirm(
            "Are you sure you want to reset all recipe data to defaults? This cannot be undone."
        ):
            self.display.info("Reset cancelled")
            return 0

        try:
            self.reset.run()
        except ResetError as e:
            self.display.error(f"Failed to reset data: {e}")
            return 1

        self.display.success("Recipe data has been reset to defaults")
        return 0
