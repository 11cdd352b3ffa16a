"""Recipe collection storage on top of the app vault."""

from typing import Any, Dict, Iterable, List, Optional, Tuple

from pydantic import ValidationError as PydanticValidationError

from ..config import APP_NAME
from ..errors import NotFoundError, StorageError
from ..logger import get_logger
from ..models import Recipe, validate_recipe
from ..profile import Profile
from .vault import AppVault, Vault

logger = get_logger("store")

RECIPES_FILE = "recipes.yml"


class RecipeStore:
    """Owns the persisted recipe collection.

    The collection lives in a single YAML document::

        next_id: 4
        recipes:
          - id: 1
            name: ...

    ``next_id`` only ever grows, so ids of deleted recipes are not handed
    out again. Every method reads the document afresh and every mutation
    rewrites it atomically. Recipes returned to callers are copies; edits
    must be saved with :meth:`update`.
    """

    def __init__(self, vault: Optional[AppVault] = None, path: str = RECIPES_FILE):
        self.vault = vault or Vault.for_app(APP_NAME)
        self.path = path
        logger.debug(f"Recipe store at {self.vault.app_root / self.path}")

    @classmethod
    def for_profile(cls, profile: Profile) -> "RecipeStore":
        """Build a store inside ``profile``'s vault."""
        return cls(Vault.for_app(APP_NAME, profile))

    def _load(self) -> Tuple[int, List[Recipe]]:
        """Read the document and return ``(next_id, recipes)``."""
        if not self.vault.exists(self.path):
            return 1, []

        try:
            document = self.vault.read(self.path)
        except ValueError as e:
            raise StorageError(str(e)) from e

        if document is None:
            return 1, []
        if isinstance(document, list):
            # Bare list of recipes, e.g. a hand-written data file
            document = {"recipes": document}
        if not isinstance(document, dict):
            raise StorageError(f"Malformed recipe file {self.path}: expected a mapping")

        try:
            recipes = [Recipe.model_validate(item) for item in document.get("recipes") or []]
        except PydanticValidationError as e:
            raise StorageError(f"Malformed recipe in {self.path}: {e}") from e

        ids = [r.id for r in recipes]
        if None in ids or len(set(ids)) != len(ids):
            raise StorageError(f"Malformed recipe file {self.path}: missing or duplicate ids")

        stored_next_id = document.get("next_id") or 1
        if not isinstance(stored_next_id, int):
            raise StorageError(f"Malformed recipe file {self.path}: next_id must be an integer")

        next_id = max([stored_next_id] + [i + 1 for i in ids])
        return next_id, recipes

    def _save(self, next_id: int, recipes: Iterable[Recipe]) -> None:
        """Validate every record, then rewrite the document.

        Raises:
            ValidationError: if a recipe was edited into an invalid state;
                the stored document is left as it was.
        """
        document: Dict[str, Any] = {
            "next_id": next_id,
            "recipes": [validate_recipe(r).model_dump() for r in recipes],
        }
        self.vault.write(self.path, document)

    def list(self) -> List[Recipe]:
        """Return all recipes in stored order."""
        _, recipes = self._load()
        return recipes

    def get_by_id(self, recipe_id: int) -> Optional[Recipe]:
        """Return the recipe with ``recipe_id``, or None if there is none."""
        for recipe in self.list():
            if recipe.id == recipe_id:
                return recipe
        logger.debug(f"Recipe {recipe_id} not found")
        return None

    def create(self, recipe: Recipe) -> Recipe:
        """Assign a fresh id to ``recipe`` and append it to the collection.

        Returns:
            A copy of the recipe with ``id`` populated.
        """
        next_id, recipes = self._load()
        created = recipe.model_copy(update={"id": next_id}, deep=True)
        recipes.append(created)
        self._save(next_id + 1, recipes)

        logger.info(f"Created recipe {created.id}: {created.name}")
        return created.model_copy(deep=True)

    def update(self, recipe: Recipe) -> None:
        """Overwrite the stored record that has ``recipe.id``.

        Raises:
            NotFoundError: if no stored recipe has that id.
            ValidationError: if the recipe fails validation.
        """
        next_id, recipes = self._load()
        for position, stored in enumerate(recipes):
            if recipe.id is not None and stored.id == recipe.id:
                recipes[position] = recipe.model_copy(deep=True)
                break
        else:
            raise NotFoundError(recipe.id)

        self._save(next_id, recipes)
        logger.info(f"Updated recipe {recipe.id}: {recipe.name}")

    def delete(self, recipe_id: int) -> bool:
        """Remove the recipe with ``recipe_id``. Returns whether one was removed."""
        next_id, recipes = self._load()
        remaining = [r for r in recipes if r.id != recipe_id]
        if len(remaining) == len(recipes):
            return False

        self._save(next_id, remaining)
        logger.info(f"Deleted recipe {recipe_id}")
        return True

    def replace_all(self, recipes: Iterable[Recipe]) -> List[Recipe]:
        """Replace the whole collection, numbering recipes from 1."""
        renumbered = [
            recipe.model_copy(update={"id": position}, deep=True)
            for position, recipe in enumerate(recipes, start=1)
        ]
        self._save(len(renumbered) + 1, renumbered)
        logger.info(f"Replaced collection with {len(renumbered)} recipe(s)")
        return [r.model_copy(deep=True) for r in renumbered]
