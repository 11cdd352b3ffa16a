"""Default recipe collection, written by ``python -m recipebox.seed``."""

import sys
from typing import List

from .errors import RecipeBoxError
from .logger import get_logger
from .models import Recipe, add_ingredient, add_step, create_recipe
from .profile import Profile
from .storage.recipes import RecipeStore

logger = get_logger("seed")


def _recipe(name, cooking_time, servings, ingredients, steps) -> Recipe:
    recipe = create_recipe(name, cooking_time, servings)
    for ingredient in ingredients:
        add_ingredient(recipe, *ingredient)
    for step in steps:
        add_step(recipe, step)
    return recipe


def default_recipes() -> List[Recipe]:
    """Fresh copies of the default collection."""
    return [
        _recipe(
            "Classic Pancakes", 20, 4,
            [("Flour", 1.5, "cups"), ("Milk", 1.25, "cups"), ("Egg", 1, ""),
             ("Sugar", 1, "tbsp"), ("Baking powder", 3.5, "tsp"), ("Butter", 3, "tbsp")],
            ["Whisk the flour, sugar and baking powder together",
             "Melt the butter and beat it into the milk and egg",
             "Pour the wet ingredients into the dry and stir until just combined",
             "Cook ladlefuls on a hot griddle until bubbles form, then flip"],
        ),
        _recipe(
            "Spaghetti Bolognese", 45, 4,
            [("Spaghetti", 400, "g"), ("Minced beef", 500, "g"), ("Onion", 1, ""),
             ("Garlic", 2, "cloves"), ("Chopped tomatoes", 400, "g")],
            ["Brown the beef with the onion and garlic",
             "Add the tomatoes and simmer for 30 minutes",
             "Cook the spaghetti and serve with the sauce"],
        ),
        _recipe(
            "Greek Salad", 10, 2,
            [("Tomatoes", 3, ""), ("Cucumber", 1, ""), ("Feta", 200, "g"),
             ("Kalamata olives", 0.5, "cup"), ("Olive oil", 2, "tbsp")],
            ["Chop the tomatoes and cucumber",
             "Top with feta and olives",
             "Dress with olive oil"],
        ),
        _recipe(
            "Beef Stew", 120, 6,
            [("Stewing beef", 1, "kg"), ("Carrots", 4, ""), ("Potatoes", 4, ""),
             ("Beef stock", 1, "l")],
            ["Brown the beef in batches",
             "Add the vegetables and stock",
             "Simmer covered for two hours"],
        ),
    ]


def seed_store(store: RecipeStore) -> List[Recipe]:
    """Replace the store's contents with the default collection."""
    recipes = store.replace_all(default_recipes())
    logger.info(f"Seeded {len(recipes)} default recipes")
    return recipes


def main() -> int:
    try:
        recipes = seed_store(RecipeStore.for_profile(Profile.current()))
    except (RecipeBoxError, OSError) as e:
        logger.error(f"Seeding failed: {e}")
        print(f"Failed to seed recipes: {e}", file=sys.stderr)
        return 1
    print(f"Wrote {len(recipes)} default recipes")
    return 0


if __name__ == "__main__":
    sys.exit(main())
