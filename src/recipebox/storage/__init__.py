"""Storage layer for recipebox."""

from .recipes import RECIPES_FILE, RecipeStore
from .vault import AppVault, Vault

__all__ = ["AppVault", "Vault", "RecipeStore", "RECIPES_FILE"]
