"""Error kinds raised by the recipe model, store and reset procedure."""


class RecipeBoxError(Exception):
    """Base class for all recipebox errors."""


class ValidationError(RecipeBoxError, ValueError):
    """A user-supplied field is malformed (empty name, bad quantity...)."""


class NotFoundError(RecipeBoxError, LookupError):
    """A referenced recipe id does not exist in the store."""

    def __init__(self, recipe_id):
        self.recipe_id = recipe_id
        super().__init__(f"Recipe with ID {recipe_id} not found")


class StepIndexError(RecipeBoxError, IndexError):
    """A step index is outside the recipe's step list."""

    def __init__(self, index: int, step_count: int):
        self.index = index
        self.step_count = step_count
        super().__init__(f"Step index {index} out of range for {step_count} step(s)")


class StorageError(RecipeBoxError):
    """The persisted collection could not be read or written."""


class ResetError(RecipeBoxError):
    """The external data reset procedure failed."""
