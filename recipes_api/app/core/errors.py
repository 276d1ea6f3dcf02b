"""Exception types raised by the recipe store and seed loader."""


class RecipesAPIError(Exception):
    """Base class for all errors raised by the service."""


class RecipeNotFoundError(RecipesAPIError):
    """No recipe with the requested id exists in the store."""

    message = "Recipe not found"

    def __init__(self, recipe_id: str) -> None:
        super().__init__(f"{self.message}: {recipe_id}")
        self.recipe_id = recipe_id


class SeedFileError(RecipesAPIError):
    """The seed file could not be read or parsed.

    Raised while building the application; the process must not start
    serving when this happens.
    """

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"cannot load recipes from {path}: {reason}")
        self.path = path
        self.reason = reason
