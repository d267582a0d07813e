"""
Application exceptions.

Services raise these; controllers never construct HTTP errors themselves.
The exception handlers registered in app.main turn them into error pages.
"""


class RecipeError(Exception):
    """Base class for all application errors."""


class NotFoundException(RecipeError):
    """A requested row does not exist."""

    def __init__(self, message: str, entity_id=None):
        super().__init__(message)
        self.entity_id = entity_id


class IngredientNotFoundException(NotFoundException):
    """The recipe exists but has no ingredient with the requested id."""


class BootstrapException(RecipeError):
    """Seed data could not be loaded; the application must not start."""
