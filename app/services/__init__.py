"""
Services layer - business logic between the controllers and the repositories.

Services receive their session, repositories and converters through the
constructor. Every operation that writes runs as one transaction.
"""

from app.services.image_service import ImageService
from app.services.ingredient_service import IngredientService
from app.services.lookup_service import CategoryService, UnitOfMeasureService
from app.services.recipe_service import RecipeService

__all__ = [
    "RecipeService",
    "IngredientService",
    "ImageService",
    "UnitOfMeasureService",
    "CategoryService",
]
