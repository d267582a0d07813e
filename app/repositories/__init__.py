"""
Repositories - Data access layer for database operations.
"""

from app.repositories.lookup_repository import CategoryRepository, UnitOfMeasureRepository
from app.repositories.recipe_repository import RecipeRepository

__all__ = ["RecipeRepository", "UnitOfMeasureRepository", "CategoryRepository"]
