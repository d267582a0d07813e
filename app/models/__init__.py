"""
Models Package - Database Entities and Commands

This package contains the SQLAlchemy ORM models and the Pydantic command
objects used at the presentation boundary.
"""

from app.models.entities import (
    Category,
    Difficulty,
    Ingredient,
    Notes,
    Recipe,
    UnitOfMeasure,
    recipe_category,
)
from app.models.schemas import (
    CategoryCommand,
    IngredientCommand,
    NotesCommand,
    RecipeCommand,
    RecipeForm,
    UnitOfMeasureCommand,
)

__all__ = [
    # ORM entities
    "Recipe",
    "Ingredient",
    "UnitOfMeasure",
    "Category",
    "Notes",
    "Difficulty",
    "recipe_category",
    # Commands
    "RecipeCommand",
    "IngredientCommand",
    "UnitOfMeasureCommand",
    "CategoryCommand",
    "NotesCommand",
    "RecipeForm",
]
