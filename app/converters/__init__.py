"""
Converters - mapping between ORM entities and command objects.

Converters are stateless and side-effect free apart from allocating the
returned object. Each one returns None when given None.
"""

from app.converters.lookups import CategoryConverter, UnitOfMeasureConverter
from app.converters.recipe import IngredientConverter, NotesConverter, RecipeConverter

__all__ = [
    "CategoryConverter",
    "UnitOfMeasureConverter",
    "IngredientConverter",
    "NotesConverter",
    "RecipeConverter",
]
