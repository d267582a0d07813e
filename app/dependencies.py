"""
FastAPI dependencies that assemble the service layer.

Every request gets its own session; converters, repositories and services
are built around it here and passed into the controllers with Depends().
"""

from fastapi import Depends
from sqlalchemy.orm import Session

from app.converters import (
    CategoryConverter,
    IngredientConverter,
    NotesConverter,
    RecipeConverter,
    UnitOfMeasureConverter,
)
from app.database import get_db
from app.repositories import CategoryRepository, RecipeRepository, UnitOfMeasureRepository
from app.services import (
    CategoryService,
    ImageService,
    IngredientService,
    RecipeService,
    UnitOfMeasureService,
)


def build_recipe_converter() -> RecipeConverter:
    return RecipeConverter(
        CategoryConverter(),
        IngredientConverter(UnitOfMeasureConverter()),
        NotesConverter(),
    )


def get_recipe_service(db: Session = Depends(get_db)) -> RecipeService:
    return RecipeService(db, RecipeRepository(db), build_recipe_converter())


def get_ingredient_service(db: Session = Depends(get_db)) -> IngredientService:
    return IngredientService(
        db,
        RecipeRepository(db),
        UnitOfMeasureRepository(db),
        IngredientConverter(UnitOfMeasureConverter()),
    )


def get_image_service(db: Session = Depends(get_db)) -> ImageService:
    return ImageService(db, RecipeRepository(db))


def get_uom_service(db: Session = Depends(get_db)) -> UnitOfMeasureService:
    return UnitOfMeasureService(UnitOfMeasureRepository(db), UnitOfMeasureConverter())


def get_category_service(db: Session = Depends(get_db)) -> CategoryService:
    return CategoryService(CategoryRepository(db), CategoryConverter())
