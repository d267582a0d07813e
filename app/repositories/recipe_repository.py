"""
Recipe Repository - Data access for the recipe aggregate.

A recipe is stored together with the rows it owns (ingredients, notes)
and its links to shared categories. Callers hand in either a recipe that
is already managed by the session, or a detached graph built by the
converters; save() takes care of both.

The repository only flushes. Committing is the caller's job, so that a
service operation runs as a single transaction.
"""

import logging
from typing import Optional

from sqlalchemy import inspect
from sqlalchemy.orm import Session, joinedload, selectinload

from app.exceptions import NotFoundException
from app.models import Category, Ingredient, Notes, Recipe, UnitOfMeasure

logger = logging.getLogger(__name__)

# Columns copied verbatim when merging a detached recipe
SCALAR_FIELDS = (
    "description",
    "prep_time",
    "cook_time",
    "servings",
    "source",
    "url",
    "directions",
    "difficulty",
    "image",
)


class RecipeRepository:
    """Repository for recipe database operations."""

    def __init__(self, db: Session):
        """Initialize with a database session."""
        self.db = db

    # ==========================================
    # Queries
    # ==========================================

    def _query(self):
        return self.db.query(Recipe).options(
            selectinload(Recipe.ingredients).joinedload(Ingredient.uom),
            joinedload(Recipe.notes),
            selectinload(Recipe.categories),
        )

    def find_by_id(self, recipe_id: int) -> Optional[Recipe]:
        """Get a recipe by ID with ingredients, notes and categories loaded."""
        return self._query().filter(Recipe.id == recipe_id).first()

    def find_all(self) -> list[Recipe]:
        return self._query().order_by(Recipe.id).all()

    def count(self) -> int:
        return self.db.query(Recipe).count()

    # ==========================================
    # Upsert
    # ==========================================

    def save(self, recipe: Recipe) -> Recipe:
        """
        Save a recipe (upsert).

        - A recipe already in the session is flushed as is.
        - A detached recipe whose id exists is merged into the stored row.
        - Anything else is inserted as a new row with generated ids.

        Returns:
            The managed Recipe
        """
        if recipe in self.db:
            self._resolve_references(recipe)
            self.db.flush()
            return recipe

        target = self.find_by_id(recipe.id) if recipe.id is not None else None
        if target is None:
            target = Recipe()
            self.db.add(target)

        self._merge(target, recipe)
        self.db.flush()
        return target

    def save_all(self, recipes: list[Recipe]) -> list[Recipe]:
        return [self.save(recipe) for recipe in recipes]

    def _merge(self, target: Recipe, source: Recipe) -> None:
        """Copy a detached recipe graph onto a managed recipe."""
        for field in SCALAR_FIELDS:
            setattr(target, field, getattr(source, field))

        # Absent notes leave the stored notes alone
        if source.notes is not None:
            if target.notes is None:
                target.notes = Notes()
            target.notes.recipe_notes = source.notes.recipe_notes

        stored = {ingredient.id: ingredient for ingredient in target.ingredients}
        kept = set()
        for incoming in list(source.ingredients):
            ingredient = stored.get(incoming.id) if incoming.id is not None else None
            if ingredient is None:
                ingredient = Ingredient()
                target.add_ingredient(ingredient)
            ingredient.description = incoming.description
            ingredient.amount = incoming.amount
            ingredient.uom = self._resolve(UnitOfMeasure, incoming.uom)
            kept.add(ingredient)

        for ingredient in list(target.ingredients):
            if ingredient not in kept:
                # delete-orphan removes the row on flush
                target.ingredients.discard(ingredient)

        target.categories = self._resolve_categories(source.categories)

    def _resolve_references(self, recipe: Recipe) -> None:
        for ingredient in recipe.ingredients:
            ingredient.uom = self._resolve(UnitOfMeasure, ingredient.uom)
        recipe.categories = self._resolve_categories(recipe.categories)

    def _resolve_categories(self, categories) -> set:
        resolved = (self._resolve(Category, category) for category in list(categories))
        return {category for category in resolved if category is not None}

    def _resolve(self, model, reference):
        """
        Map a reference to the stored row with the same id.

        Stubs produced by the converters are never inserted; they only name
        an existing row.

        Raises:
            NotFoundException: if the referenced id does not exist
        """
        if reference is None:
            return None

        state = inspect(reference)
        if state.persistent:
            return reference
        if state.pending:
            self.db.expunge(reference)
        if reference.id is None:
            return None

        row = self.db.get(model, reference.id)
        if row is None:
            raise NotFoundException(
                f"{model.__name__} Not Found. For ID value: {reference.id}",
                reference.id,
            )
        return row

    # ==========================================
    # Delete
    # ==========================================

    def delete_by_id(self, recipe_id: int) -> bool:
        """
        Delete a recipe together with the rows it owns.

        Ingredients, notes and category links are removed explicitly in the
        same flush. Category rows themselves are left untouched.

        Returns:
            True if deleted, False if not found
        """
        recipe = self.find_by_id(recipe_id)
        if recipe is None:
            logger.debug(f"Recipe Id Not found. Id: {recipe_id}")
            return False

        for ingredient in list(recipe.ingredients):
            self.db.delete(ingredient)
        if recipe.notes is not None:
            self.db.delete(recipe.notes)
        recipe.categories.clear()

        self.db.delete(recipe)
        self.db.flush()
        return True
