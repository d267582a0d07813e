"""
Ingredient Service - ingredients are edited through their recipe.

Every operation loads the owning recipe and works on its ingredient
collection; the recipe is then saved as a whole.

Failure policy differs per operation and callers rely on it:
- find_by_recipe_id_and_ingredient_id() raises when the recipe or the
  ingredient is missing.
- save_ingredient_command() logs and returns an empty IngredientCommand
  when the recipe is missing, but raises when the unit of measure id is
  unknown.
- delete_by_id() logs and does nothing when the recipe or the ingredient
  is missing.
"""

import logging
from typing import Optional

from sqlalchemy.orm import Session

from app.converters import IngredientConverter
from app.database import transaction
from app.exceptions import IngredientNotFoundException, NotFoundException
from app.models import Ingredient, IngredientCommand, Recipe
from app.repositories import RecipeRepository, UnitOfMeasureRepository

logger = logging.getLogger(__name__)


class IngredientService:
    """Service for reading, saving and deleting a recipe's ingredients."""

    def __init__(
        self,
        db: Session,
        recipes: RecipeRepository,
        uoms: UnitOfMeasureRepository,
        converter: IngredientConverter,
    ):
        self.db = db
        self.recipes = recipes
        self.uoms = uoms
        self.converter = converter

    def find_by_recipe_id_and_ingredient_id(self, recipe_id: int, ingredient_id: int) -> IngredientCommand:
        """
        Get one ingredient of a recipe.

        Raises:
            NotFoundException: if the recipe does not exist
            IngredientNotFoundException: if the recipe has no such ingredient
        """
        recipe = self.recipes.find_by_id(recipe_id)
        if recipe is None:
            logger.error(f"recipe id not found. Id: {recipe_id}")
            raise NotFoundException(f"Recipe Not Found. For ID value: {recipe_id}", recipe_id)

        ingredient = _find_ingredient(recipe, ingredient_id)
        if ingredient is None:
            logger.error(f"Ingredient id not found: {ingredient_id}")
            raise IngredientNotFoundException(
                f"Ingredient Not Found. For ID value: {ingredient_id}", ingredient_id
            )

        return self.converter.to_command(ingredient)

    def save_ingredient_command(self, command: IngredientCommand) -> IngredientCommand:
        """
        Add an ingredient to its recipe or update it in place.

        After saving, the ingredient is looked up again in the saved recipe:
        by id first, then by (description, amount, unit id) among the rows
        inserted by this save. Rows that existed before are skipped, so an
        existing ingredient with the same description, amount and unit is
        never returned in place of the new one.

        Returns:
            The saved ingredient, or an empty IngredientCommand if the recipe
            does not exist

        Raises:
            NotFoundException: if the unit of measure id does not exist
        """
        with transaction(self.db):
            recipe = self.recipes.find_by_id(command.recipe_id) if command.recipe_id is not None else None
            if recipe is None:
                logger.error(f"Recipe not found for id: {command.recipe_id}")
                return IngredientCommand()

            existing_ids = {i.id for i in recipe.ingredients}
            ingredient = _find_ingredient(recipe, command.id)
            if ingredient is not None:
                ingredient.description = command.description
                ingredient.amount = command.amount
                ingredient.uom = self._find_uom(command)
            else:
                new_ingredient = self.converter.to_entity(command)
                # An id not found in this recipe must not reuse another row
                new_ingredient.id = None
                # Drop the converter's stub recipe so it never enters the session
                new_ingredient.recipe = None
                recipe.add_ingredient(new_ingredient)

            saved_recipe = self.recipes.save(recipe)

            saved = _find_ingredient(saved_recipe, command.id)
            if saved is None:
                saved = _match_new_ingredient(saved_recipe, command, existing_ids)

            result = self.converter.to_command(saved)

        return result if result is not None else IngredientCommand()

    def delete_by_id(self, recipe_id: int, ingredient_id: int) -> None:
        """Remove one ingredient from a recipe; missing rows are ignored."""
        logger.debug(f"Deleting ingredient: {recipe_id}:{ingredient_id}")

        with transaction(self.db):
            recipe = self.recipes.find_by_id(recipe_id)
            if recipe is None:
                logger.debug(f"Recipe Id Not found. Id: {recipe_id}")
                return
            logger.debug("found recipe")

            ingredient = _find_ingredient(recipe, ingredient_id)
            if ingredient is None:
                logger.debug(f"Ingredient Id Not found. Id: {ingredient_id}")
                return
            logger.debug("found Ingredient")

            ingredient.recipe = None
            recipe.ingredients.discard(ingredient)
            self.recipes.save(recipe)

    def _find_uom(self, command: IngredientCommand):
        uom_id = command.uom.id if command.uom is not None else None
        uom = self.uoms.find_by_id(uom_id) if uom_id is not None else None
        if uom is None:
            raise NotFoundException(f"Unit Of Measure Not Found. For ID value: {uom_id}", uom_id)
        return uom


def _find_ingredient(recipe: Recipe, ingredient_id: Optional[int]) -> Optional[Ingredient]:
    if ingredient_id is None:
        return None
    return next((i for i in recipe.ingredients if i.id == ingredient_id), None)


def _match_new_ingredient(
    recipe: Recipe, command: IngredientCommand, existing_ids: set
) -> Optional[Ingredient]:
    """Find a just-inserted ingredient by description, amount and unit id."""
    uom_id = command.uom.id if command.uom is not None else None
    for ingredient in sorted(recipe.ingredients, key=lambda i: i.id):
        if ingredient.id in existing_ids:
            continue
        if (
            ingredient.description == command.description
            and ingredient.amount == command.amount
            and (ingredient.uom.id if ingredient.uom is not None else None) == uom_id
        ):
            return ingredient
    return None
