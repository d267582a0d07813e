"""
Recipe Service - recipe lookups and saving recipe commands.

Missing recipes are a hard error here: find_by_id() raises
NotFoundException, which the controllers render as a 404 page.
"""

import logging

from sqlalchemy.orm import Session

from app.converters import RecipeConverter
from app.database import transaction
from app.exceptions import NotFoundException
from app.models import Recipe, RecipeCommand
from app.repositories import RecipeRepository

logger = logging.getLogger(__name__)


class RecipeService:
    """Service for recipe data access and conversion."""

    def __init__(self, db: Session, recipes: RecipeRepository, converter: RecipeConverter):
        self.db = db
        self.recipes = recipes
        self.converter = converter

    def get_recipes(self) -> list[Recipe]:
        """Get all recipes."""
        logger.debug("Listing recipes")
        return self.recipes.find_all()

    def find_by_id(self, recipe_id: int) -> Recipe:
        """
        Get a recipe by ID.

        Raises:
            NotFoundException: if no recipe has this id
        """
        recipe = self.recipes.find_by_id(recipe_id)
        if recipe is None:
            raise NotFoundException(f"Recipe Not Found. For ID value: {recipe_id}", recipe_id)
        return recipe

    def find_command_by_id(self, recipe_id: int) -> RecipeCommand:
        return self.converter.to_command(self.find_by_id(recipe_id))

    def save_recipe_command(self, command: RecipeCommand) -> RecipeCommand:
        """
        Save a submitted recipe (insert or update) and return the stored state.

        The command is converted to a detached entity graph, upserted, and
        the saved recipe is converted back so the caller sees generated ids.
        """
        detached = self.converter.to_entity(command)

        with transaction(self.db):
            saved = self.recipes.save(detached)
            logger.debug(f"Saved RecipeId: {saved.id}")
            result = self.converter.to_command(saved)

        return result

    def delete_by_id(self, recipe_id: int) -> None:
        """Delete a recipe; unknown ids are ignored."""
        logger.debug(f"Deleting recipe id: {recipe_id}")
        with transaction(self.db):
            self.recipes.delete_by_id(recipe_id)
