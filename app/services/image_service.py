"""
Image Service - stores uploaded recipe images.

The image is kept as raw bytes on the recipe row; uploading replaces the
previous image.
"""

import logging

from sqlalchemy.orm import Session

from app.database import transaction
from app.exceptions import NotFoundException
from app.repositories import RecipeRepository

logger = logging.getLogger(__name__)


class ImageService:

    def __init__(self, db: Session, recipes: RecipeRepository):
        self.db = db
        self.recipes = recipes

    def save_image_file(self, recipe_id: int, data: bytes) -> None:
        """
        Replace a recipe's image with the uploaded bytes.

        Raises:
            NotFoundException: if the recipe does not exist
        """
        with transaction(self.db):
            recipe = self.recipes.find_by_id(recipe_id)
            if recipe is None:
                raise NotFoundException(f"Recipe Not Found. For ID value: {recipe_id}", recipe_id)

            recipe.image = bytes(data)
            self.recipes.save(recipe)

        logger.debug(f"Saved image for recipe {recipe_id} ({len(data)} bytes)")
