"""
Recipe Converters

Field-by-field mapping between the recipe aggregate (Recipe, Ingredient,
Notes) and its commands.

The entities produced by to_entity() are transient: they are never added
to a session here. References to units and categories come out as stubs
carrying the row id; RecipeRepository.save() resolves them to the stored
rows.
"""

from typing import Optional

from app.converters.lookups import CategoryConverter, UnitOfMeasureConverter
from app.models import (
    Ingredient,
    IngredientCommand,
    Notes,
    NotesCommand,
    Recipe,
    RecipeCommand,
)


class NotesConverter:

    def to_command(self, source: Optional[Notes]) -> Optional[NotesCommand]:
        if source is None:
            return None
        return NotesCommand(id=source.id, recipe_notes=source.recipe_notes)

    def to_entity(self, source: Optional[NotesCommand]) -> Optional[Notes]:
        if source is None:
            return None
        return Notes(id=source.id, recipe_notes=source.recipe_notes)


class IngredientConverter:
    """Converts ingredients, delegating the unit to UnitOfMeasureConverter."""

    def __init__(self, uom_converter: UnitOfMeasureConverter):
        self.uom_converter = uom_converter

    def to_command(self, source: Optional[Ingredient]) -> Optional[IngredientCommand]:
        if source is None:
            return None

        recipe_id = source.recipe.id if source.recipe is not None else source.recipe_id
        return IngredientCommand(
            id=source.id,
            recipe_id=recipe_id,
            description=source.description,
            amount=source.amount,
            uom=self.uom_converter.to_command(source.uom),
        )

    def to_entity(self, source: Optional[IngredientCommand]) -> Optional[Ingredient]:
        """
        Build a transient Ingredient from a command.

        When the command names a recipe, a stub Recipe carrying only that id
        is linked on both sides so the owning row can be identified without
        loading it first.
        """
        if source is None:
            return None

        ingredient = Ingredient(
            id=source.id,
            description=source.description,
            amount=source.amount,
            uom=self.uom_converter.to_entity(source.uom),
        )
        if source.recipe_id is not None:
            Recipe(id=source.recipe_id).add_ingredient(ingredient)
        return ingredient


class RecipeConverter:
    """Converts a whole recipe, element-wise for its collections."""

    def __init__(
        self,
        category_converter: CategoryConverter,
        ingredient_converter: IngredientConverter,
        notes_converter: NotesConverter,
    ):
        self.category_converter = category_converter
        self.ingredient_converter = ingredient_converter
        self.notes_converter = notes_converter

    def to_command(self, source: Optional[Recipe]) -> Optional[RecipeCommand]:
        if source is None:
            return None

        return RecipeCommand(
            id=source.id,
            description=source.description,
            prep_time=source.prep_time,
            cook_time=source.cook_time,
            servings=source.servings,
            source=source.source,
            url=source.url,
            directions=source.directions,
            difficulty=source.difficulty,
            image=source.image,
            notes=self.notes_converter.to_command(source.notes),
            ingredients=[
                self.ingredient_converter.to_command(ingredient)
                for ingredient in _by_id(source.ingredients)
            ],
            categories=[
                self.category_converter.to_command(category)
                for category in _by_id(source.categories)
            ],
        )

    def to_entity(self, source: Optional[RecipeCommand]) -> Optional[Recipe]:
        if source is None:
            return None

        recipe = Recipe(
            id=source.id,
            description=source.description,
            prep_time=source.prep_time,
            cook_time=source.cook_time,
            servings=source.servings,
            source=source.source,
            url=source.url,
            directions=source.directions,
            difficulty=source.difficulty,
            image=source.image,
        )

        notes = self.notes_converter.to_entity(source.notes)
        if notes is not None:
            recipe.notes = notes

        for command in source.ingredients:
            recipe.add_ingredient(self.ingredient_converter.to_entity(command))

        for command in source.categories:
            recipe.categories.add(self.category_converter.to_entity(command))

        return recipe


def _by_id(items):
    """Stable ordering for set-valued collections; unsaved rows go last."""
    return sorted(items, key=lambda item: (item.id is None, item.id or 0))
