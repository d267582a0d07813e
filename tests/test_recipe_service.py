from decimal import Decimal

import pytest

from app.exceptions import NotFoundException
from app.models import (
    Category,
    CategoryCommand,
    Ingredient,
    IngredientCommand,
    Notes,
    Recipe,
    RecipeCommand,
    UnitOfMeasureCommand,
)


def test_save_new_recipe_assigns_ids(saved_recipe, recipe_command) -> None:
    assert saved_recipe.id is not None
    assert saved_recipe.description == recipe_command.description
    assert saved_recipe.notes.id is not None
    assert saved_recipe.notes.recipe_notes == "Add salsa for a quick version."
    assert len(saved_recipe.ingredients) == 2
    assert all(i.id is not None for i in saved_recipe.ingredients)
    assert all(i.recipe_id == saved_recipe.id for i in saved_recipe.ingredients)
    assert [c.description for c in saved_recipe.categories] == ["Mexican"]


def test_get_recipes(recipe_service, saved_recipe) -> None:
    recipes = recipe_service.get_recipes()

    assert len(recipes) == 1
    assert recipes[0].id == saved_recipe.id


def test_get_recipes_empty(recipe_service) -> None:
    assert recipe_service.get_recipes() == []


def test_find_by_id(recipe_service, saved_recipe) -> None:
    recipe = recipe_service.find_by_id(saved_recipe.id)

    assert isinstance(recipe, Recipe)
    assert recipe.description == "Perfect Guacamole"
    assert {i.description for i in recipe.ingredients} == {"ripe avocados", "fresh lime juice"}


def test_find_by_id_not_found(recipe_service) -> None:
    with pytest.raises(NotFoundException) as exc_info:
        recipe_service.find_by_id(1)

    assert exc_info.value.entity_id == 1
    assert str(exc_info.value) == "Recipe Not Found. For ID value: 1"


def test_find_command_by_id(recipe_service, saved_recipe) -> None:
    command = recipe_service.find_command_by_id(saved_recipe.id)

    assert command == saved_recipe


def test_find_command_by_id_not_found(recipe_service) -> None:
    with pytest.raises(NotFoundException):
        recipe_service.find_command_by_id(99)


def test_update_description_keeps_children(db, recipe_service, saved_recipe) -> None:
    command = saved_recipe.model_copy(update={"description": "Quick Guacamole"})

    updated = recipe_service.save_recipe_command(command)

    assert updated.id == saved_recipe.id
    assert updated.description == "Quick Guacamole"
    assert updated.notes.id == saved_recipe.notes.id
    assert [i.id for i in updated.ingredients] == [i.id for i in saved_recipe.ingredients]
    assert db.query(Recipe).count() == 1
    assert db.query(Notes).count() == 1


def test_update_reconciles_ingredients(db, recipe_service, saved_recipe, uoms) -> None:
    by_name = {i.description: i for i in saved_recipe.ingredients}
    avocados, lime = by_name["ripe avocados"], by_name["fresh lime juice"]
    command = saved_recipe.model_copy(update={
        "ingredients": [
            avocados.model_copy(update={"amount": Decimal("3")}),
            IngredientCommand(
                recipe_id=saved_recipe.id,
                description="Kosher salt",
                amount=Decimal(".5"),
                uom=UnitOfMeasureCommand(id=uoms["Teaspoon"]),
            ),
        ],
    })

    updated = recipe_service.save_recipe_command(command)

    by_description = {i.description: i for i in updated.ingredients}
    assert set(by_description) == {"ripe avocados", "Kosher salt"}
    assert by_description["ripe avocados"].id == avocados.id
    assert by_description["ripe avocados"].amount == Decimal("3")
    assert by_description["Kosher salt"].uom.description == "Teaspoon"
    assert db.get(Ingredient, lime.id) is None


def test_update_replaces_categories(db, recipe_service, saved_recipe, categories) -> None:
    command = saved_recipe.model_copy(update={
        "categories": [CategoryCommand(id=categories["American"]), CategoryCommand(id=categories["Italian"])],
    })

    updated = recipe_service.save_recipe_command(command)

    assert [c.description for c in updated.categories] == ["American", "Italian"]
    # Category rows themselves are never changed by a recipe save
    assert db.query(Category).count() == 3


def test_save_with_unknown_uom_raises(db, recipe_service, recipe_command) -> None:
    command = recipe_command.model_copy(update={
        "ingredients": [IngredientCommand(description="mystery", uom=UnitOfMeasureCommand(id=999))],
    })

    with pytest.raises(NotFoundException) as exc_info:
        recipe_service.save_recipe_command(command)

    assert exc_info.value.entity_id == 999
    assert db.query(Recipe).count() == 0


def test_save_empty_command(recipe_service) -> None:
    saved = recipe_service.save_recipe_command(RecipeCommand())

    assert saved.id is not None
    assert saved.ingredients == []
    assert saved.notes is None


def test_delete_by_id(db, recipe_service, saved_recipe) -> None:
    recipe_service.delete_by_id(saved_recipe.id)

    assert recipe_service.get_recipes() == []
    assert db.query(Ingredient).count() == 0
    assert db.query(Notes).count() == 0


def test_delete_unknown_id_is_ignored(recipe_service, saved_recipe) -> None:
    recipe_service.delete_by_id(saved_recipe.id + 1)

    assert len(recipe_service.get_recipes()) == 1


def test_new_recipe_scenario(recipe_service, uoms, categories) -> None:
    """Create a recipe with two ingredients, then read it back."""
    command = RecipeCommand(
        description="Hot Chocolate",
        prep_time=2,
        cook_time=5,
        servings=1,
        ingredients=[
            IngredientCommand(description="milk", amount=Decimal("1"), uom=UnitOfMeasureCommand(id=uoms["Cup"])),
            IngredientCommand(description="cocoa", amount=Decimal("2"), uom=UnitOfMeasureCommand(id=uoms["Tablespoon"])),
        ],
        categories=[CategoryCommand(id=categories["American"])],
    )

    saved = recipe_service.save_recipe_command(command)
    found = recipe_service.find_command_by_id(saved.id)

    assert found.description == "Hot Chocolate"
    assert {(i.description, i.uom.description) for i in found.ingredients} == {
        ("milk", "Cup"),
        ("cocoa", "Tablespoon"),
    }
    assert found.categories[0].description == "American"


def test_single_ingredient_scenario(recipe_service, uoms, categories) -> None:
    saved = recipe_service.save_recipe_command(RecipeCommand(
        description="Scenario",
        ingredients=[
            IngredientCommand(description="egg", amount=Decimal("2"), uom=UnitOfMeasureCommand(id=uoms["Each"])),
        ],
        categories=[CategoryCommand(id=categories["American"])],
    ))

    recipe = recipe_service.find_by_id(saved.id)

    assert len(recipe.ingredients) == 1
    (ingredient,) = recipe.ingredients
    assert ingredient.amount == Decimal("2")
    assert ingredient.uom.description == "Each"
    assert {c.description for c in recipe.categories} == {"American"}
