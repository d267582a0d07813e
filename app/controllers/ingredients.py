"""
Ingredients Controller

Ingredient pages are nested under their recipe:
/recipe/{recipe_id}/ingredients and /recipe/{recipe_id}/ingredient/...
"""

import logging
from decimal import Decimal
from typing import Optional

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse, RedirectResponse

from app.dependencies import get_ingredient_service, get_recipe_service, get_uom_service
from app.models import IngredientCommand, UnitOfMeasureCommand
from app.services import IngredientService, RecipeService, UnitOfMeasureService
from app.views import templates

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/recipe/{recipe_id}", tags=["ingredients"])

INGREDIENT_FORM_TEMPLATE = "recipe/ingredient/ingredientform.html"


@router.get("/ingredients", response_class=HTMLResponse)
def list_ingredients(recipe_id: int, request: Request, recipe_service: RecipeService = Depends(get_recipe_service)):
    logger.debug(f"Getting ingredient list for recipe id: {recipe_id}")
    recipe = recipe_service.find_command_by_id(recipe_id)
    return templates.TemplateResponse(request, "recipe/ingredient/list.html", {"recipe": recipe})


@router.get("/ingredient/new", response_class=HTMLResponse)
def new_ingredient(
    recipe_id: int,
    request: Request,
    recipe_service: RecipeService = Depends(get_recipe_service),
    uom_service: UnitOfMeasureService = Depends(get_uom_service),
):
    # Fails with 404 before showing a form for a recipe that does not exist
    recipe_service.find_command_by_id(recipe_id)

    ingredient = IngredientCommand(recipe_id=recipe_id, uom=UnitOfMeasureCommand())
    return templates.TemplateResponse(
        request,
        INGREDIENT_FORM_TEMPLATE,
        {"ingredient": ingredient, "uom_list": uom_service.list_all_uoms()},
    )


@router.get("/ingredient/{ingredient_id}/show", response_class=HTMLResponse)
def show_recipe_ingredient(
    recipe_id: int,
    ingredient_id: int,
    request: Request,
    ingredient_service: IngredientService = Depends(get_ingredient_service),
):
    ingredient = ingredient_service.find_by_recipe_id_and_ingredient_id(recipe_id, ingredient_id)
    return templates.TemplateResponse(request, "recipe/ingredient/show.html", {"ingredient": ingredient})


@router.get("/ingredient/{ingredient_id}/update", response_class=HTMLResponse)
def update_recipe_ingredient(
    recipe_id: int,
    ingredient_id: int,
    request: Request,
    ingredient_service: IngredientService = Depends(get_ingredient_service),
    uom_service: UnitOfMeasureService = Depends(get_uom_service),
):
    ingredient = ingredient_service.find_by_recipe_id_and_ingredient_id(recipe_id, ingredient_id)
    return templates.TemplateResponse(
        request,
        INGREDIENT_FORM_TEMPLATE,
        {"ingredient": ingredient, "uom_list": uom_service.list_all_uoms()},
    )


@router.post("/ingredient")
def save_or_update(
    recipe_id: int,
    ingredient_id: Optional[int] = Form(None, alias="id"),
    description: Optional[str] = Form(None),
    amount: Optional[Decimal] = Form(None, max_digits=19, decimal_places=2),
    uom_id: Optional[int] = Form(None),
    ingredient_service: IngredientService = Depends(get_ingredient_service),
):
    command = IngredientCommand(
        id=ingredient_id,
        recipe_id=recipe_id,
        description=description,
        amount=amount,
        uom=UnitOfMeasureCommand(id=uom_id),
    )
    saved = ingredient_service.save_ingredient_command(command)

    logger.debug(f"saved recipe id: {saved.recipe_id}")
    logger.debug(f"saved ingredient id: {saved.id}")

    if saved.id is None:
        # Recipe was not found; nothing was saved
        return RedirectResponse("/", status_code=303)
    return RedirectResponse(f"/recipe/{saved.recipe_id}/ingredient/{saved.id}/show", status_code=303)


@router.get("/ingredient/{ingredient_id}/delete")
def delete_ingredient(
    recipe_id: int,
    ingredient_id: int,
    ingredient_service: IngredientService = Depends(get_ingredient_service),
):
    logger.debug(f"deleting ingredient id: {ingredient_id}")
    ingredient_service.delete_by_id(recipe_id, ingredient_id)
    return RedirectResponse(f"/recipe/{recipe_id}/ingredients", status_code=303)
