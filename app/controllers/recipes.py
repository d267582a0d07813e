"""
Recipes Controller

Handles the recipe pages:
- Showing a recipe
- The create/update form and its submission
- Deleting a recipe

Design Decisions:
- Form input is validated here with RecipeForm; invalid input re-renders
  the form with the error messages instead of reaching the service.
- An update starts from the stored recipe command and overlays the form
  fields, so ingredients and the image are not lost. Categories come
  from the checkboxes, which list every category.
- Missing recipes raise NotFoundException from the service; the handler
  in app.main renders the 404 page.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from pydantic import ValidationError

from app.dependencies import get_category_service, get_recipe_service
from app.models import Difficulty, RecipeCommand, RecipeForm
from app.services import CategoryService, RecipeService
from app.views import templates

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/recipe", tags=["recipes"])

RECIPE_FORM_TEMPLATE = "recipe/recipeform.html"


def _form_values(command: RecipeCommand) -> dict:
    """Flatten a command into the values shown in the form inputs."""
    return {
        "id": command.id,
        "description": command.description,
        "prep_time": command.prep_time,
        "cook_time": command.cook_time,
        "servings": command.servings,
        "source": command.source,
        "url": command.url,
        "directions": command.directions,
        "difficulty": command.difficulty.value if command.difficulty else None,
        "notes": command.notes.recipe_notes if command.notes else None,
        "category_ids": [category.id for category in command.categories],
    }


def _render_form(
    request: Request,
    values: dict,
    recipe: RecipeCommand,
    category_service: CategoryService,
    errors: Optional[dict] = None,
):
    return templates.TemplateResponse(
        request,
        RECIPE_FORM_TEMPLATE,
        {
            "form": values,
            "recipe": recipe,
            "errors": errors or {},
            "difficulties": list(Difficulty),
            "category_list": category_service.list_all_categories(),
        },
    )


@router.get("/{recipe_id}/show", response_class=HTMLResponse)
def show_by_id(recipe_id: int, request: Request, recipe_service: RecipeService = Depends(get_recipe_service)):
    """Show one recipe with its ingredients, notes and categories."""
    recipe = recipe_service.find_by_id(recipe_id)
    return templates.TemplateResponse(request, "recipe/show.html", {"recipe": recipe})


@router.get("/new", response_class=HTMLResponse)
def new_recipe(request: Request, category_service: CategoryService = Depends(get_category_service)):
    command = RecipeCommand()
    return _render_form(request, _form_values(command), command, category_service)


@router.get("/{recipe_id}/update", response_class=HTMLResponse)
def update_recipe(
    recipe_id: int,
    request: Request,
    recipe_service: RecipeService = Depends(get_recipe_service),
    category_service: CategoryService = Depends(get_category_service),
):
    command = recipe_service.find_command_by_id(recipe_id)
    return _render_form(request, _form_values(command), command, category_service)


@router.post("", response_class=HTMLResponse)
def save_or_update(
    request: Request,
    recipe_id: Optional[str] = Form(None, alias="id"),
    description: Optional[str] = Form(None),
    prep_time: Optional[str] = Form(None),
    cook_time: Optional[str] = Form(None),
    servings: Optional[str] = Form(None),
    source: Optional[str] = Form(None),
    url: Optional[str] = Form(None),
    directions: Optional[str] = Form(None),
    difficulty: Optional[str] = Form(None),
    notes: Optional[str] = Form(None),
    category_ids: list[int] = Form([]),
    recipe_service: RecipeService = Depends(get_recipe_service),
    category_service: CategoryService = Depends(get_category_service),
):
    """
    Create or update a recipe from the submitted form.

    On success redirects (303) to the recipe's page.
    """
    values = {
        "id": recipe_id,
        "description": description,
        "prep_time": prep_time,
        "cook_time": cook_time,
        "servings": servings,
        "source": source,
        "url": url,
        "directions": directions,
        "difficulty": difficulty,
        "notes": notes,
        "category_ids": category_ids,
    }

    try:
        form = RecipeForm.model_validate(values)
    except ValidationError as e:
        errors = {".".join(str(part) for part in err["loc"]): err["msg"] for err in e.errors()}
        for field, message in errors.items():
            logger.debug(f"{field}: {message}")
        return _render_form(request, values, RecipeCommand(), category_service, errors)

    stored = recipe_service.find_command_by_id(form.id) if form.id is not None else RecipeCommand()
    saved = recipe_service.save_recipe_command(form.apply_to(stored))

    return RedirectResponse(f"/recipe/{saved.id}/show", status_code=303)


@router.get("/{recipe_id}/delete")
def delete_by_id(recipe_id: int, recipe_service: RecipeService = Depends(get_recipe_service)):
    logger.debug(f"Deleting id: {recipe_id}")
    recipe_service.delete_by_id(recipe_id)
    return RedirectResponse("/", status_code=303)
