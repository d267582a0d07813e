"""
Index Controller

Renders the home page listing every recipe.
"""

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse

from app.dependencies import get_recipe_service
from app.services import RecipeService
from app.views import templates

logger = logging.getLogger(__name__)

router = APIRouter(tags=["index"])


@router.get("/", response_class=HTMLResponse)
@router.get("/index", response_class=HTMLResponse)
def get_index_page(request: Request, recipe_service: RecipeService = Depends(get_recipe_service)):
    logger.debug("Getting Index page")
    return templates.TemplateResponse(
        request, "index.html", {"recipes": recipe_service.get_recipes()}
    )
