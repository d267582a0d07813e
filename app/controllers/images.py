"""
Images Controller

Upload form, upload handler and the raw image endpoint used by the
recipe page's <img> tag.
"""

import logging

from fastapi import APIRouter, Depends, File, Request, UploadFile
from fastapi.responses import HTMLResponse, RedirectResponse, Response

from app.dependencies import get_image_service, get_recipe_service
from app.exceptions import NotFoundException
from app.services import ImageService, RecipeService
from app.views import templates

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/recipe/{recipe_id}", tags=["images"])


@router.get("/image", response_class=HTMLResponse)
def show_upload_form(recipe_id: int, request: Request, recipe_service: RecipeService = Depends(get_recipe_service)):
    recipe = recipe_service.find_command_by_id(recipe_id)
    return templates.TemplateResponse(request, "recipe/imageuploadform.html", {"recipe": recipe})


@router.post("/image")
def handle_image_post(
    recipe_id: int,
    imagefile: UploadFile = File(...),
    image_service: ImageService = Depends(get_image_service),
):
    data = imagefile.file.read()
    logger.debug(f"Received image {imagefile.filename!r} for recipe {recipe_id}")
    image_service.save_image_file(recipe_id, data)
    return RedirectResponse(f"/recipe/{recipe_id}/show", status_code=303)


@router.get("/recipeimage")
def render_image(recipe_id: int, recipe_service: RecipeService = Depends(get_recipe_service)):
    recipe = recipe_service.find_by_id(recipe_id)
    if not recipe.image:
        raise NotFoundException(f"Image Not Found. For recipe ID value: {recipe_id}", recipe_id)
    return Response(content=recipe.image, media_type="image/jpeg")
