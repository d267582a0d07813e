"""
Controllers Package - The 'C' in MVC

Controllers handle HTTP requests and coordinate between:
- Services (business logic, reached through app.dependencies)
- Views (Jinja2 templates)

Each controller is a FastAPI APIRouter for one area of the site.
Controllers never touch the repositories or the session directly.
"""

from app.controllers.images import router as images_router
from app.controllers.index import router as index_router
from app.controllers.ingredients import router as ingredients_router
from app.controllers.recipes import router as recipes_router

__all__ = ["index_router", "recipes_router", "ingredients_router", "images_router"]
