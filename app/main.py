"""
Recipe Manager - Application Entry Point

FastAPI application serving server-rendered recipe pages. It follows the
MVC (Model-View-Controller) architectural pattern.

Architecture Overview:
=====================
- Models (app/models/): SQLAlchemy entities + Pydantic command objects
- Views (app/views/): Jinja2 templates
- Controllers (app/controllers/): FastAPI routers handling requests
- Services (app/services/): transactional business operations
- Repositories (app/repositories/): data access for the entities
- Converters (app/converters/): entity <-> command mapping

Request Flow:
============
1. Request arrives at a Controller endpoint
2. Controller validates form input
3. Controller calls a Service (wired in app/dependencies.py)
4. Service loads and saves entities through Repositories inside one
   transaction and converts them with the Converters
5. Controller renders a View template or redirects

Startup:
========
Tables are created and, unless BOOTSTRAP_ENABLED=false, the lookup tables
and sample recipes are loaded. A failed bootstrap aborts startup.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError

from app.bootstrap import RecipeBootstrap
from app.config import get_settings
from app.controllers import images_router, index_router, ingredients_router, recipes_router
from app.database import SessionLocal, dispose_engine, init_db
from app.exceptions import NotFoundException
from app.views import templates

settings = get_settings()

# Configure logging
logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def load_bootstrap_data() -> None:
    """Run the bootstrap loader in its own session."""
    db = SessionLocal()
    try:
        logger.info("Loading Bootstrap Data")
        RecipeBootstrap.for_session(db).run()
    finally:
        db.close()


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    if settings.bootstrap_enabled:
        load_bootstrap_data()
    yield
    dispose_engine()
    logger.info("Shutdown complete")


# Create FastAPI application
app = FastAPI(
    title=settings.app_name,
    description="Recipe management with ingredients, units of measure, categories and notes.",
    version="1.0.0",
    lifespan=lifespan,
)

# Register controllers (routers)
app.include_router(index_router)         # / and /index
app.include_router(recipes_router)       # /recipe pages
app.include_router(ingredients_router)   # /recipe/{id}/ingredient pages
app.include_router(images_router)        # /recipe/{id}/image


# ============================================
# Error Pages
# ============================================

@app.exception_handler(NotFoundException)
def handle_not_found(request: Request, exc: NotFoundException):
    logger.error("Handling not found exception")
    logger.error(str(exc))
    return templates.TemplateResponse(
        request, "404error.html", {"exception": exc}, status_code=404
    )


@app.exception_handler(RequestValidationError)
def handle_bad_request(request: Request, exc: RequestValidationError):
    """Malformed ids or numbers in the URL or a form."""
    logger.error("Handling bad request")
    logger.error(str(exc))
    return templates.TemplateResponse(
        request, "400error.html", {"exception": exc}, status_code=400
    )


@app.get("/health", tags=["health"])
def health_check():
    """Basic health check endpoint."""
    return {"status": "healthy", "service": settings.app_name}
