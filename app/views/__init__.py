"""
Views Package - The 'V' in MVC

Server-side Jinja2 templates live in app/views/templates. Controllers
render them through the shared `templates` object below; templates only
ever receive entities for read-only display or command objects.
"""

import os

from fastapi.templating import Jinja2Templates

templates_path = os.path.join(os.path.dirname(__file__), "templates")

templates = Jinja2Templates(directory=templates_path)

__all__ = ["templates", "templates_path"]
