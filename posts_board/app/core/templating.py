"""
View rendering.

Handlers render pages through ``render(request, view_name, data)``;
the templates themselves live in the package's ``templates/``
directory and are rendered with Jinja2 (autoescaping on).  Views must
cope with an absent ``post`` so that unknown ids render a placeholder
instead of failing.

Each application owns its own template environment (built by
``create_templates`` and kept on ``app.state.templates``) so that the
globals one app exposes to its views never leak into another.
"""

from pathlib import Path
from typing import Any, Mapping, Optional

from fastapi import Request
from fastapi.templating import Jinja2Templates

from .config import Settings


TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"


def create_templates(settings: Settings) -> Jinja2Templates:
    """Build a template environment exposing the app's settings to views."""
    templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
    templates.env.globals["project_name"] = settings.project_name
    templates.env.globals["method_override_field"] = settings.method_override_field
    return templates


def render(
    request: Request,
    view_name: str,
    data: Optional[Mapping[str, Any]] = None,
    status_code: int = 200,
):
    """Render ``view_name`` with ``data`` into an HTML response."""
    templates: Jinja2Templates = request.app.state.templates
    return templates.TemplateResponse(
        request,
        view_name,
        dict(data or {}),
        status_code=status_code,
    )
