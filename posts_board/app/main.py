"""
Main entrypoint for the Posts Board application.

This module assembles the FastAPI application: it sets up logging,
creates the in‑memory post store, installs the method override
middleware, registers the HTML error handler, mounts static assets and
includes the routers.  ``create_app`` builds and configures the app,
which is then instantiated at module import time as ``app`` so it can
be served directly, e.g.::

    uvicorn posts_board.app.main:app --port 8080
"""

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from .api.router import router
from .core.config import Settings, settings as default_settings
from .core.logging_config import setup_logging
from .core.method_override import MethodOverrideMiddleware
from .core.store import SAMPLE_POSTS, PostStore
from .core.templating import create_templates, render


STATIC_DIR = Path(__file__).resolve().parent / "static"

logger = logging.getLogger(__name__)


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Render HTTP errors as an HTML page.

    A path that exists but does not accept the verb is reported as
    404, like any other unknown route.
    """
    status_code = exc.status_code
    if status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
        status_code = status.HTTP_404_NOT_FOUND
    if status_code == status.HTTP_404_NOT_FOUND:
        detail = "Not Found"
    else:
        detail = exc.detail
    logger.info("%s %s -> %s", request.method, request.url.path, status_code)
    return render(
        request,
        "error.html",
        {"status_code": status_code, "detail": detail},
        status_code=status_code,
    )


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Settings to use instead of the ones read from the environment.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance with its own post
        store in ``app.state.post_store``.
    """
    settings = settings or default_settings

    # Initialise logging before anything else so that the code below
    # can safely log messages.
    setup_logging(settings.log_level, settings.log_file or None)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(
            "%s %s started with %d post(s)",
            settings.project_name,
            settings.version,
            len(app.state.post_store),
        )
        yield
        logger.info("%s stopped", settings.project_name)

    app = FastAPI(
        title=settings.project_name,
        version=settings.version,
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.post_store = PostStore(SAMPLE_POSTS if settings.seed_posts else ())

    app.state.templates = create_templates(settings)

    app.add_middleware(MethodOverrideMiddleware, field=settings.method_override_field)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)

    app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")
    app.include_router(router)

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
