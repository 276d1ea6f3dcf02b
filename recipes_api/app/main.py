"""
Main entrypoint for the Recipes API.

This module assembles the FastAPI application: it sets up logging,
loads the recipe seed file into a fresh ``RecipeStore``, installs the
error handlers and includes the versioned routers.  Because the seed
file is read while the app is built, a missing or malformed file
fails ``create_app`` before any server starts listening.  Run it with
``run.py`` or any ASGI server using the factory form::

    uvicorn recipes_api.app.main:create_app --factory --port 5000
"""

import logging
import time
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .api.v1.router import router as v1_router
from .core.config import settings
from .core.logging_config import setup_logging
from .services.recipe_store import RecipeStore

logger = logging.getLogger(__name__)

DESCRIPTION = "A sample recipes API. Recipes are kept in memory and seeded from a JSON file at startup."
CONTACT = {
    "name": "Ahmad Yogi",
    "email": "ahmadyogi543@gmail.com",
    "url": "https://github.com/ahmadyogi543",
}


def format_validation_error(exc: RequestValidationError) -> str:
    """Flatten a validation error into one human readable line."""
    parts = []
    for err in exc.errors():
        loc = ".".join(str(item) for item in err.get("loc", ()))
        msg = err.get("msg", "invalid input")
        # Malformed JSON carries the decoder's reason in ctx.
        reason = (err.get("ctx") or {}).get("error")
        if reason and str(reason) not in msg:
            msg = f"{msg}: {reason}"
        parts.append(f"{loc}: {msg}" if loc else msg)
    return "; ".join(parts) or "invalid request"


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    message = format_validation_error(exc)
    logger.debug("Rejected %s %s: %s", request.method, request.url.path, message)
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": message})


def create_app(recipes_file: Optional[str] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    recipes_file : Optional[str]
        Seed file to load.  Defaults to ``settings.recipes_file``.

    Returns
    -------
    FastAPI
        A configured application with its own recipe store.

    Raises
    ------
    SeedFileError
        If the seed file cannot be read or parsed.
    """
    # Initialise logging first so the seed load below is logged.
    setup_logging(settings.log_level, settings.log_file)

    store = RecipeStore.from_file(recipes_file or settings.recipes_file)

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        description=DESCRIPTION,
        contact=CONTACT,
    )
    app.state.store = store

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info(
            "%s %s -> %d (%.1f ms)",
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
        )
        return response

    # Version 1 is served at the root: /recipes, /recipes/{id}, ...
    app.include_router(v1_router)

    return app
