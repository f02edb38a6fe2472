"""Application definition for friendlytoken."""

from __future__ import annotations

import json
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from importlib.metadata import version

import structlog
from fastapi import FastAPI
from fastapi.openapi.utils import get_openapi
from safir.fastapi import ClientRequestError, client_request_error_handler
from safir.logging import configure_uvicorn_logging
from safir.models import ErrorModel

from .dependencies.config import config_dependency
from .handlers import internal, tokens

__all__ = ["create_app", "create_openapi"]


def create_app(*, load_config: bool = True) -> FastAPI:
    """Create the FastAPI application.

    This is in a function rather than using a global variable (as is more
    typical for FastAPI) because the path prefix comes from the configuration
    and we therefore want to recreate the application between tests.

    Parameters
    ----------
    load_config
        If set to `False`, do not try to load the configuration and serve the
        token routes without a prefix. This is used primarily for OpenAPI
        schema generation, where constructing the app is required but the
        configuration won't matter.
    """

    # Load configuration if it is available to us and configure Uvicorn
    # logging.
    path_prefix = ""
    logger_name = "friendlytoken"
    if load_config:
        config = config_dependency.config()
        configure_uvicorn_logging(config.log_level)
        path_prefix = config.path_prefix
        logger_name = config.name

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
        logger = structlog.get_logger(logger_name)
        logger.debug("Starting friendlytoken")
        yield
        logger.debug("Shut down friendlytoken")

    app = FastAPI(
        title="friendlytoken",
        description=(
            "friendlytoken generates short, prefixed, human-legible secret"
            " tokens and checks whether strings are well-formed tokens."
        ),
        version=version("friendlytoken"),
        tags_metadata=[
            {
                "name": "tokens",
                "description": "Generate and validate tokens.",
            },
            {
                "name": "internal",
                "description": "Application metadata.",
            },
        ],
        lifespan=lifespan,
    )

    # Add all of the routes.
    app.include_router(internal.router)
    app.include_router(
        tokens.router,
        prefix=path_prefix,
        responses={422: {"description": "Bad input", "model": ErrorModel}},
    )

    # Handle exceptions descended from ClientRequestError.
    app.exception_handler(ClientRequestError)(client_request_error_handler)

    return app


def create_openapi() -> str:
    """Generate the OpenAPI schema.

    Returns
    -------
    str
        OpenAPI schema as serialized JSON.
    """
    app = create_app(load_config=False)
    schema = get_openapi(
        title=app.title,
        description=app.description,
        version=app.version,
        routes=app.routes,
    )
    return json.dumps(schema)
