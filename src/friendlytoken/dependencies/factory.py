"""Token service dependency for FastAPI."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends
from safir.dependencies.logger import logger_dependency
from structlog.stdlib import BoundLogger

from ..factory import Factory
from ..services.token import TokenService

__all__ = ["token_service_dependency"]


async def token_service_dependency(
    logger: Annotated[BoundLogger, Depends(logger_dependency)],
) -> TokenService:
    """Provide a token service whose logger is bound to the request."""
    factory = Factory(logger)
    return factory.create_token_service()
