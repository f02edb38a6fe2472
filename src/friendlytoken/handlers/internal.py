"""Handlers for internal routes."""

from fastapi import APIRouter
from safir.metadata import Metadata, get_metadata

from ..dependencies.config import config_dependency

router = APIRouter()

__all__ = ["router"]


@router.get(
    "/",
    description="Return metadata about the running application.",
    response_model=Metadata,
    response_model_exclude_none=True,
    summary="Application metadata",
    tags=["internal"],
)
async def get_index() -> Metadata:
    config = config_dependency.config()
    return get_metadata(
        package_name="friendlytoken", application_name=config.name
    )
