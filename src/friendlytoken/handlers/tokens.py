"""Routes for generating and validating tokens."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends
from safir.models import ErrorModel

from ..dependencies.factory import token_service_dependency
from ..models.token import (
    CategorySelection,
    ExampleTokens,
    NewToken,
    TokenValidationRequest,
    TokenValidationResult,
)
from ..services.token import TokenService

router = APIRouter()

__all__ = ["router"]


@router.get(
    "/tokens",
    description=(
        "Generate one token with the default prefix, one for organization"
        " test with type user, and one with type admin."
    ),
    response_model=ExampleTokens,
    summary="Example tokens",
    tags=["tokens"],
)
async def get_tokens(
    *,
    token_service: Annotated[TokenService, Depends(token_service_dependency)],
) -> ExampleTokens:
    return token_service.create_example_tokens()


@router.post(
    "/tokens",
    description=(
        "Generate a new token. The prefix is taken from the type if given,"
        " otherwise from the organization, otherwise the default is used."
    ),
    response_model=NewToken,
    responses={422: {"description": "Invalid category", "model": ErrorModel}},
    status_code=201,
    summary="Create token",
    tags=["tokens"],
)
async def post_tokens(
    selection: CategorySelection,
    *,
    token_service: Annotated[TokenService, Depends(token_service_dependency)],
) -> NewToken:
    return NewToken(token=token_service.create_token(selection))


@router.post(
    "/tokens/validate",
    description="Check whether a string is a well-formed token.",
    response_model=TokenValidationResult,
    summary="Validate token",
    tags=["tokens"],
)
async def post_tokens_validate(
    data: TokenValidationRequest,
    *,
    token_service: Annotated[TokenService, Depends(token_service_dependency)],
) -> TokenValidationResult:
    valid = token_service.validate(data.token)
    return TokenValidationResult(valid=valid)
