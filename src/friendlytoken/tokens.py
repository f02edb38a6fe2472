"""Convenience functions for generating and validating tokens.

These wrap a shared `~friendlytoken.services.token.TokenService` built with
the default secure random source. Applications that need a different logger
or random source should use `~friendlytoken.factory.Factory` directly.
"""

from __future__ import annotations

from .factory import Factory
from .models.enums import TokenKind
from .services.token import TokenService

__all__ = ["friendly_token", "validate"]

_token_service: TokenService | None = None


def _get_token_service() -> TokenService:
    global _token_service  # noqa: PLW0603
    if _token_service is None:
        _token_service = Factory().create_token_service()
    return _token_service


def friendly_token(
    organization: str | None = None,
    type: TokenKind | str | None = None,  # noqa: A002
) -> str:
    """Generate a new friendly token.

    Parameters
    ----------
    organization
        Organization owning the token. Ignored if ``type`` is given.
    type
        Kind of token, as a `~friendlytoken.models.enums.TokenKind` or its
        string value.

    Returns
    -------
    str
        The new token.

    Raises
    ------
    friendlytoken.exceptions.EntropyUnavailableError
        Raised if the secure random source failed.
    friendlytoken.exceptions.UnrecognizedCategoryError
        Raised if ``type`` is not a known kind, or if ``organization`` has
        too few letters and digits to form a prefix.
    """
    return _get_token_service().friendly_token(organization, type)


def validate(token: str) -> bool:
    """Return whether a string is a well-formed friendly token.

    Never raises.
    """
    return _get_token_service().validate(token)
