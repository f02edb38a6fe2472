"""Representation of a friendly token and the requests that produce it."""

from __future__ import annotations

from typing import Self

from pydantic import BaseModel, ConfigDict, Field

from ..constants import (
    PAYLOAD_LENGTH,
    PREFIX_MAX_LENGTH,
    PREFIX_MIN_LENGTH,
    SEPARATOR,
    TOKEN_REGEX,
)
from ..exceptions import InvalidTokenError
from .enums import TokenKind

__all__ = [
    "CategorySelection",
    "ExampleTokens",
    "FriendlyToken",
    "NewToken",
    "TokenValidationRequest",
    "TokenValidationResult",
]


class FriendlyToken(BaseModel):
    """A friendly token.

    Notes
    -----
    A token consists of two parts: a short prefix that identifies what sort
    of token it is at a glance, and a random payload that is the actual
    secret. The serialized form joins the two with an underscore, giving
    strings such as ``adm_`` followed by 36 letters and digits.

    The format is context-free: whether a string is a well-formed token can
    be decided from the string alone.
    """

    model_config = ConfigDict(frozen=True)

    prefix: str = Field(
        ...,
        title="Prefix",
        description="Short category-derived identifier",
        pattern=f"^[A-Za-z0-9]{{{PREFIX_MIN_LENGTH},{PREFIX_MAX_LENGTH}}}$",
    )

    payload: str = Field(
        ...,
        title="Payload",
        description="Random secret portion of the token",
        pattern=f"^[A-Za-z0-9]{{{PAYLOAD_LENGTH}}}$",
    )

    @classmethod
    def from_str(cls, token: str) -> Self:
        """Parse a serialized token into a `FriendlyToken`.

        Parameters
        ----------
        token
            The serialized token.

        Returns
        -------
        FriendlyToken
            The decoded token.

        Raises
        ------
        InvalidTokenError
            The provided string is not a valid token.
        """
        if not isinstance(token, str):
            raise InvalidTokenError("Token is not a string")
        if SEPARATOR not in token:
            raise InvalidTokenError(f"Token does not contain {SEPARATOR}")
        prefix, payload = token.split(SEPARATOR, 1)
        if not PREFIX_MIN_LENGTH <= len(prefix) <= PREFIX_MAX_LENGTH:
            msg = (
                f"Token prefix must be {PREFIX_MIN_LENGTH} to"
                f" {PREFIX_MAX_LENGTH} characters"
            )
            raise InvalidTokenError(msg)
        if len(payload) != PAYLOAD_LENGTH:
            msg = f"Token payload must be {PAYLOAD_LENGTH} characters"
            raise InvalidTokenError(msg)
        if not TOKEN_REGEX.fullmatch(token):
            raise InvalidTokenError("Token contains invalid characters")
        return cls(prefix=prefix, payload=payload)

    @classmethod
    def is_token(cls, token: str) -> bool:
        """Determine if a string is a well-formed friendly token.

        Parameters
        ----------
        token
            The string to check.

        Returns
        -------
        bool
            Whether that string has the shape of a token. Nothing else about
            the token is checked.
        """
        if not isinstance(token, str):
            return False
        return TOKEN_REGEX.fullmatch(token) is not None

    def __str__(self) -> str:
        """Return the encoded token."""
        return f"{self.prefix}{SEPARATOR}{self.payload}"


class CategorySelection(BaseModel):
    """Organization and kind from which a token prefix is derived."""

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    organization: str | None = Field(
        None,
        title="Organization",
        description=(
            "Organization owning the token. Used for the prefix only if no"
            " type is given."
        ),
        examples=["test"],
    )

    kind: TokenKind | None = Field(
        None,
        title="Token type",
        description="Kind of token. Takes precedence over the organization.",
        alias="type",
        examples=[TokenKind.admin],
    )


class NewToken(BaseModel):
    """Response to a token creation request."""

    token: str = Field(
        ...,
        title="Token",
        examples=["adm_0Jc3qxm2ZB8NR7w4kLtnv9PHdYGu6TsAeEfV"],
    )


class ExampleTokens(BaseModel):
    """One token of each commonly used kind."""

    token_with_default_prefix: str = Field(
        ..., title="Token with no organization or type"
    )

    token_with_user_prefix: str = Field(
        ..., title="Token for organization test with type user"
    )

    token_with_admin_prefix: str = Field(..., title="Token with type admin")


class TokenValidationRequest(BaseModel):
    """Request to check whether a string is a well-formed token."""

    token: str = Field(..., title="Candidate token")


class TokenValidationResult(BaseModel):
    """Result of checking whether a string is a well-formed token."""

    valid: bool = Field(..., title="Whether the token is well-formed")
