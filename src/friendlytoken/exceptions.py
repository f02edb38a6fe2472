"""Exceptions for friendlytoken."""

from __future__ import annotations

from safir.fastapi import ClientRequestError
from safir.models import ErrorLocation

__all__ = [
    "EntropyUnavailableError",
    "InputValidationError",
    "InvalidPrefixError",
    "InvalidTokenError",
    "UnrecognizedCategoryError",
]


class InputValidationError(ClientRequestError):
    """Represents an input validation error.

    This is a thin wrapper around `~safir.fastapi.ClientRequestError` so that
    all friendlytoken input errors share a common base class.
    """


class UnrecognizedCategoryError(InputValidationError):
    """The category selection cannot be mapped to a prefix.

    Raised for a token type outside the recognized set of kinds, or for an
    organization that contains too few letters and digits to form a prefix.
    """

    error = "unrecognized_category"

    def __init__(self, message: str, field: str = "type") -> None:
        super().__init__(message, ErrorLocation.body, [field])


class EntropyUnavailableError(Exception):
    """The secure random source could not produce data.

    This is fatal for the generation call that raised it and is not retried.
    """


class InvalidPrefixError(ValueError):
    """A prefix does not have the shape required of a token prefix."""


class InvalidTokenError(ValueError):
    """The provided string is not a well-formed token."""
