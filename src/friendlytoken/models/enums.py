"""Enums used in friendlytoken models.

Notes
-----
These are kept in a separate module so that the constants module can refer to
them without importing the token models.
"""

from __future__ import annotations

from enum import Enum

__all__ = ["TokenKind"]


class TokenKind(Enum):
    """The kind of token, which determines its prefix."""

    default = "default"
    """A general-purpose token with the default prefix."""

    user = "user"
    """A token issued to a regular user."""

    admin = "admin"
    """A token issued to an administrator."""
