"""Constants for friendlytoken."""

import re
import string

from .models.enums import TokenKind

__all__ = [
    "ALPHABET",
    "DEFAULT_PREFIX",
    "KIND_PREFIXES",
    "PAYLOAD_LENGTH",
    "PREFIX_MAX_LENGTH",
    "PREFIX_MIN_LENGTH",
    "PREFIX_REGEX",
    "SEPARATOR",
    "TOKEN_REGEX",
]

ALPHABET = string.ascii_letters + string.digits
"""Characters from which token payloads are drawn.

Only ASCII letters and digits are used. In particular the separator is never
part of the alphabet, so the first separator in a token always marks the end
of the prefix.
"""

DEFAULT_PREFIX = "dv"
"""Prefix used when neither an organization nor a kind is given."""

KIND_PREFIXES = {
    TokenKind.default: DEFAULT_PREFIX,
    TokenKind.user: "usr",
    TokenKind.admin: "adm",
}
"""Prefix for each kind of token."""

PAYLOAD_LENGTH = 36
"""Number of random characters in the payload of a token."""

PREFIX_MAX_LENGTH = 10
"""Maximum length of a token prefix."""

PREFIX_MIN_LENGTH = 2
"""Minimum length of a token prefix."""

SEPARATOR = "_"
"""Character separating the prefix from the payload."""

PREFIX_REGEX = re.compile(
    f"[A-Za-z0-9]{{{PREFIX_MIN_LENGTH},{PREFIX_MAX_LENGTH}}}"
)
"""Regex matching a valid prefix. Use with `re.Pattern.fullmatch`."""

TOKEN_REGEX = re.compile(
    f"(?P<prefix>[A-Za-z0-9]{{{PREFIX_MIN_LENGTH},{PREFIX_MAX_LENGTH}}})"
    f"{re.escape(SEPARATOR)}"
    f"(?P<payload>[A-Za-z0-9]{{{PAYLOAD_LENGTH}}})"
)
"""Regex matching a serialized token. Use with `re.Pattern.fullmatch`.

``[A-Za-z0-9]`` is spelled out rather than using ``\\w``, since in Python
``\\w`` matches the underscore separator and non-ASCII word characters.
"""
