"""Encoding and validation of friendly tokens."""

from __future__ import annotations

import random
import secrets

from ..constants import PAYLOAD_LENGTH, PREFIX_REGEX
from ..exceptions import InvalidPrefixError
from ..models.token import FriendlyToken
from ..util import random_payload

__all__ = ["StructuredSecretCodec"]


class StructuredSecretCodec:
    """Generate and recognize friendly tokens.

    Holds no state other than the random source, so a single instance may be
    shared freely between concurrent callers.

    Parameters
    ----------
    rng
        Source of randomness for token payloads. Defaults to
        `secrets.SystemRandom`, which reads from :py:func:`os.urandom` and is
        safe to use from multiple threads. Only tests should override this.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else secrets.SystemRandom()

    def generate(self, prefix: str) -> str:
        """Generate a new serialized token.

        Parameters
        ----------
        prefix
            Prefix for the token, normally from
            `~friendlytoken.services.prefix.PrefixResolver`.

        Returns
        -------
        str
            The new token.

        Raises
        ------
        EntropyUnavailableError
            Raised if the secure random source failed.
        InvalidPrefixError
            Raised if the prefix is not 2 to 10 letters and digits.
        """
        return str(self.generate_token(prefix))

    def generate_token(self, prefix: str) -> FriendlyToken:
        """Generate a new token.

        Identical to `generate` except that it returns the parsed model.
        """
        if not PREFIX_REGEX.fullmatch(prefix):
            raise InvalidPrefixError(f"Invalid token prefix {prefix!r}")
        payload = random_payload(PAYLOAD_LENGTH, self._rng)
        return FriendlyToken(prefix=prefix, payload=payload)

    def parse(self, candidate: str) -> FriendlyToken:
        """Parse a serialized token.

        Parameters
        ----------
        candidate
            String that may be a token.

        Returns
        -------
        FriendlyToken
            The parsed token.

        Raises
        ------
        InvalidTokenError
            Raised if the string is not a well-formed token, with a message
            saying why.
        """
        return FriendlyToken.from_str(candidate)

    def validate(self, candidate: str) -> bool:
        """Check whether a string is a well-formed token.

        Never raises. Anything other than a complete, exactly-shaped token,
        including one with surrounding whitespace, is rejected.

        Parameters
        ----------
        candidate
            String that may be a token.

        Returns
        -------
        bool
            Whether the string is a well-formed token.
        """
        return FriendlyToken.is_token(candidate)
