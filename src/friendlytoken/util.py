"""General utility functions."""

from __future__ import annotations

import random
import re

from .constants import ALPHABET, PREFIX_MAX_LENGTH
from .exceptions import EntropyUnavailableError

__all__ = [
    "normalize_organization",
    "random_payload",
]


def normalize_organization(organization: str) -> str:
    """Reduce an organization name to a candidate prefix.

    Parameters
    ----------
    organization
        Free-form organization name.

    Returns
    -------
    str
        The organization lowercased, with everything but ASCII letters and
        digits removed, and truncated to the maximum prefix length. The
        result may be shorter than the minimum prefix length and the caller
        must check.
    """
    normalized = re.sub(r"[^a-z0-9]", "", organization.lower())
    return normalized[:PREFIX_MAX_LENGTH]


def random_payload(length: int, rng: random.Random) -> str:
    """Generate a random string drawn uniformly from the token alphabet.

    Parameters
    ----------
    length
        Number of characters to generate.
    rng
        Random source. This should be a `secrets.SystemRandom` except in
        tests.

    Returns
    -------
    str
        The random string.

    Raises
    ------
    EntropyUnavailableError
        Raised if the random source failed.
    """
    try:
        return "".join(rng.choice(ALPHABET) for _ in range(length))
    except (NotImplementedError, OSError) as e:
        msg = f"Secure random source unavailable: {e!s}"
        raise EntropyUnavailableError(msg) from e
