"""Create friendlytoken components."""

from __future__ import annotations

import logging
import random

import structlog
from structlog.stdlib import BoundLogger

from .services.codec import StructuredSecretCodec
from .services.prefix import PrefixResolver
from .services.token import TokenService

__all__ = ["Factory"]


class Factory:
    """Build friendlytoken components.

    Nothing here is global, so separate factories (with, for example,
    different random sources in tests) may coexist.

    Parameters
    ----------
    logger
        Logger to use for created components. Defaults to a logger wrapping
        the standard library ``friendlytoken`` logger, which is silent until
        logging has been configured.
    rng
        Random source for token payloads. Defaults to the operating system
        secure random source.
    """

    def __init__(
        self,
        logger: BoundLogger | None = None,
        rng: random.Random | None = None,
    ) -> None:
        if logger is None:
            logger = structlog.wrap_logger(
                logging.getLogger("friendlytoken"), wrapper_class=BoundLogger
            )
        self._logger = logger
        self._rng = rng

    def create_codec(self) -> StructuredSecretCodec:
        """Create a codec for generating and validating tokens."""
        return StructuredSecretCodec(self._rng)

    def create_prefix_resolver(self) -> PrefixResolver:
        """Create a resolver of token prefixes."""
        return PrefixResolver()

    def create_token_service(self) -> TokenService:
        """Create a service for issuing and checking tokens.

        Returns
        -------
        TokenService
            The newly-created token service.
        """
        return TokenService(
            prefix_resolver=self.create_prefix_resolver(),
            codec=self.create_codec(),
            logger=self._logger,
        )
