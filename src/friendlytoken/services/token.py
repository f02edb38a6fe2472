"""Issue and check friendly tokens."""

from __future__ import annotations

from structlog.stdlib import BoundLogger

from ..models.enums import TokenKind
from ..models.token import CategorySelection, ExampleTokens
from .codec import StructuredSecretCodec
from .prefix import PrefixResolver

__all__ = ["TokenService"]


class TokenService:
    """Issue and check friendly tokens.

    Parameters
    ----------
    prefix_resolver
        Maps category selections to prefixes.
    codec
        Generates and validates tokens.
    logger
        Logger to use.
    """

    def __init__(
        self,
        *,
        prefix_resolver: PrefixResolver,
        codec: StructuredSecretCodec,
        logger: BoundLogger,
    ) -> None:
        self._resolver = prefix_resolver
        self._codec = codec
        self._logger = logger

    def create_token(self, selection: CategorySelection) -> str:
        """Create a new token for a category selection.

        Parameters
        ----------
        selection
            Organization and kind of the token.

        Returns
        -------
        str
            The new token.

        Raises
        ------
        EntropyUnavailableError
            Raised if the secure random source failed.
        UnrecognizedCategoryError
            Raised if the selection cannot be mapped to a prefix.
        """
        return self.friendly_token(selection.organization, selection.kind)

    def friendly_token(
        self,
        organization: str | None = None,
        kind: TokenKind | str | None = None,
    ) -> str:
        """Create a new token from an optional organization and kind.

        The kind may be given as a string, in which case an unknown value
        raises `~friendlytoken.exceptions.UnrecognizedCategoryError`.
        """
        prefix = self._resolver.resolve(organization, kind)
        token = self._codec.generate(prefix)
        self._logger.debug(
            "Created token",
            prefix=prefix,
            organization=organization,
            token_type=kind.value if isinstance(kind, TokenKind) else kind,
        )
        return token

    def create_example_tokens(self) -> ExampleTokens:
        """Create one token with each of the commonly used prefixes."""
        return ExampleTokens(
            token_with_default_prefix=self.friendly_token(),
            token_with_user_prefix=self.friendly_token(
                organization="test", kind=TokenKind.user
            ),
            token_with_admin_prefix=self.friendly_token(kind=TokenKind.admin),
        )

    def validate(self, candidate: str) -> bool:
        """Return whether a string is a well-formed token."""
        return self._codec.validate(candidate)
