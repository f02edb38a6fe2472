"""Derivation of token prefixes from a category selection."""

from __future__ import annotations

from ..constants import DEFAULT_PREFIX, KIND_PREFIXES, PREFIX_MIN_LENGTH
from ..exceptions import UnrecognizedCategoryError
from ..models.enums import TokenKind
from ..models.token import CategorySelection
from ..util import normalize_organization

__all__ = ["PrefixResolver"]


class PrefixResolver:
    """Map an organization and token kind to a token prefix.

    The mapping is a pure function of its inputs. The kind, if given, always
    determines the prefix; the organization is only used when there is no
    kind; and with neither, the default prefix is used.
    """

    def resolve(
        self,
        organization: str | None = None,
        kind: TokenKind | str | None = None,
    ) -> str:
        """Determine the prefix for a token.

        Parameters
        ----------
        organization
            Organization owning the token, if any.
        kind
            Kind of token, if any, as either a `TokenKind` or its string
            value.

        Returns
        -------
        str
            The prefix, which is always 2 to 10 ASCII letters and digits.

        Raises
        ------
        UnrecognizedCategoryError
            Raised if the kind is not a recognized token kind, or if there is
            no kind and the organization has too few letters and digits to
            form a prefix.
        """
        if kind is not None:
            return KIND_PREFIXES[self._parse_kind(kind)]
        if organization is not None:
            prefix = normalize_organization(organization)
            if len(prefix) < PREFIX_MIN_LENGTH:
                msg = (
                    f"Organization {organization!r} must contain at least"
                    f" {PREFIX_MIN_LENGTH} letters or digits"
                )
                raise UnrecognizedCategoryError(msg, "organization")
            return prefix
        return DEFAULT_PREFIX

    def resolve_selection(self, selection: CategorySelection) -> str:
        """Determine the prefix for a token from a `CategorySelection`.

        Parameters
        ----------
        selection
            Organization and kind of the token.

        Returns
        -------
        str
            The prefix.

        Raises
        ------
        UnrecognizedCategoryError
            Raised if the organization cannot form a prefix.
        """
        return self.resolve(selection.organization, selection.kind)

    def _parse_kind(self, kind: TokenKind | str) -> TokenKind:
        if isinstance(kind, TokenKind):
            return kind
        try:
            return TokenKind(kind)
        except ValueError as e:
            valid = ", ".join(k.value for k in TokenKind)
            msg = f"Unknown token type {kind!r} (must be one of {valid})"
            raise UnrecognizedCategoryError(msg) from e
