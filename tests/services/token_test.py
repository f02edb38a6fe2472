"""Tests for the token service."""

from __future__ import annotations

import re
from concurrent.futures import ThreadPoolExecutor

import pytest
import structlog
from structlog.testing import capture_logs

from friendlytoken.exceptions import (
    EntropyUnavailableError,
    UnrecognizedCategoryError,
)
from friendlytoken.factory import Factory
from friendlytoken.models.enums import TokenKind
from friendlytoken.models.token import CategorySelection

from ..support.constants import TOKEN_PATTERN
from ..support.entropy import BrokenRandom


def test_friendly_token(factory: Factory) -> None:
    token_service = factory.create_token_service()

    token = token_service.friendly_token()
    assert re.match(TOKEN_PATTERN, token)
    assert token.startswith("dv_")

    assert token_service.friendly_token(kind=TokenKind.admin).startswith(
        "adm_"
    )
    assert token_service.friendly_token(kind="user").startswith("usr_")
    assert token_service.friendly_token("Acme").startswith("acme_")


def test_prefix_dominance(factory: Factory) -> None:
    token_service = factory.create_token_service()
    with_org = token_service.friendly_token("test", TokenKind.user)
    without_org = token_service.friendly_token(kind=TokenKind.user)
    assert with_org.split("_")[0] == without_org.split("_")[0]
    assert with_org != without_org


def test_round_trip(factory: Factory) -> None:
    token_service = factory.create_token_service()
    organizations = [None, "test", "Acme Corp.", "a" * 40]
    kinds: list[TokenKind | None] = [None, *TokenKind]
    for organization in organizations:
        for kind in kinds:
            selection = CategorySelection(organization=organization, kind=kind)
            token = token_service.create_token(selection)
            assert token_service.validate(token), token


def test_unique(factory: Factory) -> None:
    token_service = factory.create_token_service()
    tokens = {token_service.friendly_token() for _ in range(1000)}
    assert len(tokens) == 1000


def test_errors() -> None:
    token_service = Factory().create_token_service()
    with pytest.raises(UnrecognizedCategoryError):
        token_service.friendly_token(kind="superuser")
    with pytest.raises(UnrecognizedCategoryError):
        token_service.create_token(CategorySelection(organization="?"))

    token_service = Factory(rng=BrokenRandom()).create_token_service()
    with pytest.raises(EntropyUnavailableError):
        token_service.friendly_token()


def test_example_tokens(factory: Factory) -> None:
    token_service = factory.create_token_service()
    examples = token_service.create_example_tokens()
    assert examples.token_with_default_prefix.startswith("dv_")
    assert examples.token_with_user_prefix.startswith("usr_")
    assert examples.token_with_admin_prefix.startswith("adm_")
    for token in examples.model_dump().values():
        assert token_service.validate(token)


def test_logging() -> None:
    logger = structlog.get_logger("friendlytoken")
    token_service = Factory(logger).create_token_service()
    with capture_logs() as logs:
        token = token_service.create_token(
            CategorySelection(organization="test", kind=TokenKind.admin)
        )
    assert logs == [
        {
            "event": "Created token",
            "log_level": "debug",
            "organization": "test",
            "prefix": "adm",
            "token_type": "admin",
        }
    ]
    payload = token.split("_")[1]
    assert payload not in str(logs)


def test_concurrent_use(factory: Factory) -> None:
    token_service = factory.create_token_service()
    kinds = [None, *TokenKind]

    def create(n: int) -> str:
        return token_service.friendly_token("test", kinds[n % len(kinds)])

    with ThreadPoolExecutor(max_workers=16) as executor:
        tokens = list(executor.map(create, range(2000)))
    assert len(set(tokens)) == 2000
    for token in tokens:
        assert token_service.validate(token), token


def test_logging_from_string_kind() -> None:
    logger = structlog.get_logger("friendlytoken")
    token_service = Factory(logger).create_token_service()
    with capture_logs() as logs:
        token_service.friendly_token(kind="user")
    assert logs == [
        {
            "event": "Created token",
            "log_level": "debug",
            "organization": None,
            "prefix": "usr",
            "token_type": "user",
        }
    ]

