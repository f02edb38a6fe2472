"""Tests for the friendlytoken.util package."""

from __future__ import annotations

import random

import pytest

from friendlytoken.constants import ALPHABET
from friendlytoken.exceptions import EntropyUnavailableError
from friendlytoken.util import normalize_organization, random_payload

from .support.entropy import BrokenRandom


def test_normalize_organization() -> None:
    assert normalize_organization("test") == "test"
    assert normalize_organization("TeSt") == "test"
    assert normalize_organization("Acme, Inc.") == "acmeinc"
    assert normalize_organization("über") == "ber"
    assert normalize_organization("abcdefghijklmnop") == "abcdefghij"
    assert normalize_organization("") == ""
    assert normalize_organization("--") == ""


def test_random_payload() -> None:
    payload = random_payload(36, random.SystemRandom())
    assert len(payload) == 36
    assert set(payload) <= set(ALPHABET)
    assert random_payload(0, random.SystemRandom()) == ""

    # With enough draws every character of the alphabet should show up.
    payload = random_payload(10000, random.Random(1))
    assert set(payload) == set(ALPHABET)


def test_random_payload_failure() -> None:
    with pytest.raises(EntropyUnavailableError):
        random_payload(36, BrokenRandom())
