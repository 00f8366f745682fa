"""Shared test fixtures for the mime_encoders test suite.

WHY: Most test modules need a Chicken encoder, the full range of byte
values, and a way to force the lazily built token table to be rebuilt.
Centralizing them keeps the tests short and consistent.

HOW: Plain pytest fixtures. fresh_token_table uses monkeypatch so the
module-level table is restored after each test.

RULES:
- Encoders are created per test (no shared instances)
- Tests that depend on first-use behaviour must use fresh_token_table
"""

import pytest

from mime_encoders.encoders import chicken
from mime_encoders.encoders.chicken import ChickenEncoder


@pytest.fixture
def chicken_encoder():
    """A new ChickenEncoder."""
    return ChickenEncoder()


@pytest.fixture
def all_bytes():
    """Every byte value 0x00..0xFF in ascending order."""
    return bytes(range(256))


@pytest.fixture
def fresh_token_table(monkeypatch):
    """Clear the shared token table so the next use rebuilds it."""
    monkeypatch.setattr(chicken, "_table", None)
    return chicken
