"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest

from cborredux import Encoder


@pytest.fixture
def encoder() -> Encoder:
    """Encoder with the default replacer and configuration."""
    return Encoder()


@pytest.fixture
def long_text() -> str:
    """ASCII text long enough to be chunked (300 bytes)."""
    return "a" * 300
