"""Shared test fixtures for the dicer test suite.

async_client
    An httpx AsyncClient wired to the FastAPI app through ASGITransport.
    No network or server process is involved.

For tests of the engine itself (lexer, parser, dice), no fixture is needed;
randomness is pinned with seeded ``random.Random`` instances or the
``ScriptedRandom`` helper below.
"""

from __future__ import annotations

import random

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from dicer.main import app


class ScriptedRandom(random.Random):
    """A Random whose randint returns queued values, in order."""

    def __init__(self, values):
        super().__init__(0)
        self.values = list(values)

    def randint(self, a, b):
        value = self.values.pop(0)
        assert a <= value <= b, f"scripted value {value} outside {a}..={b}"
        return value


@pytest_asyncio.fixture
async def async_client():
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client


@pytest.fixture
def scripted_rng():
    """Factory for a Random that yields the given faces in order."""
    return ScriptedRandom
