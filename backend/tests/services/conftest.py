"""Service test fixtures: FastAPI test client over a substitute catalog source.

Invariants:
    - get_catalog_source is overridden per test; no HTTP leaves the process
    - get_card_rng is seeded so card decorations are reproducible
    - app.state.catalog_source is restored after each test
"""

import random

import pytest
from httpx import ASGITransport, AsyncClient

from catalog.api.dependencies import get_card_rng, get_catalog_source
from catalog.main import app

from tests.services.fake_catalog import FakeCatalogSource


@pytest.fixture
def fake_source():
    return FakeCatalogSource()


@pytest.fixture
async def client(fake_source):
    """FastAPI test client with the catalog source overridden."""
    app.dependency_overrides[get_catalog_source] = lambda: fake_source
    app.dependency_overrides[get_card_rng] = lambda: random.Random(7)
    original = getattr(app.state, "catalog_source", None)
    app.state.catalog_source = fake_source

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    app.state.catalog_source = original
