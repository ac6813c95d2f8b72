"""Shared fixtures: fresh stores and apps for every test."""

import pytest
from fastapi.testclient import TestClient

from marketplace_api.app.core.seed import seed_sample_data
from marketplace_api.app.core.storage import EntityStore
from marketplace_api.app.main import create_app


@pytest.fixture
def store() -> EntityStore:
    return EntityStore()


@pytest.fixture
def seeded_store() -> EntityStore:
    store = EntityStore()
    seed_sample_data(store)
    return store


@pytest.fixture
def client(store) -> TestClient:
    return TestClient(create_app(storage=store))


@pytest.fixture
def seeded_client(seeded_store) -> TestClient:
    return TestClient(create_app(storage=seeded_store))
