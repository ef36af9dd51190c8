"""Shared test fixtures for the animal API tests.

Every fixture builds its own ``AnimalStore`` so tests never share
state through the module‑level application.
"""

import pytest
from fastapi.testclient import TestClient

from animal_graphql_api.app.core.config import Settings
from animal_graphql_api.app.main import create_app
from animal_graphql_api.app.schemas.animal import AnimalCreate
from animal_graphql_api.app.services.animal_service import AnimalStore


FLUFFY = AnimalCreate(name="Fluffy", race="Abyssinian", type="Cat")
FLUFLU = AnimalCreate(name="Fluflu", race="Alaskan", type="Dog")


@pytest.fixture
def store() -> AnimalStore:
    return AnimalStore()


@pytest.fixture
def seeded_store(store: AnimalStore) -> AnimalStore:
    """Store holding Fluffy (id 1) and Fluflu (id 2)."""
    store.insert(FLUFFY)
    store.insert(FLUFLU)
    return store


@pytest.fixture
def client(store: AnimalStore):
    app = create_app(settings=Settings(), store=store)
    with TestClient(app) as c:
        yield c
