# test/conftest.py
from types import SimpleNamespace

import mongomock
import pytest
from fastapi.testclient import TestClient

from config import Settings
from database.connection import ensure_indexes
from main import create_app

from helpers import SECRET, register


@pytest.fixture()
def settings() -> Settings:
    """Configuración mínima; nunca toca un Mongo real."""
    return Settings(
        ENV="development",
        MONGO_URI="mongodb://localhost:27017",
        MONGO_DB="taskmanager_test",
        JWT_SECRET=SECRET,
        COOKIE_SECURE="false",
        LOG_LEVEL="WARNING",
    )


@pytest.fixture()
def db():
    database = mongomock.MongoClient()["taskmanager_test"]
    ensure_indexes(database)
    return database


@pytest.fixture()
def app(settings, db):
    return create_app(settings, db=db)


@pytest.fixture()
def make_client(app):
    """Cada cliente tiene su propio cookie jar, o sea su propia sesión."""

    def _make() -> TestClient:
        return TestClient(app)

    return _make


@pytest.fixture()
def client(make_client) -> TestClient:
    return make_client()


@pytest.fixture()
def alice(make_client) -> SimpleNamespace:
    c = make_client()
    return SimpleNamespace(client=c, user=register(c, "alice@example.com", "Alice"))


@pytest.fixture()
def bob(make_client) -> SimpleNamespace:
    c = make_client()
    return SimpleNamespace(client=c, user=register(c, "bob@example.com", "Bob"))
