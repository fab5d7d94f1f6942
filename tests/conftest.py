"""Pytest configuration and shared fixtures."""

from unittest.mock import MagicMock

import mongomock
import pytest

from hammer import create_app
from hammer.config import Config
from hammer.database import Database
from hammer.extensions import get_services


class TestingConfig(Config):
    TESTING = True
    ACCESS_TOKEN = "test-secret"
    TOKEN_TTL_SECONDS = 3600
    DATABASE_NAME = "HAMMER"
    KEY_ID = None
    KEY_SECRET = None


@pytest.fixture
def database():
    with Database(name="HAMMER", client=mongomock.MongoClient()) as db:
        yield db


@pytest.fixture
def payment_client():
    client = MagicMock()
    client.order.create.return_value = {"id": "order_123", "amount": 0, "currency": "USD"}
    return client


@pytest.fixture
def app(database, payment_client):
    return create_app(TestingConfig, database=database, payment_client=payment_client)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def services(app):
    return get_services(app)


@pytest.fixture
def auth_header(services):
    def make(email):
        return {"Authorization": f"Bearer {services.tokens.issue(email)}"}
    return make


@pytest.fixture
def admin_header(services, auth_header):
    services.identities.upsert("admin@x.com", {"role": "admin"})
    return auth_header("admin@x.com")
