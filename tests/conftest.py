"""Shared pytest fixtures and test utilities for DocQL tests."""

from typing import Generator

import pytest
from fastapi.testclient import TestClient

from docql.http_api import app
from docql.services.document_service import DocumentService
from docql.storage.database import Database, get_db, init_db, reset_db


@pytest.fixture(scope="function")
def temp_db() -> Generator[Database, None, None]:
    """
    Create a fresh in-memory store holding the three seed documents.

    Yields:
        Database instance with tables created and seeded
    """
    database = init_db(Database("sqlite://"), seed=True)

    yield database

    database.drop_tables()
    database.dispose()


@pytest.fixture
def empty_db() -> Generator[Database, None, None]:
    """Create an in-memory store with no documents."""
    database = init_db(Database("sqlite://"), seed=False)

    yield database

    database.drop_tables()
    database.dispose()


@pytest.fixture
def db_session(temp_db):
    """Get a database session from temp_db."""
    with temp_db.session() as session:
        yield session


@pytest.fixture
def document_service(temp_db):
    """Create a document service instance."""
    with temp_db.session() as session:
        yield DocumentService(session)


@pytest.fixture
def client() -> Generator[TestClient, None, None]:
    """HTTP client bound to a freshly seeded global store."""
    reset_db()
    get_db("sqlite://")
    with TestClient(app) as test_client:
        yield test_client
    reset_db()


class AssertionHelpers:
    """Helper functions for test assertions."""

    @staticmethod
    def assert_zero_document(payload: dict):
        """Assert a GraphQL payload is the zero-value document."""
        assert payload == {"id": 0, "name": "", "file": ""}

    @staticmethod
    def names(documents: list[dict]) -> list[str]:
        return [doc["name"] for doc in documents]


@pytest.fixture
def assertion_helpers():
    """Provide AssertionHelpers instance."""
    return AssertionHelpers
