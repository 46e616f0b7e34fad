"""Shared pytest fixtures: isolated document stores and an app client bound to them."""

import os
import sys

import pytest
from fastapi.testclient import TestClient

# Ensure project root is on sys.path so that
# imports like `from services...` resolve.
CURRENT_DIR = os.path.dirname(__file__)
PROJECT_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, ".."))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from infrastructure.document_store import InMemoryDocumentStore  # noqa: E402
from main import app  # noqa: E402
from services.factory import get_document_store  # noqa: E402


@pytest.fixture
def store() -> InMemoryDocumentStore:
    """Fresh, empty store per test."""
    return InMemoryDocumentStore()


@pytest.fixture
def client(store):
    """TestClient whose requests all share the per-test store."""
    app.dependency_overrides[get_document_store] = lambda: store
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()

