"""
Pytest configuration and fixtures for integration tests.
"""

import os
import sys
import tempfile
import pytest

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from fastapi.testclient import TestClient

from app.main import create_app
from app.store import ProductStore


@pytest.fixture(scope="function")
def db_path():
    """Path to a fresh temporary database file, removed after the test."""
    db_fd, path = tempfile.mkstemp(suffix=".db")
    os.close(db_fd)
    yield path
    os.unlink(path)


@pytest.fixture(scope="function")
def store(db_path):
    """An initialized product store on the temporary database."""
    product_store = ProductStore(db_path)
    product_store.initialize()
    yield product_store
    product_store.close()


@pytest.fixture(scope="function")
def client(store):
    """
    Create a test client backed by the temporary store.
    """
    app = create_app(store=store)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def sample_product_data():
    """Sample product body, with numbers sent as strings like a form would."""
    return {
        "name": "Widget",
        "price": "9.99",
        "quantity": "3",
        "description": "x",
    }
