"""Test configuration and shared fixtures"""

import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from todo_backend.api.main import create_app  # noqa: E402
from todo_backend.app.core.todo_store import TodoStore, reset_todo_store  # noqa: E402

BASE_URL = "http://testserver"


@pytest.fixture
def store():
    """Empty store whose urls resolve against the TestClient host"""
    return TodoStore(BASE_URL)


@pytest.fixture
def app(store):
    """App bound to the test store"""
    return create_app(store)


@pytest.fixture
def client(app):
    """HTTP client for the test app"""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def fresh_global_store():
    """Reset the process-wide store around a test"""
    reset_todo_store()
    yield
    reset_todo_store()

