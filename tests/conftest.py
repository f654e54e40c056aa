"""
Pytest fixtures for the resistor bands API.

`api/` is put on sys.path through `pythonpath` in pyproject.toml, so the
feature packages import the same way they do when the app runs.
"""

from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient


@pytest.fixture
def client() -> Generator[TestClient, None, None]:
    """TestClient bound to the real app (lifespan included)."""
    from main import app

    with TestClient(app) as test_client:
        yield test_client
