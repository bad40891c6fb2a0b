import pytest
from fastapi.testclient import TestClient

from echobot.main import create_app


@pytest.fixture()
def client():
    """TestClient over a freshly built application."""
    with TestClient(create_app()) as c:
        yield c
