import pytest
from fastapi.testclient import TestClient

from post_store_api.app.main import create_app


@pytest.fixture
def app():
    """A fresh application with an empty post store."""
    return create_app()


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def sample_post():
    """A valid post payload."""
    return {
        "title": "A",
        "image": "i",
        "description": "d",
        "category": "c",
        "comments": [],
    }


@pytest.fixture
def created_post(client, sample_post):
    resp = client.post("/posts/", json=sample_post)
    assert resp.status_code == 201
    return resp.json()
