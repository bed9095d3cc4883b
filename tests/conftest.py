import pytest
from fastapi.testclient import TestClient
from mongomock_motor import AsyncMongoMockClient

from db.db_operation import mongo_conn
from main import app
from utils.jwt_handler import create_access_token


def make_headers(sub, role="owner", email=None):
    token = create_access_token({"sub": sub, "role": role, "email": email or f"{sub}@example.com"})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def client():
    # fresh in-memory database for every test
    mongo_conn.bind(AsyncMongoMockClient())
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def headers_for():
    return make_headers


@pytest.fixture
def owner_headers():
    return make_headers("owner-1")


@pytest.fixture
def other_owner_headers():
    return make_headers("owner-2")


@pytest.fixture
def admin_headers():
    return make_headers("admin-1", role="admin", email="admin@example.com")


@pytest.fixture
def restaurant(client, owner_headers):
    response = client.post(
        "/restaurants/me",
        json={"name": "Cafe Uno", "location": "Harbour Road 4", "contact": "555-0101", "is_public": True},
        headers=owner_headers,
    )
    assert response.status_code == 201, response.text
    return response.json()


@pytest.fixture
def add_section(client, owner_headers):
    def _add(name):
        response = client.post("/restaurants/me/menu/sections", json={"name": name}, headers=owner_headers)
        assert response.status_code == 201, response.text
        return response.json()
    return _add


@pytest.fixture
def add_item(client, owner_headers):
    def _add(section_id, **fields):
        response = client.post(
            f"/restaurants/me/menu/sections/{section_id}/items", json=fields, headers=owner_headers
        )
        assert response.status_code == 201, response.text
        return response.json()
    return _add
