from settings.config import settings
from utils.jwt_handler import create_access_token


def test_health(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_requests_without_token_are_rejected(client):
    assert client.get("/restaurants/me").status_code == 401


def test_invalid_token_is_rejected(client):
    response = client.get("/restaurants/me", headers={"Authorization": "Bearer not-a-jwt"})
    assert response.status_code == 401


def test_expired_token_is_rejected(client, restaurant):
    token = create_access_token({"sub": "owner-1", "role": "owner"}, expires_minutes=-1)
    response = client.get("/restaurants/me", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 401


def test_token_audience_is_checked_when_configured(client, restaurant, monkeypatch):
    monkeypatch.setattr(settings, "JWT_AUDIENCE", "menu-publisher")
    wrong = create_access_token({"sub": "owner-1", "role": "owner", "aud": "billing"})
    response = client.get("/restaurants/me", headers={"Authorization": f"Bearer {wrong}"})
    assert response.status_code == 401

    right = create_access_token({"sub": "owner-1", "role": "owner"})
    response = client.get("/restaurants/me", headers={"Authorization": f"Bearer {right}"})
    assert response.status_code == 200


def test_admin_cannot_use_owner_routes(client, admin_headers):
    assert client.get("/restaurants/me", headers=admin_headers).status_code == 403


def test_missing_profile_is_reported(client, owner_headers):
    response = client.get("/restaurants/me", headers=owner_headers)
    assert response.status_code == 404
    assert "complete your restaurant profile" in response.json()["detail"]


def test_create_restaurant_defaults(client, restaurant):
    assert restaurant["owner_id"] == "owner-1"
    assert restaurant["owner_email"] == "owner-1@example.com"
    assert restaurant["slug"] == "cafe-uno"
    assert restaurant["is_public"] is True
    assert restaurant["is_blocked"] is False
    assert restaurant["menu_sections"] == []
    assert restaurant["theme"] is None
    assert restaurant["version"] == 0
    assert restaurant["share_url"].endswith(f"/menu/{restaurant['id']}")


def test_one_restaurant_per_owner(client, owner_headers, restaurant):
    response = client.post("/restaurants/me", json={"name": "Second Place"}, headers=owner_headers)
    assert response.status_code == 409


def test_slug_must_be_unique(client, restaurant, other_owner_headers):
    response = client.post("/restaurants/me", json={"name": "CAFE  uno!"}, headers=other_owner_headers)
    assert response.status_code == 409


def test_name_is_required(client, owner_headers):
    response = client.post("/restaurants/me", json={"name": "A"}, headers=owner_headers)
    assert response.status_code == 422


def test_update_profile_and_visibility(client, owner_headers, restaurant):
    response = client.patch(
        "/restaurants/me",
        json={"name": "Cafe Due", "description": "Now with pasta", "is_public": False},
        headers=owner_headers,
    )
    assert response.status_code == 200
    body = response.json()
    assert body["name"] == "Cafe Due"
    assert body["slug"] == "cafe-due"
    assert body["description"] == "Now with pasta"
    assert body["is_public"] is False
    # untouched fields keep their value
    assert body["location"] == "Harbour Road 4"


def test_profile_update_keeps_menu_version(client, owner_headers, restaurant, add_section):
    add_section("Starters")
    client.patch("/restaurants/me", json={"contact": "555-0199"}, headers=owner_headers)
    menu = client.get("/restaurants/me/menu", headers=owner_headers).json()
    assert menu["version"] == 1
    assert [s["name"] for s in menu["sections"]] == ["Starters"]


def test_rename_to_taken_name_conflicts(client, restaurant, other_owner_headers):
    client.post("/restaurants/me", json={"name": "Bistro Two"}, headers=other_owner_headers)
    response = client.patch("/restaurants/me", json={"name": "Cafe Uno"}, headers=other_owner_headers)
    assert response.status_code == 409


def test_owners_only_see_their_own_restaurant(client, restaurant, headers_for):
    other = headers_for("owner-3")
    assert client.get("/restaurants/me", headers=other).status_code == 404


def test_dashboard(client, owner_headers, restaurant, add_section, add_item):
    menu = add_section("Main Courses")
    section_id = menu["sections"][0]["id"]
    add_item(section_id, name="Risotto", price=14)
    add_item(section_id, name="Lasagne", price=12)
    add_section("Drinks")

    response = client.get("/restaurants/me/dashboard", headers=owner_headers)
    assert response.status_code == 200
    stats = response.json()
    assert stats["sections_count"] == 2
    assert stats["items_count"] == 2
    assert stats["status"] == "Public"
    assert stats["qr_scans"] == 0
    assert stats["chart"] == [{"name": "Main Cours...", "items": 2}, {"name": "Drinks", "items": 0}]
    assert stats["share_url"] == restaurant["share_url"]
