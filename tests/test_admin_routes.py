from pymongo.errors import PyMongoError

from routes import admin_routes


def test_admin_routes_require_admin_role(client, owner_headers, restaurant):
    assert client.get("/admin/restaurants").status_code == 401
    assert client.get("/admin/restaurants", headers=owner_headers).status_code == 403


def test_list_restaurants(client, admin_headers, restaurant, other_owner_headers):
    client.post("/restaurants/me", json={"name": "Noodle Bar"}, headers=other_owner_headers)
    listed = client.get("/admin/restaurants", headers=admin_headers).json()
    # newest first
    assert [r["name"] for r in listed] == ["Noodle Bar", "Cafe Uno"]
    assert set(listed[0]) == {"id", "name", "location", "owner_email", "is_public", "is_blocked"}

    public_only = client.get("/admin/restaurants", params={"is_public": True}, headers=admin_headers).json()
    assert [r["name"] for r in public_only] == ["Cafe Uno"]


def test_block_and_unblock(client, admin_headers, owner_headers, restaurant):
    rid = restaurant["id"]
    response = client.post(f"/admin/restaurants/{rid}/block", json={"reason": "reported"}, headers=admin_headers)
    assert response.status_code == 200
    assert response.json()["is_blocked"] is True

    blocked = client.get("/admin/restaurants", params={"is_blocked": True}, headers=admin_headers).json()
    assert [r["id"] for r in blocked] == [rid]
    # the owner keeps editing access while blocked
    assert client.get("/restaurants/me/menu", headers=owner_headers).status_code == 200

    response = client.post(f"/admin/restaurants/{rid}/unblock", headers=admin_headers)
    assert response.json()["is_blocked"] is False
    assert client.get(f"/menu/{rid}").status_code == 200

    logs = client.get("/admin/audit-logs", params={"restaurant_id": rid}, headers=admin_headers).json()
    actions = [entry["action"] for entry in logs]
    assert actions[:2] == ["unblock_restaurant", "block_restaurant"]
    block = logs[1]
    assert block["before"] == {"is_blocked": False}
    assert block["after"] == {"is_blocked": True}
    assert block["reason"] == "reported"
    assert block["actor_email"] == "admin@example.com"


def test_block_unknown_or_invalid_id(client, admin_headers):
    assert client.post("/admin/restaurants/64b000000000000000000000/block", headers=admin_headers).status_code == 404
    assert client.post("/admin/restaurants/not-an-id/block", headers=admin_headers).status_code == 400


def test_admin_get_and_edit_restaurant(client, admin_headers, restaurant):
    rid = restaurant["id"]
    assert client.get(f"/admin/restaurants/{rid}", headers=admin_headers).json()["name"] == "Cafe Uno"
    assert client.get("/admin/restaurants/64b000000000000000000000", headers=admin_headers).status_code == 404

    response = client.patch(f"/admin/restaurants/{rid}", json={"is_public": False}, headers=admin_headers)
    assert response.status_code == 200
    assert response.json()["is_public"] is False


def test_admin_menu_save_uses_version(client, admin_headers, owner_headers, restaurant, add_section):
    rid = restaurant["id"]
    add_section("Starters")
    stale = client.put(f"/admin/restaurants/{rid}/menu", json={"version": 0, "sections": []}, headers=admin_headers)
    assert stale.status_code == 409

    response = client.put(
        f"/admin/restaurants/{rid}/menu",
        json={"version": 1, "sections": [{"name": "Approved Starters"}]},
        headers=admin_headers,
    )
    assert response.status_code == 200
    assert response.json()["version"] == 2
    menu = client.get("/restaurants/me/menu", headers=owner_headers).json()
    assert [s["name"] for s in menu["sections"]] == ["Approved Starters"]


def test_database_failure_is_reported(client, admin_headers, monkeypatch):
    async def unavailable(*args, **kwargs):
        raise PyMongoError("connection reset")

    monkeypatch.setattr(admin_routes, "list_restaurants", unavailable)
    monkeypatch.setattr(admin_routes, "list_audit_logs", unavailable)
    for url in ("/admin/restaurants", "/admin/audit-logs"):
        response = client.get(url, headers=admin_headers)
        assert response.status_code == 500
        assert response.json()["detail"] == "Database error"
