from conftest import unique, create_user, login_headers

from app.services import user_service


def test_admin_lists_users_without_hashes(client, admin, player):
    resp = client.get("/users", headers=admin["headers"])

    assert resp.status_code == 200
    users = resp.json()
    assert {u["id"] for u in users} == {admin["id"], player["id"]}
    assert all("passwordHash" not in u for u in users)


def test_regular_user_cannot_list_users(client, player):
    assert client.get("/users", headers=player["headers"]).status_code == 403
    assert client.get(f"/users/{player['id']}", headers=player["headers"]).status_code == 403


def test_get_missing_user(client, admin):
    resp = client.get("/users/9999", headers=admin["headers"])
    assert resp.status_code == 404
    assert "9999" in resp.text


def test_user_updates_own_profile(client, player):
    resp = client.put(f"/users/{player['id']}", json={"extraInfo": "likes chess"}, headers=player["headers"])

    assert resp.status_code == 200, resp.text
    assert resp.json()["extraInfo"] == "likes chess"
    assert resp.json()["name"] == player["name"]


def test_user_cannot_update_someone_else(client, player, session_factory):
    other_id = create_user(session_factory, unique("other"))

    resp = client.put(f"/users/{other_id}", json={"extraInfo": "hacked"}, headers=player["headers"])
    assert resp.status_code == 403


def test_update_to_taken_name_or_email_conflicts(client, player, session_factory):
    other = unique("other")
    create_user(session_factory, other)

    by_name = client.put(f"/users/{player['id']}", json={"name": other.upper()}, headers=player["headers"])
    by_email = client.put(
        f"/users/{player['id']}", json={"email": f"{other}@example.com"}, headers=player["headers"]
    )

    assert by_name.status_code == 409
    assert by_email.status_code == 409


def test_admin_updates_any_user(client, admin, player):
    resp = client.put(
        f"/users/{player['id']}", json={"email": "NEW@example.com", "extraInfo": "vip"}, headers=admin["headers"]
    )

    assert resp.status_code == 200
    assert resp.json()["email"] == "new@example.com"


def test_promote_to_admin(client, admin, player):
    resp = client.put(f"/users/admin/{player['id']}", json={"extraInfo": "moderator"}, headers=admin["headers"])

    assert resp.status_code == 200
    assert resp.json()["role"] == "ROLE_ADMIN"
    assert resp.json()["extraInfo"] == "moderator"

    # Roles travel in the token, a fresh login picks up the promotion
    headers = login_headers(client, f"{player['name']}@example.com")
    assert client.get("/admin", headers=headers).status_code == 200


def test_only_admins_promote(client, player):
    resp = client.put(f"/users/admin/{player['id']}", json={}, headers=player["headers"])
    assert resp.status_code == 403


def test_delete_user(client, admin, session_factory):
    victim = create_user(session_factory, unique("victim"))

    resp = client.delete(f"/users/{victim}", headers=admin["headers"])
    assert resp.status_code == 200
    assert resp.json()["id"] == victim

    assert client.delete(f"/users/{victim}", headers=admin["headers"]).status_code == 404


def test_blank_name_is_rejected(client, player):
    resp = client.put(f"/users/{player['id']}", json={"name": "   "}, headers=player["headers"])
    assert resp.status_code == 422


def test_update_racing_a_duplicate_conflicts(client, player, session_factory, monkeypatch):
    other = unique("other")
    create_user(session_factory, other)
    # Skip the lookup so only the unique constraint catches the duplicate
    monkeypatch.setattr(user_service, "ensure_unique_identity", lambda *args, **kwargs: None)

    resp = client.put(f"/users/{player['id']}", json={"name": other}, headers=player["headers"])

    assert resp.status_code == 409
    assert client.get("/user", headers=player["headers"]).status_code == 200
