from conftest import unique

from app.repositories.game_repository import GameRepository

CHESS = {"title": "Chess", "genre": "Strategy", "platforms": ["PC"], "amountOfPlayers": 2}


def _create(client, headers, **overrides):
    return client.post("/games", json={**CHESS, **overrides}, headers=headers)


def test_admin_creates_game(client, admin):
    resp = _create(client, admin["headers"])

    assert resp.status_code == 201, resp.text
    body = resp.json()
    assert body["title"] == "Chess"
    assert body["platforms"] == ["PC"]
    assert body["amountOfPlayers"] == 2


def test_duplicate_title_conflicts(client, admin):
    assert _create(client, admin["headers"]).status_code == 201

    resp = _create(client, admin["headers"], title="chess")
    assert resp.status_code == 409
    assert "chess" in resp.text.lower()
    assert len(client.get("/games").json()) == 1


def test_regular_user_cannot_create_game(client, player):
    assert _create(client, player["headers"]).status_code == 403


def test_anonymous_cannot_create_game(client):
    assert client.post("/games", json=CHESS).status_code == 401


def test_game_validation(client, admin):
    assert _create(client, admin["headers"], platforms=[]).status_code == 422
    assert _create(client, admin["headers"], amountOfPlayers=0).status_code == 422
    assert _create(client, admin["headers"], title="  ").status_code == 422


def test_get_game_by_id_and_title(client, admin):
    game_id = _create(client, admin["headers"]).json()["id"]

    assert client.get(f"/games/{game_id}").json()["title"] == "Chess"
    assert client.get("/games", params={"title": "CHESS"}).json()["id"] == game_id


def test_missing_game_is_not_found(client):
    resp = client.get("/games/999")
    assert resp.status_code == 404
    assert "999" in resp.text

    assert client.get("/games", params={"title": "Nope"}).status_code == 404


def test_update_replaces_all_fields(client, admin):
    game_id = _create(client, admin["headers"], description="classic").json()["id"]

    resp = client.put(
        f"/games/{game_id}",
        json={"title": "Chess 960", "genre": "Board", "platforms": ["PC", "Mobile"], "amountOfPlayers": 2},
        headers=admin["headers"],
    )

    assert resp.status_code == 200, resp.text
    body = resp.json()
    assert body["title"] == "Chess 960"
    assert body["description"] is None
    assert sorted(body["platforms"]) == ["Mobile", "PC"]


def test_update_missing_game(client, admin):
    resp = client.put("/games/42", json=CHESS, headers=admin["headers"])
    assert resp.status_code == 404


def test_update_to_taken_title_conflicts(client, admin):
    _create(client, admin["headers"])
    other_id = _create(client, admin["headers"], title="Go").json()["id"]

    resp = client.put(f"/games/{other_id}", json=CHESS, headers=admin["headers"])
    assert resp.status_code == 409


def test_delete_game(client, admin):
    game_id = _create(client, admin["headers"]).json()["id"]

    resp = client.delete(f"/games/{game_id}", headers=admin["headers"])
    assert resp.status_code == 200
    assert resp.json()["title"] == "Chess"

    assert client.get(f"/games/{game_id}").status_code == 404
    assert client.delete(f"/games/{game_id}", headers=admin["headers"]).status_code == 404


def test_scheduled_game_cannot_be_deleted(client, admin):
    game_id = _create(client, admin["headers"]).json()["id"]
    schedule = {
        "scheduleName": unique("session"),
        "game": {"id": game_id},
        "startTime": "2030-01-01T20:00:00",
        "amountOfPlayers": 2,
    }
    assert client.post("/schedules", json=schedule, headers=admin["headers"]).status_code == 201

    resp = client.delete(f"/games/{game_id}", headers=admin["headers"])
    assert resp.status_code == 409
    assert client.get(f"/games/{game_id}").status_code == 200


def test_update_racing_a_duplicate_title_conflicts(client, admin, monkeypatch):
    _create(client, admin["headers"])
    other_id = _create(client, admin["headers"], title="Go").json()["id"]
    # Skip the lookup so only the unique constraint catches the duplicate
    monkeypatch.setattr(GameRepository, "get_by_title", staticmethod(lambda db, title: None))

    resp = client.put(f"/games/{other_id}", json=CHESS, headers=admin["headers"])

    assert resp.status_code == 409
    assert client.get(f"/games/{other_id}").json()["title"] == "Go"
