# tests/test_profiles.py

from fastapi.testclient import TestClient


def _create_user(client: TestClient, username: str):
    res = client.post(
        "/api/users",
        json={"username": username, "email": f"{username}@accessmatch.io", "password": "secret123"},
    )
    assert res.status_code == 200, res.text
    return res.json()


def _create_profile(client: TestClient, user_id: int, name: str, **extra):
    payload = {
        "user_id": user_id,
        "name": name,
        "age": 30,
        "location": "Portland",
        "bio": f"Hi, I am {name}",
    }
    payload.update(extra)
    res = client.post("/api/profiles", json=payload)
    assert res.status_code == 200, res.text
    return res.json()


def test_create_profile_applies_defaults(client: TestClient):
    user = _create_user(client, "alice")
    profile = _create_profile(client, user["id"], "Alice")

    assert profile["user_id"] == user["id"]
    assert profile["interests"] == []
    assert profile["accessibility_needs"] == []
    assert profile["communication_preferences"] == []
    assert profile["photos"] == []
    assert profile["disability_type"] is None
    assert profile["is_active"] is True


def test_create_profile_for_unknown_user_returns_404(client: TestClient):
    res = client.post(
        "/api/profiles",
        json={"user_id": 42, "name": "Ghost", "age": 30, "location": "Nowhere", "bio": "..."},
    )
    assert res.status_code == 404


def test_create_profile_with_invalid_age_returns_400(client: TestClient):
    user = _create_user(client, "young")
    res = client.post(
        "/api/profiles",
        json={"user_id": user["id"], "name": "Young", "age": 12, "location": "X", "bio": "..."},
    )
    assert res.status_code == 400


def test_get_profile_by_id_and_by_user(client: TestClient):
    user = _create_user(client, "alice")
    profile = _create_profile(
        client,
        user["id"],
        "Alice",
        disability_type="visual",
        accessibility_needs=["screen reader"],
        communication_preferences=["text"],
    )

    res = client.get(f"/api/profiles/{profile['id']}")
    assert res.status_code == 200
    assert res.json()["accessibility_needs"] == ["screen reader"]

    res = client.get(f"/api/profiles/user/{user['id']}")
    assert res.status_code == 200
    assert res.json()["id"] == profile["id"]

    assert client.get("/api/profiles/999").status_code == 404
    assert client.get("/api/profiles/user/999").status_code == 404


def test_partial_update_only_touches_given_fields(client: TestClient):
    user = _create_user(client, "alice")
    profile = _create_profile(client, user["id"], "Alice", interests=["chess"])

    res = client.put(f"/api/profiles/{profile['id']}", json={"bio": "Updated bio"})
    assert res.status_code == 200
    body = res.json()
    assert body["bio"] == "Updated bio"
    assert body["name"] == "Alice"
    assert body["interests"] == ["chess"]

    assert client.put("/api/profiles/999", json={"bio": "x"}).status_code == 404


def test_list_profiles_excludes_user_and_inactive(client: TestClient):
    alice = _create_user(client, "alice")
    bob = _create_user(client, "bob")
    carol = _create_user(client, "carol")
    _create_profile(client, alice["id"], "Alice")
    bob_profile = _create_profile(client, bob["id"], "Bob")
    _create_profile(client, carol["id"], "Carol", is_active=False)

    res = client.get("/api/profiles", params={"exclude_user_id": alice["id"]})
    assert res.status_code == 200
    items = res.json()
    assert [p["id"] for p in items] == [bob_profile["id"]]
    assert items[0]["user"]["username"] == "bob"


def test_list_profiles_newest_first(client: TestClient):
    a = _create_profile(client, _create_user(client, "a")["id"], "A")
    b = _create_profile(client, _create_user(client, "b")["id"], "B")

    ids = [p["id"] for p in client.get("/api/profiles").json()]
    assert ids == [b["id"], a["id"]]


def test_search_matches_name_bio_and_location(client: TestClient):
    alice = _create_user(client, "alice")
    bob = _create_user(client, "bob")
    carol = _create_user(client, "carol")
    _create_profile(client, alice["id"], "Alice", location="Seattle")
    _create_profile(client, bob["id"], "Bob", bio="Loves SEATTLE coffee")
    _create_profile(client, carol["id"], "Carol", location="Denver")

    res = client.get("/api/profiles/search", params={"q": "seattle"})
    assert res.status_code == 200
    names = {p["name"] for p in res.json()}
    assert names == {"Alice", "Bob"}

    res = client.get("/api/profiles/search", params={"q": "seattle", "exclude_user_id": alice["id"]})
    assert {p["name"] for p in res.json()} == {"Bob"}


def test_search_requires_query(client: TestClient):
    res = client.get("/api/profiles/search")
    assert res.status_code == 400
    assert res.json()["detail"] == "Search query is required"


def test_profile_options_lists_setup_choices(client: TestClient):
    res = client.get("/api/profiles/options")
    assert res.status_code == 200
    body = res.json()
    assert "Hiking" in body["interests"]
    assert "Quiet environments" in body["accessibility_needs"]
    assert "Sign language (ASL)" in body["communication_preferences"]
    assert "Hearing" in body["disability_types"]


def test_update_can_clear_disability_type(client: TestClient):
    user = _create_user(client, "alice")
    profile = _create_profile(client, user["id"], "Alice", disability_type="Visual")

    res = client.put(f"/api/profiles/{profile['id']}", json={"disability_type": None, "name": None})
    assert res.status_code == 200
    assert res.json()["disability_type"] is None
    assert res.json()["name"] == "Alice"
