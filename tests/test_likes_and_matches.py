# tests/test_likes_and_matches.py

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from app.core.exceptions import DuplicateLike
from app.models.like_db import like_crud
from app.models.like_db.like_crud import record_like
from app.models.like_db.like_db import Like
from app.models.user_db.user_db_crud import lock_users
from app.models.match_db.match_crud import create_match
from app.models.match_db.match_db import Match


def _create_member(client: TestClient, name: str):
    """User plus profile; returns the user id."""
    username = name.lower()
    res = client.post(
        "/api/users",
        json={"username": username, "email": f"{username}@accessmatch.io", "password": "secret123"},
    )
    assert res.status_code == 200, res.text
    user_id = res.json()["id"]

    res = client.post(
        "/api/profiles",
        json={"user_id": user_id, "name": name, "age": 29, "location": "Austin", "bio": f"{name}'s bio"},
    )
    assert res.status_code == 200, res.text
    return user_id


def _like(client: TestClient, sender_id: int, receiver_id: int):
    return client.post("/api/likes", json={"sender_id": sender_id, "receiver_id": receiver_id})


def _match_count(db: Session) -> int:
    return db.query(Match).count()


def test_like_is_recorded_and_listed(client: TestClient):
    alice = _create_member(client, "Alice")
    bob = _create_member(client, "Bob")

    res = _like(client, alice, bob)
    assert res.status_code == 200
    like = res.json()
    assert like["sender_id"] == alice
    assert like["receiver_id"] == bob

    res = client.get(f"/api/likes/{alice}")
    assert [item["id"] for item in res.json()] == [like["id"]]
    assert client.get(f"/api/likes/{bob}").json() == []


def test_second_like_for_same_pair_returns_409(client: TestClient):
    alice = _create_member(client, "Alice")
    bob = _create_member(client, "Bob")

    assert _like(client, alice, bob).status_code == 200
    res = _like(client, alice, bob)
    assert res.status_code == 409
    assert res.json()["detail"] == "Already liked this profile"


def test_record_like_raises_duplicate_like(client: TestClient, db: Session):
    alice = _create_member(client, "Alice")
    bob = _create_member(client, "Bob")

    record_like(db, alice, bob)
    with pytest.raises(DuplicateLike):
        record_like(db, alice, bob)


def test_self_like_returns_400(client: TestClient):
    alice = _create_member(client, "Alice")
    assert _like(client, alice, alice).status_code == 400


def test_like_unknown_user_returns_404(client: TestClient):
    alice = _create_member(client, "Alice")
    assert _like(client, alice, 999).status_code == 404


def test_one_sided_like_creates_no_match(client: TestClient, db: Session):
    alice = _create_member(client, "Alice")
    bob = _create_member(client, "Bob")

    _like(client, alice, bob)

    assert client.get(f"/api/matches/{alice}").json() == []
    assert client.get(f"/api/matches/{bob}").json() == []
    assert _match_count(db) == 0


@pytest.mark.parametrize("first,second", [("alice", "bob"), ("bob", "alice")])
def test_reciprocal_likes_create_exactly_one_match(client: TestClient, db: Session, first, second):
    ids = {"alice": _create_member(client, "Alice"), "bob": _create_member(client, "Bob")}

    _like(client, ids[first], ids[second])
    _like(client, ids[second], ids[first])
    # repeats are rejected and must not add matches either
    assert _like(client, ids[second], ids[first]).status_code == 409

    assert _match_count(db) == 1
    match = db.query(Match).one()
    assert {match.user_id_1, match.user_id_2} == {ids["alice"], ids["bob"]}


def test_like_response_does_not_carry_match(client: TestClient):
    alice = _create_member(client, "Alice")
    bob = _create_member(client, "Bob")

    _like(client, alice, bob)
    body = _like(client, bob, alice).json()
    assert set(body) == {"id", "sender_id", "receiver_id", "created_at"}


def test_mutual_match_is_visible_to_both_users(client: TestClient):
    alice = _create_member(client, "Alice")
    bob = _create_member(client, "Bob")

    _like(client, alice, bob)
    assert client.get(f"/api/matches/{alice}").json() == []

    _like(client, bob, alice)

    for me, other_name in ((alice, "Bob"), (bob, "Alice")):
        matches = client.get(f"/api/matches/{me}").json()
        assert len(matches) == 1
        entry = matches[0]
        profiles = {entry["profile1"]["name"], entry["profile2"]["name"]}
        assert profiles == {"Alice", "Bob"}
        other = entry["profile1"] if entry["profile1"]["name"] == other_name else entry["profile2"]
        assert other["bio"] == f"{other_name}'s bio"
        assert other["user"]["username"] == other_name.lower()


def test_create_match_twice_keeps_single_row(client: TestClient, db: Session):
    alice = _create_member(client, "Alice")
    bob = _create_member(client, "Bob")

    first = create_match(db, alice, bob)
    db.commit()
    second = create_match(db, bob, alice)
    db.commit()

    assert second.id == first.id
    assert _match_count(db) == 1


def test_matches_for_third_party_are_not_returned(client: TestClient):
    alice = _create_member(client, "Alice")
    bob = _create_member(client, "Bob")
    carol = _create_member(client, "Carol")

    _like(client, alice, bob)
    _like(client, bob, alice)

    assert client.get(f"/api/matches/{carol}").json() == []


def test_like_insert_conflict_maps_to_duplicate_like(client: TestClient, db: Session, monkeypatch):
    alice = _create_member(client, "Alice")
    bob = _create_member(client, "Bob")
    record_like(db, alice, bob)

    # the existence check misses once, as it would for a concurrent writer
    real_check_like = like_crud.check_like
    calls = []

    def check_like_missing_first(session, sender_id, receiver_id):
        calls.append((sender_id, receiver_id))
        if len(calls) == 1:
            return None
        return real_check_like(session, sender_id, receiver_id)

    monkeypatch.setattr(like_crud, "check_like", check_like_missing_first)

    with pytest.raises(DuplicateLike):
        like_crud.record_like(db, alice, bob)

    assert db.query(Like).count() == 1
    assert _match_count(db) == 0


def test_record_like_locks_both_users_before_reverse_check(client: TestClient, db: Session, monkeypatch):
    alice = _create_member(client, "Alice")
    bob = _create_member(client, "Bob")
    events = []
    real_lock_users = like_crud.lock_users
    real_check_like = like_crud.check_like

    def recording_lock(session, *user_ids):
        events.append(("lock", sorted(user_ids)))
        return real_lock_users(session, *user_ids)

    def recording_check(session, sender_id, receiver_id):
        events.append(("check", (sender_id, receiver_id)))
        return real_check_like(session, sender_id, receiver_id)

    monkeypatch.setattr(like_crud, "lock_users", recording_lock)
    monkeypatch.setattr(like_crud, "check_like", recording_check)

    like_crud.record_like(db, bob, alice)

    assert events[0] == ("lock", sorted([alice, bob]))
    assert ("check", (alice, bob)) in events[1:]


def test_lock_users_returns_rows_in_id_order(client: TestClient, db: Session):
    alice = _create_member(client, "Alice")
    bob = _create_member(client, "Bob")

    assert [u.id for u in lock_users(db, bob, alice)] == [alice, bob]
