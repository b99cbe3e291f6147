import uuid

import pytest

from tests.helpers import bearer


@pytest.fixture
def author(login):
    return login()


def _post(client, token, body):
    return client.post("/api/chirps", json={"body": body}, headers=bearer(token))


def test_create_chirp(client, author):
    resp = _post(client, author["token"], "I had something interesting for breakfast")

    assert resp.status_code == 201
    chirp = resp.get_json()
    assert chirp["body"] == "I had something interesting for breakfast"
    assert chirp["user_id"] == author["id"]
    assert uuid.UUID(chirp["id"])


def test_create_chirp_masks_profanity(client, author):
    resp = _post(client, author["token"], "This is a kerfuffle opinion I need to share with the world")
    assert resp.get_json()["body"] == "This is a **** opinion I need to share with the world"


def test_create_chirp_too_long(client, author):
    resp = _post(client, author["token"], "x" * 141)
    assert resp.status_code == 400
    assert resp.get_json()["message"] == "Chirp is too long"


def test_create_chirp_at_limit(client, author):
    assert _post(client, author["token"], "x" * 140).status_code == 201


def test_create_chirp_requires_auth(client):
    assert client.post("/api/chirps", json={"body": "hi"}).status_code == 401
    assert client.post("/api/chirps", json={"body": "hi"}, headers=bearer("nonsense")).status_code == 401


def test_list_chirps_sorted_and_filtered(client, login, author):
    other = login("other@x.com")
    first = _post(client, author["token"], "first").get_json()
    second = _post(client, other["token"], "second").get_json()
    third = _post(client, author["token"], "third").get_json()

    asc = client.get("/api/chirps").get_json()
    assert {c["id"] for c in asc} == {first["id"], second["id"], third["id"]}
    assert [c["created_at"] for c in asc] == sorted(c["created_at"] for c in asc)

    mine = client.get(f"/api/chirps?author_id={author['id']}").get_json()
    assert {c["id"] for c in mine} == {first["id"], third["id"]}

    everything = client.get("/api/chirps?author_id=not-a-uuid").get_json()
    assert len(everything) == 3

    desc = client.get("/api/chirps?sort=desc").get_json()
    assert [c["created_at"] for c in desc] == sorted((c["created_at"] for c in desc), reverse=True)


def test_get_chirp(client, author):
    chirp = _post(client, author["token"], "hello").get_json()

    assert client.get(f"/api/chirps/{chirp['id']}").get_json() == chirp
    assert client.get(f"/api/chirps/{uuid.uuid4()}").status_code == 404
    assert client.get("/api/chirps/not-a-uuid").status_code == 400


def test_delete_chirp(client, login, author):
    chirp = _post(client, author["token"], "hello").get_json()
    other = login("other@x.com")

    assert client.delete(f"/api/chirps/{chirp['id']}", headers=bearer(other["token"])).status_code == 403
    assert client.delete(f"/api/chirps/{chirp['id']}").status_code == 401
    assert client.delete(f"/api/chirps/{chirp['id']}", headers=bearer(author["token"])).status_code == 204
    assert client.get(f"/api/chirps/{chirp['id']}").status_code == 404
    assert client.delete(f"/api/chirps/{chirp['id']}", headers=bearer(author["token"])).status_code == 404


def test_delete_with_non_uuid_id_is_forbidden(client, author):
    resp = client.delete("/api/chirps/not-a-uuid", headers=bearer(author["token"]))
    assert resp.status_code == 403


def test_create_empty_chirp(client, author):
    resp = _post(client, author["token"], "")
    assert resp.status_code == 201
    assert resp.get_json()["body"] == ""
