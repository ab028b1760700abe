import json

import pytest
from fastapi.testclient import TestClient

from moviebuddy.config.settings import Settings
from moviebuddy.serving.api import create_app


@pytest.fixture
def client(catalog):
    app = create_app(Settings(), catalog=catalog)
    with TestClient(app) as c:
        yield c


def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"status": "ok", "movies": 4, "users": 4}


def test_list_endpoints_are_bracketed(client):
    movies = json.loads(client.get("/movies").text)
    assert [m["_id"] for m in movies] == [13, 603, 680, 862]

    users = json.loads(client.get("/users").text)
    assert [u["name"] for u in users] == ["alice", "bob", "carol", "Dave"]


def test_single_lookup_is_bare_or_empty(client):
    r = client.get("/movies/603")
    assert r.status_code == 200
    assert json.loads(r.text)["title"] == "The Matrix"

    assert client.get("/movies/1").text == ""
    assert json.loads(client.get("/users/2").text) == {"_id": 2, "name": "bob"}
    assert client.get("/users/99").text == ""


def test_search_routes(client):
    r = client.get("/movies/search/actors/anks/1")
    assert [m["_id"] for m in json.loads(r.text)] == [13]

    r = client.get("/movies/search/genre/zzz/5")
    assert r.text == "[]"

    r = client.get("/users/search/o/10")
    assert [u["_id"] for u in json.loads(r.text)] == [2, 3]


def test_search_rejects_bad_input(client):
    assert client.get("/movies/search/title/(oops/5").status_code == 400
    assert client.get("/movies/search/name/x/5").status_code == 422


def test_rate_then_compare(client):
    for body in (
        {"userId": "1", "movieId": "603", "rate": "5"},
        {"userId": 2, "movieId": 603, "rate": 1},
        {"userId": 1, "movieId": 13, "rate": 3},
    ):
        r = client.post("/rates", json=body)
        assert r.status_code == 201
        assert r.text == ""

    shared = json.loads(client.get("/users/share/1/2").text)
    assert [m["_id"] for m in shared] == [603]

    assert float(client.get("/users/distance/1/2").text) == pytest.approx(0.2)
    assert float(client.get("/users/distance/1/1").text) == 0.0
    assert client.get("/users/share/1/3").text == "[]"


def test_unknown_ids_are_404(client):
    assert client.post("/rates", json={"userId": 1, "movieId": 1, "rate": 3}).status_code == 404
    assert client.get("/users/share/1/99").status_code == 404
    assert client.get("/users/distance/99/1").status_code == 404


def test_malformed_rating_body(client):
    assert client.post("/rates", json={"userId": "x", "movieId": 603, "rate": 3}).status_code == 422
