import httpx
import pytest
from fastapi.testclient import TestClient

from memento.core.config import Settings, get_settings
from memento.core.dependencies import get_movie_service
from memento.database import dispose_executor
from memento.main import app
from memento.services import IMDbService, MovieService, TMDBService
from tests.helpers import FIGHT_CLUB, FIGHT_CLUB_CREDITS, json_transport


@pytest.fixture
def client(tmp_path, monkeypatch):
    monkeypatch.setenv("MEMENTO_DATA_DIR", str(tmp_path / "data"))
    monkeypatch.setenv("MEMENTO_TMDB_API_KEY", "test-key")
    get_settings.cache_clear()
    dispose_executor()

    settings = Settings(_env_file=None, data_dir=tmp_path / "data", tmdb_api_key="test-key")
    tmdb = TMDBService(settings, transport=json_transport({
        "/3/movie/550": FIGHT_CLUB,
        "/3/movie/550/credits": FIGHT_CLUB_CREDITS,
        "/3/person/287/movie_credits": {
            "cast": [
                {"id": 550, "title": "Fight Club", "character": "Tyler Durden", "release_date": "1999-10-15"},
                {"id": 807, "title": "Se7en", "character": "Mills", "release_date": "1995-09-22"},
            ],
        },
    }))
    imdb = IMDbService(settings, transport=httpx.MockTransport(lambda request: httpx.Response(503)))
    app.dependency_overrides[get_movie_service] = lambda: MovieService(tmdb_service=tmdb, imdb_service=imdb)

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()
    dispose_executor()
    get_settings.cache_clear()


def test_health(client):
    assert client.get("/v1/system/health").json()["status"] == "healthy"
    assert client.get("/v1/system/db-test").json() == {"status": "ok", "result": 1}


def test_places_crud(client):
    created = client.post("/v1/places", json={"name": "Home"})
    assert created.status_code == 201
    place_id = created.json()["id"]

    assert client.put(f"/v1/places/{place_id}", json={"name": "Cinema City", "is_cinema": True}).status_code == 204
    places = client.get("/v1/places").json()
    assert [(p["name"], p["is_cinema"]) for p in places] == [("Cinema City", True)]

    assert client.delete(f"/v1/places/{place_id}").status_code == 204
    assert client.get("/v1/places").json() == []


def test_blank_place_name_is_rejected(client):
    response = client.post("/v1/places", json={"name": "   "})
    assert response.status_code == 422


def test_missing_movie_returns_404(client):
    assert client.get("/v1/movies/999").status_code == 404
    assert client.put("/v1/watchlist/999").status_code == 404
    assert client.post("/v1/movies/999/plays", json={"watched_at": "2024-01-01"}).status_code == 404


def test_import_watch_and_stats(client):
    movie = client.post("/v1/movies/tmdb/550").json()
    assert movie["title"] == "Fight Club"
    assert movie["imdb_rating"] is None
    movie_id = movie["id"]

    credits = client.get(f"/v1/movies/{movie_id}/credits").json()
    assert {c["role_type"] for c in credits} == {"actor", "director", "producer"}

    assert client.put(f"/v1/watchlist/{movie_id}").json()["in_watchlist"] is True
    assert len(client.get("/v1/watchlist").json()) == 1

    plays = client.post(f"/v1/movies/{movie_id}/plays", json={"watched_at": "2024-01-01"})
    assert plays.status_code == 201
    assert [p["watch_order"] for p in plays.json()] == [1]

    dashboard = client.get("/v1/stats/dashboard").json()
    assert dashboard["total_plays"] == 1
    assert dashboard["total_runtime_minutes"] == 139

    directors = client.get("/v1/stats/top-people", params={"role": "director"}).json()
    assert directors[0]["name"] == "David Fincher"

    recent = client.get("/v1/stats/recent-plays").json()
    assert recent[0]["last_watched_at"] == "2024-01-01"


def test_unknown_role_returns_422(client):
    assert client.get("/v1/stats/top-people", params={"role": "grip"}).status_code == 422


def test_remote_failure_returns_502(client):
    assert client.post("/v1/movies/tmdb/1").status_code == 502


def test_duplicate_place_returns_422(client):
    assert client.post("/v1/places", json={"name": "Home"}).status_code == 201
    response = client.post("/v1/places", json={"name": "Home"})
    assert response.status_code == 422
    assert "already exists" in response.json()["detail"]
    assert client.put("/v1/places/999", json={"name": "Attic"}).status_code == 404


def test_play_with_missing_place_returns_404(client):
    movie_id = client.post("/v1/movies/tmdb/550").json()["id"]
    response = client.post(f"/v1/movies/{movie_id}/plays", json={"watched_at": "2024-01-01", "place_id": 999})
    assert response.status_code == 404
    assert client.get(f"/v1/movies/{movie_id}/plays").json() == []


def test_people_stats_and_person_pages(client):
    movie_id = client.post("/v1/movies/tmdb/550").json()["id"]
    client.post(f"/v1/movies/{movie_id}/plays", json={"watched_at": "2024-01-01"})

    people = client.get("/v1/stats/people").json()
    assert {p["role_type"] for p in people} == {"actor", "director", "producer"}
    directors = client.get("/v1/stats/people", params={"role": "director"}).json()
    assert [(p["name"], p["total_appearances"], p["unique_movies"]) for p in directors] == [("David Fincher", 1, 1)]
    assert client.get("/v1/stats/top-people", params={"role": "music_composer"}).json() == []

    credits = client.get(f"/v1/movies/{movie_id}/credits").json()
    pitt_id = next(c["person_id"] for c in credits if c["person_name"] == "Brad Pitt")

    filmography = client.get(f"/v1/persons/{pitt_id}/filmography").json()
    assert [m["title"] for m in filmography["watched"]] == ["Fight Club"]
    assert filmography["watchlist"] == []

    unseen = client.get(f"/v1/persons/{pitt_id}/unseen-movies").json()
    assert [m["id"] for m in unseen] == [807]
    assert client.get("/v1/persons/999/filmography").status_code == 404
