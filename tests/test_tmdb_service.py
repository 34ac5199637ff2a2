import httpx
import pytest

from memento.core.exceptions import RemoteServiceError
from memento.services import TMDBService
from memento.services.tmdb_service import build_imdb_url, build_letterboxd_url, build_tmdb_url
from tests.helpers import FIGHT_CLUB, json_transport


async def test_search_movies_sends_key_and_maps_results(settings):
    calls = []
    service = TMDBService(settings, transport=json_transport({
        "/3/search/movie": {"results": [
            FIGHT_CLUB,
            {"id": 14, "original_title": "Amélie", "vote_average": None},
            {"title": "No id"},
        ]},
    }, calls))

    results = await service.search_movies("  fight club ")

    assert [r.id for r in results] == [550, 14]
    assert results[1].title == "Amélie"
    assert results[1].vote_average == 0.0
    params = calls[0].url.params
    assert params["query"] == "fight club"
    assert params["api_key"] == "test-key"
    assert params["language"] == "en-US"


async def test_get_movie_details(settings):
    service = TMDBService(settings, transport=json_transport({"/3/movie/550": FIGHT_CLUB}))
    assert (await service.get_movie_details(550))["title"] == "Fight Club"


async def test_http_error_raises_remote_service_error(settings):
    service = TMDBService(settings, transport=json_transport({}))
    with pytest.raises(RemoteServiceError) as excinfo:
        await service.get_movie_credits(1)
    assert excinfo.value.status_code == 404


async def test_transport_error_raises_remote_service_error(settings):
    def handler(request):
        raise httpx.ConnectError("boom", request=request)

    service = TMDBService(settings, transport=httpx.MockTransport(handler))
    with pytest.raises(RemoteServiceError):
        await service.get_person_details(287)


def test_url_builders(settings):
    service = TMDBService(settings)
    assert service.build_poster_url("/a.jpg") == "https://images.test/t/p/w500/a.jpg"
    assert service.build_profile_url("/b.jpg") == "https://images.test/t/p/w185/b.jpg"
    assert service.build_poster_url(None) is None
    assert build_imdb_url("tt0137523") == "https://www.imdb.com/title/tt0137523/"
    assert build_tmdb_url(550) == "https://www.themoviedb.org/movie/550"
    assert build_letterboxd_url("tt0137523") == "https://letterboxd.com/imdb/0137523/"
    assert build_letterboxd_url(None) is None


async def test_get_person_movie_credits(settings):
    calls = []
    service = TMDBService(settings, transport=json_transport({
        "/3/person/287/movie_credits": {"cast": [{"id": 550}], "crew": []},
    }, calls))

    credits = await service.get_person_movie_credits(287)

    assert credits["cast"] == [{"id": 550}]
    assert calls[0].url.params["api_key"] == "test-key"
