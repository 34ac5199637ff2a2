# memento/services/tmdb_service.py

import logging
from typing import List, Optional
from urllib.parse import quote

import httpx

from memento.core.config import Settings, get_settings
from memento.core.exceptions import RemoteServiceError
from memento.schemas import MovieSearchResult

logger = logging.getLogger(__name__)


class TMDBService:

    def __init__(self, settings: Optional[Settings] = None, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.settings = settings or get_settings()
        self.timeout = httpx.Timeout(self.settings.tmdb_timeout)
        self.transport = transport
        if not self.settings.tmdb_api_key:
            logger.warning("TMDB API key not configured. Set MEMENTO_TMDB_API_KEY.")

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=self.timeout, transport=self.transport)

    async def _get_json(self, path: str, params: Optional[dict] = None) -> dict:
        url = f"{self.settings.tmdb_base_url}{path}"
        query = dict(self.settings.tmdb_params)
        if params:
            query.update(params)

        async with self._client() as client:
            try:
                response = await client.get(url, params=query)
                response.raise_for_status()
                return response.json()

            except httpx.HTTPStatusError as e:
                raise RemoteServiceError(
                    f"TMDB request failed with status {e.response.status_code}.",
                    status_code=e.response.status_code,
                ) from e
            except httpx.RequestError as e:
                raise RemoteServiceError(f"TMDB request failed: {str(e)}") from e
            except ValueError as e:
                raise RemoteServiceError("TMDB returned malformed JSON.") from e

    async def search_movies(self, query: str) -> List[MovieSearchResult]:
        """제목으로 영화 검색"""
        data = await self._get_json(
            "/search/movie",
            {"query": query.strip(), "include_adult": "false", "page": 1},
        )

        results = []
        for movie_data in data.get("results", []):
            if movie_data.get("id") is None:
                continue
            results.append(
                MovieSearchResult(
                    id=movie_data["id"],
                    title=movie_data.get("title") or movie_data.get("original_title") or "Untitled",
                    original_title=movie_data.get("original_title"),
                    overview=movie_data.get("overview"),
                    release_date=movie_data.get("release_date") or None,
                    poster_path=movie_data.get("poster_path"),
                    vote_average=movie_data.get("vote_average") or 0.0,
                )
            )
        return results

    async def get_movie_details(self, tmdb_id: int) -> dict:
        return await self._get_json(f"/movie/{quote(str(tmdb_id))}")

    async def get_movie_credits(self, tmdb_id: int) -> dict:
        return await self._get_json(f"/movie/{quote(str(tmdb_id))}/credits")

    async def get_person_details(self, tmdb_person_id: int) -> dict:
        """TMDB에서 인물 상세 정보 조회"""
        return await self._get_json(f"/person/{quote(str(tmdb_person_id))}")

    async def get_person_movie_credits(self, tmdb_person_id: int) -> dict:
        """TMDB에서 인물의 영화 출연작 조회"""
        return await self._get_json(f"/person/{quote(str(tmdb_person_id))}/movie_credits")

    def build_poster_url(self, poster_path: Optional[str], size: str = "w500") -> Optional[str]:
        if not poster_path:
            return None
        return f"{self.settings.tmdb_image_base_url}{size}{poster_path}"

    def build_profile_url(self, profile_path: Optional[str], size: str = "w185") -> Optional[str]:
        if not profile_path:
            return None
        return f"{self.settings.tmdb_image_base_url}{size}{profile_path}"


def build_imdb_url(imdb_id: Optional[str]) -> Optional[str]:
    if not imdb_id:
        return None
    return f"https://www.imdb.com/title/{imdb_id}/"


def build_tmdb_url(tmdb_id: Optional[int]) -> Optional[str]:
    if not tmdb_id:
        return None
    return f"https://www.themoviedb.org/movie/{tmdb_id}"


def build_letterboxd_url(imdb_id: Optional[str]) -> Optional[str]:
    """Letterboxd는 IMDb 번호로 영화 페이지를 찾는다"""
    if not imdb_id:
        return None
    return f"https://letterboxd.com/imdb/{imdb_id.replace('tt', '')}/"
