# memento/api/v1/movies.py

from typing import List
from fastapi import APIRouter, Depends, HTTPException, Path, Query, status
from memento.core.dependencies import (
    get_movie_service,
    get_play_service,
    get_tmdb_service,
)
from memento.schemas import Movie, MovieCredit, MovieSearchResult, Play, PlayCreate, RefreshSummary
from memento.services import MovieService, PlayService, TMDBService

router = APIRouter()


async def _get_movie_or_404(movie_id: int, movie_service: MovieService) -> Movie:
    movie = await movie_service.get_movie_by_id(movie_id)
    if not movie:
        raise HTTPException(status_code=404, detail=f"Movie not found (id: {movie_id})")
    return movie


@router.get(
    "/search",
    response_model=List[MovieSearchResult],
    summary="영화 검색",
    description="TMDB에서 제목으로 영화를 검색합니다.",
)
async def search_movies(
    query: str = Query(min_length=1, description="검색어"),
    tmdb_service: TMDBService = Depends(get_tmdb_service),
):
    return await tmdb_service.search_movies(query)


@router.post(
    "/tmdb/{tmdb_id}",
    response_model=Movie,
    summary="TMDB 영화 가져오기",
    description="TMDB 상세 정보와 크레딧을 가져와 로컬에 저장합니다.",
)
async def load_movie(
    tmdb_id: int = Path(description="TMDB 영화 ID"),
    movie_service: MovieService = Depends(get_movie_service),
):
    return await movie_service.load_movie(tmdb_id)


@router.post(
    "/refresh",
    response_model=RefreshSummary,
    summary="전체 영화 새로고침",
)
async def refresh_all_movies(movie_service: MovieService = Depends(get_movie_service)):
    return await movie_service.refresh_all_movies()


@router.get("/{movie_id}", response_model=Movie, summary="영화 상세 정보")
async def get_movie(
    movie_id: int = Path(description="로컬 영화 ID"),
    movie_service: MovieService = Depends(get_movie_service),
):
    return await _get_movie_or_404(movie_id, movie_service)


@router.get("/{movie_id}/credits", response_model=List[MovieCredit], summary="영화 크레딧")
async def get_movie_credits(
    movie_id: int = Path(description="로컬 영화 ID"),
    movie_service: MovieService = Depends(get_movie_service),
):
    await _get_movie_or_404(movie_id, movie_service)
    return await movie_service.get_movie_credits(movie_id)


@router.post("/{movie_id}/imdb-rating", response_model=Movie, summary="IMDb 평점 갱신")
async def refresh_imdb_rating(
    movie_id: int = Path(description="로컬 영화 ID"),
    movie_service: MovieService = Depends(get_movie_service),
):
    movie = await _get_movie_or_404(movie_id, movie_service)
    rating = await movie_service.imdb_service.scrape_rating(movie.imdb_id)
    if rating is None:
        raise HTTPException(status_code=404, detail="IMDb rating unavailable")
    await movie_service.update_imdb_rating(movie_id, rating)
    return await _get_movie_or_404(movie_id, movie_service)


@router.get("/{movie_id}/plays", response_model=List[Play], summary="영화 관람 기록")
async def get_movie_plays(
    movie_id: int = Path(description="로컬 영화 ID"),
    play_service: PlayService = Depends(get_play_service),
):
    return await play_service.get_plays_for_movie(movie_id)


@router.post(
    "/{movie_id}/plays",
    response_model=List[Play],
    status_code=status.HTTP_201_CREATED,
    summary="관람 기록 추가",
)
async def add_movie_play(
    payload: PlayCreate,
    movie_id: int = Path(description="로컬 영화 ID"),
    movie_service: MovieService = Depends(get_movie_service),
    play_service: PlayService = Depends(get_play_service),
):
    await _get_movie_or_404(movie_id, movie_service)
    await play_service.add_play(movie_id, payload.watched_at, payload.place_id, payload.watch_order)
    return await play_service.get_plays_for_movie(movie_id)
