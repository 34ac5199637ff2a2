# memento/api/v1/watchlist.py

from typing import List
from fastapi import APIRouter, Depends, HTTPException, Path
from memento.core.dependencies import get_movie_service, get_watchlist_service
from memento.schemas import WatchlistMovie
from memento.services import MovieService, WatchlistService

router = APIRouter()


@router.get("", response_model=List[WatchlistMovie], summary="왓치리스트 목록")
async def get_watchlist(watchlist_service: WatchlistService = Depends(get_watchlist_service)):
    return await watchlist_service.get_watchlist_movies()


@router.get("/{movie_id}", summary="왓치리스트 포함 여부")
async def is_in_watchlist(
    movie_id: int = Path(description="로컬 영화 ID"),
    watchlist_service: WatchlistService = Depends(get_watchlist_service),
):
    return {"movie_id": movie_id, "in_watchlist": await watchlist_service.is_in_watchlist(movie_id)}


@router.put("/{movie_id}", summary="왓치리스트 추가")
async def add_to_watchlist(
    movie_id: int = Path(description="로컬 영화 ID"),
    movie_service: MovieService = Depends(get_movie_service),
    watchlist_service: WatchlistService = Depends(get_watchlist_service),
):
    if not await movie_service.get_movie_by_id(movie_id):
        raise HTTPException(status_code=404, detail=f"Movie not found (id: {movie_id})")
    await watchlist_service.add_movie(movie_id)
    return {"movie_id": movie_id, "in_watchlist": True}


@router.delete("/{movie_id}", summary="왓치리스트 제거")
async def remove_from_watchlist(
    movie_id: int = Path(description="로컬 영화 ID"),
    watchlist_service: WatchlistService = Depends(get_watchlist_service),
):
    await watchlist_service.remove_movie(movie_id)
    return {"movie_id": movie_id, "in_watchlist": False}
