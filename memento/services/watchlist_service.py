# memento/services/watchlist_service.py

from typing import List, Optional, Set

from sqlalchemy import delete, insert, literal, select

from memento.database import QueryExecutor, get_executor
from memento.models import MovieModel, WatchlistModel
from memento.schemas import WatchlistMovie
from memento.utils import utc_now_iso


def remove_from_watchlist_statement(movie_id: int):
    return delete(WatchlistModel).where(WatchlistModel.movie_id == movie_id)


class WatchlistService:

    def __init__(self, executor: Optional[QueryExecutor] = None):
        self.executor = executor or get_executor()

    async def add_movie(self, movie_id: int) -> None:
        """왓치리스트에 없을 때만 추가"""
        already_added = (
            select(WatchlistModel.id).where(WatchlistModel.movie_id == movie_id).exists()
        )
        stmt = insert(WatchlistModel).from_select(
            ["movie_id", "created_at"],
            select(literal(movie_id), literal(utc_now_iso())).where(~already_added),
        )
        await self.executor.execute(stmt)

    async def remove_movie(self, movie_id: int) -> None:
        await self.executor.execute(remove_from_watchlist_statement(movie_id))

    async def is_in_watchlist(self, movie_id: int) -> bool:
        row = await self.executor.fetch_one(
            select(WatchlistModel.id).where(WatchlistModel.movie_id == movie_id).limit(1)
        )
        return row is not None

    async def get_watchlist_movies(self) -> List[WatchlistMovie]:
        """최근 추가순 왓치리스트"""
        stmt = (
            select(
                MovieModel.id,
                MovieModel.title,
                MovieModel.release_date,
                MovieModel.poster,
                MovieModel.tagline,
                MovieModel.overview,
                MovieModel.original_language,
                MovieModel.runtime,
                MovieModel.tmdb_average,
                MovieModel.tmdb_vote_count,
                MovieModel.tmdb_id,
                WatchlistModel.created_at.label("added_at"),
            )
            .select_from(WatchlistModel)
            .join(MovieModel, MovieModel.id == WatchlistModel.movie_id)
            .order_by(WatchlistModel.created_at.desc(), WatchlistModel.id.desc())
        )
        rows = await self.executor.fetch_all(stmt)
        return [WatchlistMovie(**row) for row in rows]

    async def get_watchlist_tmdb_ids(self) -> Set[int]:
        stmt = (
            select(MovieModel.tmdb_id)
            .distinct()
            .select_from(WatchlistModel)
            .join(MovieModel, WatchlistModel.movie_id == MovieModel.id)
        )
        rows = await self.executor.fetch_all(stmt)
        return {row["tmdb_id"] for row in rows}
