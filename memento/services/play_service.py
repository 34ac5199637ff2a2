# memento/services/play_service.py

import logging
from datetime import date
from typing import List, Optional, Set, Union

from sqlalchemy import delete, func, insert, select, update

from memento.core.config import Settings, get_settings
from memento.core.exceptions import NotFoundError, ValidationError
from memento.database import QueryExecutor, get_executor
from memento.models import MovieModel, PlaceModel, PlayModel
from memento.schemas import Play, PlayWithMovie
from memento.services.watchlist_service import remove_from_watchlist_statement
from memento.utils import to_iso_date

logger = logging.getLogger(__name__)


def _normalize_watched_at(watched_at: Union[str, date]) -> str:
    value = to_iso_date(watched_at)
    try:
        date.fromisoformat(value or "")
    except ValueError:
        raise ValidationError(f"Invalid watched date: {watched_at!r}")
    return value


def next_watch_order(watched_at: str):
    """같은 날짜(문자열 일치) 기록의 최대 순서 + 1, 없으면 1"""
    return (
        select(func.coalesce(func.max(PlayModel.watch_order), 0) + 1)
        .where(PlayModel.watched_at == watched_at)
        .correlate(None)
        .scalar_subquery()
    )


class PlayService:

    def __init__(self, executor: Optional[QueryExecutor] = None, settings: Optional[Settings] = None):
        self.executor = executor or get_executor()
        self.settings = settings or get_settings()

    async def _ensure_place_exists(self, place_id: Optional[int]) -> None:
        if place_id is None:
            return
        row = await self.executor.fetch_one(select(PlaceModel.id).where(PlaceModel.id == place_id))
        if row is None:
            raise NotFoundError(f"Place not found (id: {place_id})")

    async def add_play(
        self,
        movie_id: int,
        watched_at: Union[str, date],
        place_id: Optional[int] = None,
        watch_order: Optional[int] = None,
    ) -> None:
        """관람 기록 추가 (순서를 생략하면 같은 날 마지막 순서 다음)"""
        watched_at = _normalize_watched_at(watched_at)
        await self._ensure_place_exists(place_id)
        order = watch_order if watch_order is not None else next_watch_order(watched_at)

        statements = [
            insert(PlayModel).values(
                movie_id=movie_id,
                watched_at=watched_at,
                watch_order=order,
                place_id=place_id,
            )
        ]
        if self.settings.auto_remove_from_watchlist:
            statements.append(remove_from_watchlist_statement(movie_id))

        await self.executor.execute(*statements)
        logger.info("Play added for movie %s on %s", movie_id, watched_at)

    async def update_play(
        self,
        play_id: int,
        watched_at: Union[str, date],
        place_id: Optional[int] = None,
        watch_order: int = 1,
    ) -> None:
        await self._ensure_place_exists(place_id)
        stmt = (
            update(PlayModel)
            .where(PlayModel.id == play_id)
            .values(
                watched_at=_normalize_watched_at(watched_at),
                place_id=place_id,
                watch_order=watch_order,
            )
        )
        await self.executor.execute(stmt)

    async def delete_play(self, play_id: int) -> None:
        await self.executor.execute(delete(PlayModel).where(PlayModel.id == play_id))

    async def get_plays_for_movie(self, movie_id: int) -> List[Play]:
        stmt = (
            select(
                PlayModel.id,
                PlayModel.movie_id,
                PlayModel.watched_at,
                PlayModel.watch_order,
                PlayModel.place_id,
                PlaceModel.name.label("place_name"),
                PlaceModel.is_cinema,
            )
            .select_from(PlayModel)
            .outerjoin(PlaceModel, PlayModel.place_id == PlaceModel.id)
            .where(PlayModel.movie_id == movie_id)
            .order_by(PlayModel.watched_at.desc(), PlayModel.watch_order.desc())
        )
        rows = await self.executor.fetch_all(stmt)
        return [Play(**row) for row in rows]

    async def get_all_plays(self) -> List[PlayWithMovie]:
        stmt = (
            select(
                PlayModel.id,
                PlayModel.movie_id,
                PlayModel.watched_at,
                PlayModel.watch_order,
                PlayModel.place_id,
                MovieModel.title,
                MovieModel.poster,
                MovieModel.release_date,
                MovieModel.tmdb_id,
                PlaceModel.name.label("place_name"),
                PlaceModel.is_cinema,
            )
            .select_from(PlayModel)
            .join(MovieModel, PlayModel.movie_id == MovieModel.id)
            .outerjoin(PlaceModel, PlayModel.place_id == PlaceModel.id)
            .order_by(PlayModel.watched_at.desc(), PlayModel.watch_order.desc())
        )
        rows = await self.executor.fetch_all(stmt)
        return [PlayWithMovie(**row) for row in rows]

    async def get_watched_tmdb_ids(self) -> Set[int]:
        stmt = (
            select(MovieModel.tmdb_id)
            .distinct()
            .select_from(PlayModel)
            .join(MovieModel, PlayModel.movie_id == MovieModel.id)
        )
        rows = await self.executor.fetch_all(stmt)
        return {row["tmdb_id"] for row in rows}
