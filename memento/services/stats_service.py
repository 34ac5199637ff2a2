# memento/services/stats_service.py

from typing import List, Optional, Union

from sqlalchemy import distinct, func, select

from memento.core.exceptions import ValidationError
from memento.database import QueryExecutor, get_executor
from memento.models import CreditModel, MovieModel, PersonModel, PlayModel, WatchlistModel
from memento.schemas import (
    DashboardStats,
    PeopleSort,
    PersonAppearanceStat,
    PersonStat,
    RecentPlay,
    RoleType,
)


class StatsService:

    def __init__(self, executor: Optional[QueryExecutor] = None):
        self.executor = executor or get_executor()

    async def get_dashboard_stats(self) -> DashboardStats:
        """대시보드 통계

        관람 시간은 여러 번 본 영화도 한 번만 더한다.
        """
        played_movie_ids = select(PlayModel.movie_id).distinct()
        stmt = select(
            select(func.count(PlayModel.id)).scalar_subquery().label("total_plays"),
            select(func.count(distinct(PlayModel.movie_id))).scalar_subquery().label("unique_movies"),
            select(func.count(WatchlistModel.id)).scalar_subquery().label("watchlist_count"),
            select(func.coalesce(func.sum(MovieModel.runtime), 0))
            .where(MovieModel.id.in_(played_movie_ids))
            .scalar_subquery()
            .label("total_runtime_minutes"),
        )
        row = await self.executor.fetch_one(stmt) or {}
        return DashboardStats(**{key: value or 0 for key, value in row.items()})

    async def get_top_people_by_role(self, role: Union[RoleType, str], limit: int = 6) -> List[PersonStat]:
        """역할별 관람 횟수 상위 인물 (동률이면 고유 영화 수, 이름 순)"""
        try:
            role_type = RoleType(role)
        except ValueError:
            raise ValidationError(f"Unknown role type: {role!r}")
        if limit < 1:
            raise ValidationError("Limit must be positive.")

        play_count = func.count(distinct(PlayModel.id)).label("play_count")
        movie_count = func.count(distinct(CreditModel.movie_id)).label("movie_count")
        stmt = (
            select(
                PersonModel.id,
                PersonModel.tmdb_person_id,
                PersonModel.name,
                PersonModel.profile_path,
                play_count,
                movie_count,
            )
            .select_from(CreditModel)
            .join(PersonModel, CreditModel.person_id == PersonModel.id)
            .join(PlayModel, PlayModel.movie_id == CreditModel.movie_id)
            .where(CreditModel.role_type == role_type.value)
            .group_by(PersonModel.id)
            .order_by(play_count.desc(), movie_count.desc(), PersonModel.name)
            .limit(limit)
        )
        rows = await self.executor.fetch_all(stmt)
        return [PersonStat(**row) for row in rows]

    async def get_people_appearance_stats(
        self,
        role: Optional[Union[RoleType, str]] = None,
        query: Optional[str] = None,
        sort: Union[PeopleSort, str] = PeopleSort.most_appearances,
    ) -> List[PersonAppearanceStat]:
        """관람한 영화 기준 인물/역할별 등장 횟수와 고유 영화 수

        role을 생략하면 모든 역할을 역할별로 나눠 돌려준다.
        query는 이름 부분 일치 (대소문자 무시).
        """
        try:
            role_type = RoleType(role) if role is not None else None
            sort = PeopleSort(sort)
        except ValueError as e:
            raise ValidationError(str(e))

        total_appearances = func.count(distinct(PlayModel.id)).label("total_appearances")
        unique_movies = func.count(distinct(CreditModel.movie_id)).label("unique_movies")
        stmt = (
            select(
                PersonModel.id,
                PersonModel.tmdb_person_id,
                PersonModel.name,
                PersonModel.profile_path,
                CreditModel.role_type,
                total_appearances,
                unique_movies,
            )
            .select_from(CreditModel)
            .join(PersonModel, CreditModel.person_id == PersonModel.id)
            .join(PlayModel, PlayModel.movie_id == CreditModel.movie_id)
            .group_by(PersonModel.id, CreditModel.role_type)
        )
        if role_type is not None:
            stmt = stmt.where(CreditModel.role_type == role_type.value)
        if query and query.strip():
            stmt = stmt.where(
                func.lower(PersonModel.name).contains(query.strip().lower(), autoescape=True)
            )

        ordering = {
            PeopleSort.most_appearances: (total_appearances.desc(), unique_movies.desc()),
            PeopleSort.least_appearances: (total_appearances.asc(),),
            PeopleSort.most_movies: (unique_movies.desc(), total_appearances.desc()),
            PeopleSort.least_movies: (unique_movies.asc(),),
            PeopleSort.name: (),
        }[sort]
        stmt = stmt.order_by(CreditModel.role_type, *ordering, PersonModel.name)

        rows = await self.executor.fetch_all(stmt)
        return [PersonAppearanceStat(**row) for row in rows]

    async def get_recent_plays(self, limit: int = 6) -> List[RecentPlay]:
        """가장 최근에 본 고유 영화 N편"""
        if limit < 1:
            raise ValidationError("Limit must be positive.")

        last_watched_at = func.max(PlayModel.watched_at).label("last_watched_at")
        stmt = (
            select(
                MovieModel.id.label("movie_id"),
                MovieModel.tmdb_id,
                MovieModel.title,
                MovieModel.poster,
                MovieModel.release_date,
                last_watched_at,
            )
            .select_from(PlayModel)
            .join(MovieModel, PlayModel.movie_id == MovieModel.id)
            .group_by(MovieModel.id)
            .order_by(last_watched_at.desc(), func.max(PlayModel.id).desc())
            .limit(limit)
        )
        rows = await self.executor.fetch_all(stmt)
        return [RecentPlay(**row) for row in rows]
