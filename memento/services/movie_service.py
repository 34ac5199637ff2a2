# memento/services/movie_service.py

import logging
from typing import List, Optional

from sqlalchemy import delete, insert, select, update
from sqlalchemy.dialects.sqlite import insert as sqlite_insert

from memento.core.exceptions import InvariantViolation, MementoError, NotFoundError, ValidationError
from memento.database import QueryExecutor, get_executor
from memento.models import CreditModel, MovieModel, PersonModel
from memento.schemas import (
    CreditInput,
    ImdbRating,
    Movie,
    MovieCredit,
    MovieSummary,
    PersonCreditMovie,
    PersonFilmography,
    RefreshSummary,
    RoleType,
)
from memento.services.imdb_service import IMDbService
from memento.services.person_service import PersonService
from memento.services.play_service import PlayService
from memento.services.tmdb_service import TMDBService, build_letterboxd_url
from memento.services.watchlist_service import WatchlistService
from memento.utils import utc_now_iso

logger = logging.getLogger(__name__)

# upsert 시 갱신하는 컬럼 (created_at, imdb 평점은 건드리지 않음)
MOVIE_MUTABLE_FIELDS = (
    "title",
    "imdb_id",
    "poster",
    "tagline",
    "overview",
    "original_language",
    "runtime",
    "release_date",
    "tmdb_average",
    "tmdb_vote_count",
    "revenue",
    "letterboxd_url",
    "updated_at",
)

MAX_PRODUCERS = 5
MAX_ACTORS = 10


def _require_tmdb_id(details: Optional[dict]) -> int:
    value = (details or {}).get("id")
    if value is None or isinstance(value, bool):
        raise ValidationError("TMDB movie id is missing.")
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValidationError("TMDB movie id is missing.")


def select_credits_from_tmdb(credits_payload: dict) -> List[dict]:
    """TMDB 크레딧에서 저장할 인물 선택

    감독 전원, 프로듀서 상위 5명, 배우 상위 10명 순서로
    display_order를 연속으로 매긴다.
    """
    selected = []
    order = 0
    crew = credits_payload.get("crew") or []
    cast = credits_payload.get("cast") or []

    for member in [c for c in crew if c.get("job") == "Director"]:
        selected.append({"person": member, "role_type": RoleType.director, "character_name": None, "display_order": order})
        order += 1

    for member in [c for c in crew if c.get("job") == "Producer"][:MAX_PRODUCERS]:
        selected.append({"person": member, "role_type": RoleType.producer, "character_name": None, "display_order": order})
        order += 1

    for member in cast[:MAX_ACTORS]:
        selected.append({
            "person": member,
            "role_type": RoleType.actor,
            "character_name": member.get("character") or None,
            "display_order": order,
        })
        order += 1

    return selected


def select_unseen_person_movies(credits_payload: dict, excluded_tmdb_ids) -> List[dict]:
    """TMDB 인물 출연작 중 아직 보지 않은 영화 (출연작 + 감독작, 중복 제거, 개봉일 내림차순)"""
    seen = set(excluded_tmdb_ids)
    crew = credits_payload.get("crew") or []
    candidates = list(credits_payload.get("cast") or [])
    candidates += [c for c in crew if c.get("job") == "Director"]

    movies = []
    for credit in candidates:
        tmdb_id = credit.get("id")
        if tmdb_id is None or tmdb_id in seen:
            continue
        seen.add(tmdb_id)
        movies.append(credit)

    # 개봉일이 없는 영화는 맨 뒤
    dated = sorted((m for m in movies if m.get("release_date")), key=lambda m: m["release_date"], reverse=True)
    return dated + [m for m in movies if not m.get("release_date")]

class MovieService:

    def __init__(
        self,
        executor: Optional[QueryExecutor] = None,
        tmdb_service: Optional[TMDBService] = None,
        imdb_service: Optional[IMDbService] = None,
        person_service: Optional[PersonService] = None,
    ):
        self.executor = executor or get_executor()
        self._tmdb_service = tmdb_service
        self._imdb_service = imdb_service
        self.person_service = person_service or PersonService(self.executor, tmdb_service)

    @property
    def tmdb_service(self) -> TMDBService:
        if self._tmdb_service is None:
            self._tmdb_service = TMDBService()
        return self._tmdb_service

    @property
    def imdb_service(self) -> IMDbService:
        if self._imdb_service is None:
            self._imdb_service = IMDbService()
        return self._imdb_service

    async def upsert_movie_from_tmdb(self, details: dict) -> int:
        """TMDB 영화 정보로 생성/갱신 후 로컬 ID 반환"""
        tmdb_id = _require_tmdb_id(details)
        title = (
            details.get("title")
            or details.get("original_title")
            or details.get("name")
            or "Untitled"
        )
        imdb_id = details.get("imdb_id") or None
        now = utc_now_iso()

        # 포스터는 전체 URL이 아닌 상대 경로로 저장
        stmt = sqlite_insert(MovieModel).values(
            title=title,
            imdb_id=imdb_id,
            tmdb_id=tmdb_id,
            poster=details.get("poster_path"),
            tagline=details.get("tagline"),
            overview=details.get("overview"),
            original_language=details.get("original_language"),
            runtime=details.get("runtime"),
            release_date=details.get("release_date") or None,
            tmdb_average=details.get("vote_average"),
            tmdb_vote_count=details.get("vote_count"),
            revenue=details.get("revenue"),
            letterboxd_url=build_letterboxd_url(imdb_id),
            created_at=now,
            updated_at=now,
        )
        stmt = stmt.on_conflict_do_update(
            index_elements=[MovieModel.tmdb_id],
            set_={field: getattr(stmt.excluded, field) for field in MOVIE_MUTABLE_FIELDS},
        )
        await self.executor.execute(stmt)

        movie_id = await self.executor.fetch_scalar(
            select(MovieModel.id).where(MovieModel.tmdb_id == tmdb_id)
        )
        if movie_id is None:
            raise InvariantViolation("Failed to locate movie after upsert.")

        logger.info("Movie %s upserted: %s (local id %s)", tmdb_id, title, movie_id)
        return int(movie_id)

    async def get_movie_by_id(self, movie_id: int) -> Optional[Movie]:
        row = await self.executor.fetch_one(
            select(MovieModel.__table__).where(MovieModel.id == movie_id)
        )
        return Movie(**row) if row else None

    async def find_movie_by_tmdb_id(self, tmdb_id: int) -> Optional[Movie]:
        row = await self.executor.fetch_one(
            select(MovieModel.__table__).where(MovieModel.tmdb_id == tmdb_id)
        )
        return Movie(**row) if row else None

    async def replace_movie_credits(self, movie_id: int, credits: List[CreditInput]) -> None:
        """영화의 크레딧 전체를 교체 (빈 목록이면 기존 크레딧 유지)"""
        if not credits:
            return

        delete_stmt = delete(CreditModel).where(CreditModel.movie_id == movie_id)
        insert_stmt = insert(CreditModel).values([
            {
                "movie_id": movie_id,
                "person_id": credit.person_id,
                "role_type": credit.role_type.value,
                "character_name": credit.character_name,
                "display_order": credit.display_order,
            }
            for credit in credits
        ])
        # 삭제와 삽입을 하나의 트랜잭션으로
        await self.executor.execute(delete_stmt, insert_stmt)

    async def save_credits_from_tmdb(self, movie_id: int, credits_payload: dict) -> int:
        """TMDB 크레딧의 인물을 저장하고 크레딧을 교체, 저장한 건수 반환"""
        credits = []
        for entry in select_credits_from_tmdb(credits_payload or {}):
            person = entry["person"]
            if person.get("id") is None:
                continue
            person_id = await self.person_service.upsert_person_basic(
                person.get("id"), person.get("name"), person.get("profile_path")
            )
            credits.append(
                CreditInput(
                    person_id=person_id,
                    role_type=entry["role_type"],
                    character_name=entry["character_name"],
                    display_order=entry["display_order"],
                )
            )

        await self.replace_movie_credits(movie_id, credits)
        return len(credits)

    async def get_movie_credits(self, movie_id: int) -> List[MovieCredit]:
        """영화의 크레딧을 인물 정보와 함께 조회"""
        stmt = (
            select(
                CreditModel.id,
                CreditModel.role_type,
                CreditModel.character_name,
                CreditModel.display_order,
                PersonModel.id.label("person_id"),
                PersonModel.tmdb_person_id,
                PersonModel.name.label("person_name"),
                PersonModel.profile_path,
            )
            .select_from(CreditModel)
            .join(PersonModel, CreditModel.person_id == PersonModel.id)
            .where(CreditModel.movie_id == movie_id)
            .order_by(CreditModel.role_type, CreditModel.display_order)
        )
        rows = await self.executor.fetch_all(stmt)
        return [MovieCredit(**row) for row in rows]

    async def get_movies_by_person_id(self, person_id: int) -> List[MovieSummary]:
        stmt = (
            select(
                MovieModel.id,
                MovieModel.title,
                MovieModel.tmdb_id,
                MovieModel.poster,
                MovieModel.release_date,
            )
            .distinct()
            .select_from(MovieModel)
            .join(CreditModel, CreditModel.movie_id == MovieModel.id)
            .where(CreditModel.person_id == person_id)
            .order_by(MovieModel.release_date.desc())
        )
        rows = await self.executor.fetch_all(stmt)
        return [MovieSummary(**row) for row in rows]

    async def update_imdb_rating(self, movie_id: int, rating: Optional[ImdbRating]) -> None:
        stmt = (
            update(MovieModel)
            .where(MovieModel.id == movie_id)
            .values(
                imdb_rating=rating.value if rating else None,
                imdb_vote_count=rating.count if rating else None,
            )
        )
        await self.executor.execute(stmt)

    async def _refresh_imdb_rating(self, movie_id: int, imdb_id: Optional[str]) -> None:
        if not imdb_id:
            return
        try:
            rating = await self.imdb_service.scrape_rating(imdb_id)
        except MementoError as e:
            logger.warning("IMDb rating unavailable for %s: %s", imdb_id, e)
            return
        if rating:
            await self.update_imdb_rating(movie_id, rating)

    async def load_movie(self, tmdb_id: int) -> Movie:
        """TMDB에서 상세 정보와 크레딧을 가져와 저장 후 저장된 영화 반환"""
        details = await self.tmdb_service.get_movie_details(tmdb_id)
        credits_payload = await self.tmdb_service.get_movie_credits(tmdb_id)

        movie_id = await self.upsert_movie_from_tmdb(details)
        await self.save_credits_from_tmdb(movie_id, credits_payload)
        await self._refresh_imdb_rating(movie_id, details.get("imdb_id"))

        movie = await self.get_movie_by_id(movie_id)
        if movie is None:
            raise NotFoundError(f"Movie not found (id: {movie_id})")
        return movie

    async def get_all_tmdb_ids(self) -> List[int]:
        rows = await self.executor.fetch_all(
            select(MovieModel.tmdb_id).where(MovieModel.tmdb_id.is_not(None)).order_by(MovieModel.id)
        )
        return [row["tmdb_id"] for row in rows]

    async def refresh_all_movies(self) -> RefreshSummary:
        """저장된 모든 영화를 TMDB에서 다시 불러옴 (실패해도 다음 영화 계속)"""
        tmdb_ids = await self.get_all_tmdb_ids()
        summary = RefreshSummary(total=len(tmdb_ids))
        logger.info("Refreshing %d movies", summary.total)

        for tmdb_id in tmdb_ids:
            try:
                await self.load_movie(tmdb_id)
                summary.succeeded += 1
            except MementoError as e:
                summary.failed += 1
                logger.warning("Failed to refresh movie %s: %s", tmdb_id, e)

        logger.info(
            "Refresh finished: %d succeeded, %d failed", summary.succeeded, summary.failed
        )
        return summary

    async def get_person_filmography(self, person_id: int) -> PersonFilmography:
        """인물 참여작 중 관람한 영화와 왓치리스트 영화 (둘 다 아니면 제외)"""
        movies = await self.get_movies_by_person_id(person_id)
        watched_ids = await PlayService(self.executor).get_watched_tmdb_ids()
        watchlist_ids = await WatchlistService(self.executor).get_watchlist_tmdb_ids()

        filmography = PersonFilmography()
        for movie in movies:
            if movie.tmdb_id in watched_ids:
                filmography.watched.append(movie)
            elif movie.tmdb_id in watchlist_ids:
                filmography.watchlist.append(movie)
        return filmography

    async def get_unseen_person_movies(self, tmdb_person_id: int) -> List[PersonCreditMovie]:
        """TMDB 출연작/감독작 중 관람 기록과 왓치리스트에 없는 영화"""
        credits_payload = await self.tmdb_service.get_person_movie_credits(tmdb_person_id)
        watched_ids = await PlayService(self.executor).get_watched_tmdb_ids()
        watchlist_ids = await WatchlistService(self.executor).get_watchlist_tmdb_ids()

        movies = select_unseen_person_movies(credits_payload or {}, watched_ids | watchlist_ids)
        return [
            PersonCreditMovie(
                id=movie["id"],
                title=movie.get("title") or movie.get("original_title") or "Untitled",
                original_title=movie.get("original_title"),
                overview=movie.get("overview"),
                release_date=movie.get("release_date") or None,
                poster_path=movie.get("poster_path"),
                vote_average=movie.get("vote_average") or 0.0,
                character=movie.get("character") or None,
                job=movie.get("job"),
            )
            for movie in movies
        ]
