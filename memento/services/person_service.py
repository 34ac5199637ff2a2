# memento/services/person_service.py

import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.dialects.sqlite import insert as sqlite_insert

from memento.core.exceptions import InvariantViolation, ValidationError
from memento.database import QueryExecutor, get_executor
from memento.models import PersonModel
from memento.schemas import Person
from memento.services.tmdb_service import TMDBService
from memento.utils import utc_now_iso

logger = logging.getLogger(__name__)

PERSON_DETAIL_FIELDS = ("name", "profile_path", "biography", "birthday", "place_of_birth", "deathday")


def _require_tmdb_person_id(value) -> int:
    if value is None or isinstance(value, bool):
        raise ValidationError("TMDB person id is missing.")
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValidationError("TMDB person id is missing.")


class PersonService:

    def __init__(self, executor: Optional[QueryExecutor] = None, tmdb_service: Optional[TMDBService] = None):
        self.executor = executor or get_executor()
        self._tmdb_service = tmdb_service

    @property
    def tmdb_service(self) -> TMDBService:
        if self._tmdb_service is None:
            self._tmdb_service = TMDBService()
        return self._tmdb_service

    async def upsert_person(self, tmdb_person_id, details: dict) -> int:
        """TMDB 인물 상세 정보로 생성/갱신 후 로컬 ID 반환"""
        person_id = _require_tmdb_person_id(tmdb_person_id)
        now = utc_now_iso()

        stmt = sqlite_insert(PersonModel).values(
            tmdb_person_id=person_id,
            name=details.get("name") or "Unknown",
            profile_path=details.get("profile_path"),
            biography=details.get("biography"),
            birthday=details.get("birthday"),
            place_of_birth=details.get("place_of_birth"),
            deathday=details.get("deathday"),
            created_at=now,
            updated_at=now,
        )
        update_fields = PERSON_DETAIL_FIELDS + ("updated_at",)
        stmt = stmt.on_conflict_do_update(
            index_elements=[PersonModel.tmdb_person_id],
            set_={field: getattr(stmt.excluded, field) for field in update_fields},
        )
        await self.executor.execute(stmt)
        return await self._resolve_local_id(person_id)

    async def upsert_person_basic(self, tmdb_person_id, name: Optional[str], profile_path: Optional[str]) -> int:
        """크레딧 목록에서 얻은 기본 정보만 저장 (전기 등 상세 정보는 유지)"""
        person_id = _require_tmdb_person_id(tmdb_person_id)
        now = utc_now_iso()

        stmt = sqlite_insert(PersonModel).values(
            tmdb_person_id=person_id,
            name=name or "Unknown",
            profile_path=profile_path,
            created_at=now,
            updated_at=now,
        )
        stmt = stmt.on_conflict_do_update(
            index_elements=[PersonModel.tmdb_person_id],
            set_={
                "name": stmt.excluded.name,
                "profile_path": stmt.excluded.profile_path,
                "updated_at": stmt.excluded.updated_at,
            },
        )
        await self.executor.execute(stmt)
        return await self._resolve_local_id(person_id)

    async def _resolve_local_id(self, tmdb_person_id: int) -> int:
        local_id = await self.executor.fetch_scalar(
            select(PersonModel.id).where(PersonModel.tmdb_person_id == tmdb_person_id)
        )
        if local_id is None:
            raise InvariantViolation("Failed to locate person after upsert.")
        return int(local_id)

    async def get_person_by_id(self, person_id: int) -> Optional[Person]:
        row = await self.executor.fetch_one(
            select(PersonModel.__table__).where(PersonModel.id == person_id)
        )
        return Person(**row) if row else None

    async def get_person_by_tmdb_id(self, tmdb_person_id: int) -> Optional[Person]:
        row = await self.executor.fetch_one(
            select(PersonModel.__table__).where(PersonModel.tmdb_person_id == tmdb_person_id)
        )
        return Person(**row) if row else None

    async def load_person(self, tmdb_person_id: int, refresh: bool = False) -> Person:
        """DB에서 인물 조회, 없거나 refresh 요청이면 TMDB에서 가져와서 저장"""
        if not refresh:
            existing = await self.get_person_by_tmdb_id(tmdb_person_id)
            # 크레딧에서만 저장된 인물은 상세 정보가 비어 있다
            if existing and existing.biography is not None:
                return existing

        details = await self.tmdb_service.get_person_details(tmdb_person_id)
        local_id = await self.upsert_person(tmdb_person_id, details)
        logger.info("Person %s stored (local id %s)", tmdb_person_id, local_id)

        person = await self.get_person_by_id(local_id)
        if person is None:
            raise InvariantViolation("Failed to load person after upsert.")
        return person
