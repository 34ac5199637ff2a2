# memento/services/place_service.py

from typing import List, Optional

from sqlalchemy import delete, insert, select, update

from memento.core.exceptions import InvariantViolation, NotFoundError, ValidationError
from memento.database import QueryExecutor, get_executor
from memento.models import PlaceModel
from memento.schemas import Place
from memento.utils import utc_now_iso


def _clean_name(name: Optional[str]) -> str:
    cleaned = (name or "").strip()
    if not cleaned:
        raise ValidationError("Place name is required.")
    return cleaned


class PlaceService:

    def __init__(self, executor: Optional[QueryExecutor] = None):
        self.executor = executor or get_executor()

    async def get_all_places(self) -> List[Place]:
        rows = await self.executor.fetch_all(
            select(PlaceModel.__table__).order_by(PlaceModel.name)
        )
        return [Place(**row) for row in rows]

    async def get_place(self, place_id: int) -> Optional[Place]:
        row = await self.executor.fetch_one(
            select(PlaceModel.__table__).where(PlaceModel.id == place_id)
        )
        return Place(**row) if row else None

    async def _ensure_name_available(self, name: str, place_id: Optional[int] = None) -> None:
        stmt = select(PlaceModel.id).where(PlaceModel.name == name)
        if place_id is not None:
            stmt = stmt.where(PlaceModel.id != place_id)
        if await self.executor.fetch_one(stmt.limit(1)):
            raise ValidationError(f"Place already exists: {name}")

    async def add_place(self, name: str, is_cinema: bool = False) -> Place:
        name = _clean_name(name)
        await self._ensure_name_available(name)
        await self.executor.execute(
            insert(PlaceModel).values(name=name, is_cinema=bool(is_cinema), created_at=utc_now_iso())
        )
        row = await self.executor.fetch_one(
            select(PlaceModel.__table__).where(PlaceModel.name == name)
        )
        if row is None:
            raise InvariantViolation("Failed to locate place after insert.")
        return Place(**row)

    async def update_place(self, place_id: int, name: str, is_cinema: bool) -> None:
        name = _clean_name(name)
        if await self.get_place(place_id) is None:
            raise NotFoundError(f"Place not found (id: {place_id})")
        await self._ensure_name_available(name, place_id)

        stmt = (
            update(PlaceModel)
            .where(PlaceModel.id == place_id)
            .values(name=name, is_cinema=bool(is_cinema))
        )
        await self.executor.execute(stmt)

    async def delete_place(self, place_id: int) -> None:
        """장소 삭제 (관람 기록의 place_id는 NULL이 됨)"""
        await self.executor.execute(delete(PlaceModel).where(PlaceModel.id == place_id))
