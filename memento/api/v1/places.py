# memento/api/v1/places.py

from typing import List
from fastapi import APIRouter, Depends, Path, status
from memento.core.dependencies import get_place_service
from memento.schemas import Place, PlaceCreate
from memento.services import PlaceService

router = APIRouter()


@router.get("", response_model=List[Place], summary="장소 목록")
async def get_places(place_service: PlaceService = Depends(get_place_service)):
    return await place_service.get_all_places()


@router.post("", response_model=Place, status_code=status.HTTP_201_CREATED, summary="장소 추가")
async def add_place(payload: PlaceCreate, place_service: PlaceService = Depends(get_place_service)):
    return await place_service.add_place(payload.name, payload.is_cinema)


@router.put("/{place_id}", status_code=status.HTTP_204_NO_CONTENT, summary="장소 수정")
async def update_place(
    payload: PlaceCreate,
    place_id: int = Path(description="장소 ID"),
    place_service: PlaceService = Depends(get_place_service),
):
    await place_service.update_place(place_id, payload.name, payload.is_cinema)


@router.delete("/{place_id}", status_code=status.HTTP_204_NO_CONTENT, summary="장소 삭제")
async def delete_place(
    place_id: int = Path(description="장소 ID"),
    place_service: PlaceService = Depends(get_place_service),
):
    await place_service.delete_place(place_id)
