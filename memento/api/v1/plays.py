# memento/api/v1/plays.py

from typing import List
from fastapi import APIRouter, Depends, Path, status
from memento.core.dependencies import get_play_service
from memento.schemas import PlayUpdate, PlayWithMovie
from memento.services import PlayService

router = APIRouter()


@router.get("", response_model=List[PlayWithMovie], summary="전체 관람 기록")
async def get_all_plays(play_service: PlayService = Depends(get_play_service)):
    return await play_service.get_all_plays()


@router.put("/{play_id}", status_code=status.HTTP_204_NO_CONTENT, summary="관람 기록 수정")
async def update_play(
    payload: PlayUpdate,
    play_id: int = Path(description="관람 기록 ID"),
    play_service: PlayService = Depends(get_play_service),
):
    await play_service.update_play(play_id, payload.watched_at, payload.place_id, payload.watch_order)


@router.delete("/{play_id}", status_code=status.HTTP_204_NO_CONTENT, summary="관람 기록 삭제")
async def delete_play(
    play_id: int = Path(description="관람 기록 ID"),
    play_service: PlayService = Depends(get_play_service),
):
    await play_service.delete_play(play_id)
