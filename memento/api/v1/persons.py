# memento/api/v1/persons.py

from typing import List
from fastapi import APIRouter, HTTPException, Depends, Path, Query
from memento.core.dependencies import get_movie_service, get_person_service
from memento.schemas import MovieSummary, Person, PersonCreditMovie, PersonFilmography
from memento.services import MovieService, PersonService

router = APIRouter()

@router.get("/{person_id}", response_model=Person, summary="인물 상세 정보")
async def get_person(
    person_id: int = Path(description="로컬 인물 ID"),
    person_service: PersonService = Depends(get_person_service)
):
    person = await person_service.get_person_by_id(person_id)
    if not person:
        raise HTTPException(status_code=404, detail="Person not found")
    return person

@router.post(
    "/tmdb/{tmdb_person_id}",
    response_model=Person,
    summary="TMDB 인물 가져오기",
    description="저장된 상세 정보가 없거나 refresh=true이면 TMDB에서 다시 가져옵니다."
)
async def load_person(
    tmdb_person_id: int = Path(description="TMDB 인물 ID"),
    refresh: bool = Query(default=False, description="강제 새로고침"),
    person_service: PersonService = Depends(get_person_service)
):
    return await person_service.load_person(tmdb_person_id, refresh=refresh)

@router.get("/{person_id}/movies", response_model=List[MovieSummary], summary="인물 참여 영화")
async def get_person_movies(
    person_id: int = Path(description="로컬 인물 ID"),
    movie_service: MovieService = Depends(get_movie_service)
):
    return await movie_service.get_movies_by_person_id(person_id)

@router.get(
    "/{person_id}/filmography",
    response_model=PersonFilmography,
    summary="인물 참여작 (관람/왓치리스트)",
    description="로컬에 저장된 참여작을 관람한 영화와 왓치리스트 영화로 나눕니다."
)
async def get_person_filmography(
    person_id: int = Path(description="로컬 인물 ID"),
    person_service: PersonService = Depends(get_person_service),
    movie_service: MovieService = Depends(get_movie_service)
):
    if not await person_service.get_person_by_id(person_id):
        raise HTTPException(status_code=404, detail="Person not found")
    return await movie_service.get_person_filmography(person_id)

@router.get(
    "/{person_id}/unseen-movies",
    response_model=List[PersonCreditMovie],
    summary="아직 보지 않은 출연작",
    description="TMDB 출연작과 감독작 중 관람 기록이나 왓치리스트에 없는 영화를 개봉일 역순으로 보여줍니다."
)
async def get_unseen_person_movies(
    person_id: int = Path(description="로컬 인물 ID"),
    person_service: PersonService = Depends(get_person_service),
    movie_service: MovieService = Depends(get_movie_service)
):
    person = await person_service.get_person_by_id(person_id)
    if not person:
        raise HTTPException(status_code=404, detail="Person not found")
    return await movie_service.get_unseen_person_movies(person.tmdb_person_id)
