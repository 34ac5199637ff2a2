# memento/schemas/person.py

from typing import Optional
from pydantic import BaseModel, Field

class Person(BaseModel):
    id: int = Field(description="로컬 인물 ID")
    tmdb_person_id: int = Field(description="TMDB 인물 ID")
    name: str = Field(description="이름")
    profile_path: Optional[str] = Field(default=None, description="프로필 이미지 경로")
    biography: Optional[str] = Field(default=None, description="전기")
    birthday: Optional[str] = Field(default=None, description="생일")
    place_of_birth: Optional[str] = Field(default=None, description="출생지")
    deathday: Optional[str] = Field(default=None, description="사망일")
    created_at: Optional[str] = Field(default=None, description="생성일시")
    updated_at: Optional[str] = Field(default=None, description="수정일시")

    class Config:
        from_attributes = True

class PersonStat(BaseModel):
    """역할별 상위 인물 집계"""
    id: int = Field(description="로컬 인물 ID")
    tmdb_person_id: int = Field(description="TMDB 인물 ID")
    name: str = Field(description="이름")
    profile_path: Optional[str] = Field(default=None, description="프로필 이미지 경로")
    play_count: int = Field(default=0, description="관람 횟수 합계")
    movie_count: int = Field(default=0, description="관람한 고유 영화 수")

class PersonAppearanceStat(BaseModel):
    """인물별/역할별 관람 집계 (인물 통계 페이지)"""
    id: int = Field(description="로컬 인물 ID")
    tmdb_person_id: int = Field(description="TMDB 인물 ID")
    name: str = Field(description="이름")
    profile_path: Optional[str] = Field(default=None, description="프로필 이미지 경로")
    role_type: str = Field(description="역할")
    total_appearances: int = Field(default=0, description="관람 횟수 합계")
    unique_movies: int = Field(default=0, description="관람한 고유 영화 수")
