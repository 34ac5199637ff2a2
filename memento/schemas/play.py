# memento/schemas/play.py

from datetime import date
from typing import Optional
from pydantic import BaseModel, Field


class Play(BaseModel):
    id: int = Field(description="관람 기록 ID")
    movie_id: Optional[int] = Field(default=None, description="로컬 영화 ID")
    watched_at: str = Field(description="관람일 (YYYY-MM-DD)")
    watch_order: int = Field(default=1, description="같은 날 관람 순서")
    place_id: Optional[int] = Field(default=None, description="장소 ID")
    place_name: Optional[str] = Field(default=None, description="장소 이름")
    is_cinema: Optional[bool] = Field(default=None, description="영화관 여부")


class PlayWithMovie(Play):
    """전체 관람 기록 목록용"""

    title: str = Field(description="영화 제목")
    poster: Optional[str] = Field(default=None, description="포스터 경로")
    release_date: Optional[str] = Field(default=None, description="개봉일")
    tmdb_id: Optional[int] = Field(default=None, description="TMDB 영화 ID")


class PlayCreate(BaseModel):
    watched_at: date = Field(description="관람일")
    place_id: Optional[int] = Field(default=None, description="장소 ID")
    watch_order: Optional[int] = Field(default=None, ge=1, description="같은 날 관람 순서 (생략 시 자동)")


class PlayUpdate(BaseModel):
    watched_at: date = Field(description="관람일")
    place_id: Optional[int] = Field(default=None, description="장소 ID")
    watch_order: int = Field(default=1, ge=1, description="같은 날 관람 순서")
