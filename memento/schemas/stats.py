# memento/schemas/stats.py

from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field


class DashboardStats(BaseModel):
    total_plays: int = Field(default=0, description="전체 관람 횟수")
    unique_movies: int = Field(default=0, description="관람한 고유 영화 수")
    watchlist_count: int = Field(default=0, description="왓치리스트 크기")
    total_runtime_minutes: int = Field(default=0, description="고유 영화 기준 총 관람 시간(분)")


class RecentPlay(BaseModel):
    movie_id: int = Field(description="로컬 영화 ID")
    tmdb_id: Optional[int] = Field(default=None, description="TMDB 영화 ID")
    title: str = Field(description="영화 제목")
    poster: Optional[str] = Field(default=None, description="포스터 경로")
    release_date: Optional[str] = Field(default=None, description="개봉일")
    last_watched_at: str = Field(description="가장 최근 관람일")


class PeopleSort(str, Enum):
    most_appearances = "most_appearances"
    least_appearances = "least_appearances"
    most_movies = "most_movies"
    least_movies = "least_movies"
    name = "name"
