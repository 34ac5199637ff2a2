# memento/schemas/search.py

from typing import Optional
from pydantic import BaseModel, Field


class MovieSearchResult(BaseModel):
    id: int = Field(description="TMDB 영화 ID")
    title: str = Field(description="영화 제목")
    original_title: Optional[str] = Field(default=None, description="원제")
    overview: Optional[str] = Field(default=None, description="줄거리")
    release_date: Optional[str] = Field(default=None, description="개봉일")
    poster_path: Optional[str] = Field(default=None, description="포스터 경로")
    vote_average: float = Field(default=0.0, description="평균 평점")


class PersonCreditMovie(MovieSearchResult):
    """TMDB 인물 출연작 (아직 보지 않은 영화 탐색용)"""
    character: Optional[str] = Field(default=None, description="배역명")
    job: Optional[str] = Field(default=None, description="직무")
