# memento/schemas/movie.py

from typing import List, Optional
from pydantic import BaseModel, Field


class Movie(BaseModel):
    id: int = Field(description="로컬 영화 ID")
    title: str = Field(description="영화 제목")
    imdb_id: Optional[str] = Field(default=None, description="IMDb ID (tt...)")
    tmdb_id: Optional[int] = Field(default=None, description="TMDB 영화 ID")
    poster: Optional[str] = Field(default=None, description="포스터 경로")
    tagline: Optional[str] = Field(default=None, description="태그라인")
    overview: Optional[str] = Field(default=None, description="줄거리")
    original_language: Optional[str] = Field(default=None, description="원어 코드")
    runtime: Optional[int] = Field(default=None, description="상영시간(분)")
    release_date: Optional[str] = Field(default=None, description="개봉일 (YYYY-MM-DD)")
    tmdb_average: Optional[float] = Field(default=None, description="TMDB 평균 평점")
    tmdb_vote_count: Optional[int] = Field(default=None, description="TMDB 투표 수")
    imdb_rating: Optional[float] = Field(default=None, description="IMDb 평점")
    imdb_vote_count: Optional[int] = Field(default=None, description="IMDb 투표 수")
    revenue: Optional[int] = Field(default=None, description="수익")
    letterboxd_url: Optional[str] = Field(default=None, description="Letterboxd URL")
    created_at: Optional[str] = Field(default=None, description="생성일시")
    updated_at: Optional[str] = Field(default=None, description="수정일시")

    class Config:
        from_attributes = True


class MovieSummary(BaseModel):
    """인물 페이지 등에 쓰는 영화 요약"""

    id: int = Field(description="로컬 영화 ID")
    title: str = Field(description="영화 제목")
    tmdb_id: Optional[int] = Field(default=None, description="TMDB 영화 ID")
    poster: Optional[str] = Field(default=None, description="포스터 경로")
    release_date: Optional[str] = Field(default=None, description="개봉일")


class WatchlistMovie(BaseModel):
    """왓치리스트 목록용 영화 정보"""

    id: int = Field(description="로컬 영화 ID")
    title: str = Field(description="영화 제목")
    tmdb_id: Optional[int] = Field(default=None, description="TMDB 영화 ID")
    poster: Optional[str] = Field(default=None, description="포스터 경로")
    release_date: Optional[str] = Field(default=None, description="개봉일")
    tagline: Optional[str] = Field(default=None, description="태그라인")
    overview: Optional[str] = Field(default=None, description="줄거리")
    original_language: Optional[str] = Field(default=None, description="원어 코드")
    runtime: Optional[int] = Field(default=None, description="상영시간(분)")
    tmdb_average: Optional[float] = Field(default=None, description="TMDB 평균 평점")
    tmdb_vote_count: Optional[int] = Field(default=None, description="TMDB 투표 수")
    added_at: str = Field(description="왓치리스트 추가일")


class ImdbRating(BaseModel):
    value: float = Field(description="평점")
    count: Optional[int] = Field(default=None, description="투표 수")
    best: float = Field(default=10, description="최고 점수")


class RefreshSummary(BaseModel):
    total: int = Field(default=0, description="대상 영화 수")
    succeeded: int = Field(default=0, description="성공 수")
    failed: int = Field(default=0, description="실패 수")


class PersonFilmography(BaseModel):
    """로컬에 저장된 인물 참여작을 관람/왓치리스트로 나눈 목록"""
    watched: List[MovieSummary] = Field(default_factory=list, description="관람한 영화")
    watchlist: List[MovieSummary] = Field(default_factory=list, description="왓치리스트 영화")
