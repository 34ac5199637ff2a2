# memento/core/config.py

import os
from functools import lru_cache
from pathlib import Path
from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def _default_data_dir() -> Path:
    base = os.getenv("XDG_DATA_HOME") or os.path.join(Path.home(), ".local", "share")
    return Path(base) / "memento"


class Settings(BaseSettings):
    """설정 클래스"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="MEMENTO_",
        case_sensitive=False,
        extra="ignore"
    )

    # 애플리케이션 설정
    app_name: str = Field(default="Memento", description="애플리케이션 이름")
    debug: bool = Field(default=False, description="디버그 모드")

    # 로컬 저장소 설정
    data_dir: Path = Field(default_factory=_default_data_dir, description="사용자 데이터 디렉터리")
    database_filename: str = Field(default="memento.db", description="SQLite 파일 이름")
    database_backend: Literal["sqlalchemy", "sqlite3"] = Field(
        default="sqlalchemy", description="sqlalchemy: 프로세스 내부 엔진, sqlite3: CLI 프로세스 실행"
    )
    sqlite3_binary: str = Field(default="sqlite3", description="sqlite3 실행 파일")
    database_echo: bool = Field(default=False, description="SQL 로그 출력")

    # TMDB API 설정
    tmdb_api_key: str = Field(default="", description="TMDB API Key")
    tmdb_base_url: str = Field(default="https://api.themoviedb.org/3", description="TMDB API URL")
    tmdb_image_base_url: str = Field(default="https://image.tmdb.org/t/p/", description="TMDB 이미지 URL")
    tmdb_language: str = Field(default="en-US", description="TMDB 응답 언어")
    tmdb_timeout: float = Field(default=10.0, description="요청 타임아웃")

    # IMDb 평점 스크래핑
    imdb_base_url: str = Field(default="https://www.imdb.com", description="IMDb URL")
    imdb_timeout: float = Field(default=10.0, description="요청 타임아웃")

    # 이미지 캐시
    image_cache_dir: Optional[Path] = Field(default=None, description="이미지 캐시 디렉터리")

    # 기록 동작
    auto_remove_from_watchlist: bool = Field(
        default=False, description="관람 기록 추가 시 왓치리스트에서 자동 제거"
    )

    @property
    def database_path(self) -> Path:
        return self.data_dir / self.database_filename

    @property
    def resolved_image_cache_dir(self) -> Path:
        return self.image_cache_dir or self.data_dir / "image-cache"

    @property
    def tmdb_params(self) -> dict[str, str]:
        """TMDB API 공통 쿼리 파라미터"""
        return {
            "api_key": self.tmdb_api_key,
            "language": self.tmdb_language,
        }


@lru_cache()
def get_settings() -> Settings:
    return Settings()
