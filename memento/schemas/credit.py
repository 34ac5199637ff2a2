# memento/schemas/credit.py

from typing import Optional
from pydantic import BaseModel, Field
from enum import Enum

class RoleType(str, Enum):
    director = "director"
    producer = "producer"
    actor = "actor"
    cinematographer = "cinematographer"
    music_composer = "music_composer"

class CreditInput(BaseModel):
    """로컬 인물 ID로 해석된 크레딧 한 건"""
    person_id: int = Field(description="로컬 인물 ID")
    role_type: RoleType = Field(description="역할")
    character_name: Optional[str] = Field(default=None, description="배역명 (배우만)")
    display_order: int = Field(default=0, description="표시 순서")

class MovieCredit(BaseModel):
    id: int = Field(description="크레딧 ID")
    role_type: str = Field(description="역할")
    character_name: Optional[str] = Field(default=None, description="배역명")
    display_order: int = Field(default=0, description="표시 순서")
    person_id: int = Field(description="로컬 인물 ID")
    tmdb_person_id: int = Field(description="TMDB 인물 ID")
    person_name: str = Field(description="인물 이름")
    profile_path: Optional[str] = Field(default=None, description="프로필 이미지 경로")
